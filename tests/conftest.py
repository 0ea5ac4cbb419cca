"""Shared pytest configuration and fixtures for compositetree tests."""

import pytest

from compositetree.testing import build_sample_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep-tree tests excluded by run_tests.py")


@pytest.fixture
def sample():
    """The sample tree BRANCH[BRANCH[LEAF+LEAF]+BRANCH[LEAF]]."""
    return build_sample_tree()
