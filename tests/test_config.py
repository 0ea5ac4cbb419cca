"""
Tests for CompositeConfig, ResultFormat and construction-time validation.
"""

import dataclasses

import pytest

from compositetree import (
    Branch,
    CompositeConfig,
    DEFAULT_CONFIG,
    InvalidConfigError,
    Leaf,
    ReparentPolicy,
    ResultFormat,
)


class TestCompositeConfig:
    """Defaults, convenience constructors and validation."""

    def test_defaults_match_reference_behavior(self):
        config = CompositeConfig()
        assert config.check_cycles is False
        assert config.reparent_policy is ReparentPolicy.ALLOW
        assert config.verbose is False
        assert config.result_format == ResultFormat()

    def test_reference_constructor(self):
        assert CompositeConfig.reference() == CompositeConfig()

    def test_strict_constructor(self):
        config = CompositeConfig.strict()
        assert config.check_cycles is True
        assert config.reparent_policy is ReparentPolicy.REJECT

    def test_default_config_is_valid(self):
        assert DEFAULT_CONFIG.validate() == []

    def test_nodes_share_default_config(self):
        assert Leaf().config is DEFAULT_CONFIG
        assert Branch().config is DEFAULT_CONFIG

    def test_config_is_immutable(self):
        config = CompositeConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.reparent_policy = ReparentPolicy.DETACH

    def test_shared_default_cannot_be_changed_through_a_node(self):
        with pytest.raises(AttributeError):
            Leaf().config.check_cycles = True

        assert Branch().config.check_cycles is False
        assert DEFAULT_CONFIG == CompositeConfig()

    def test_replace_derives_a_variant(self):
        config = dataclasses.replace(DEFAULT_CONFIG, check_cycles=True)
        assert config.check_cycles is True
        assert DEFAULT_CONFIG.check_cycles is False

    def test_validate_reports_empty_markers(self):
        config = CompositeConfig(result_format=ResultFormat(leaf_marker="", branch_marker=""))
        errors = config.validate()
        assert "leaf_marker cannot be empty" in errors
        assert "branch_marker cannot be empty" in errors

    def test_validate_reports_bad_policy(self):
        config = CompositeConfig(reparent_policy="detach")
        assert "reparent_policy must be a ReparentPolicy" in config.validate()

    def test_invalid_config_rejected_at_construction(self):
        config = CompositeConfig(result_format=ResultFormat(leaf_marker=""))

        with pytest.raises(InvalidConfigError) as exc_info:
            Leaf(config=config)

        assert exc_info.value.problems == ["leaf_marker cannot be empty"]

    def test_invalid_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            Branch(config=CompositeConfig(result_format="not a format"))


class TestResultFormat:
    """ResultFormat is an immutable value."""

    def test_frozen(self):
        fmt = ResultFormat()
        with pytest.raises(AttributeError):
            fmt.leaf_marker = "OTHER"

    def test_equality(self):
        assert ResultFormat() == ResultFormat()
        assert ResultFormat(separator=",") != ResultFormat()
