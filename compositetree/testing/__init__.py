"""Testing utilities for compositetree consumers."""

from .fixtures import SampleTree, TreeInvariantHelper, build_sample_tree

__all__ = ['SampleTree', 'TreeInvariantHelper', 'build_sample_tree']
