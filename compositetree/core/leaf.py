"""Leaf nodes: the recursion base case of a composite tree."""

from .node import Node


class Leaf(Node):
    """A node with no children.

    Leaves do the actual work of a composition. ``operation()`` returns the
    configured leaf marker without recursion or side effects, and the
    inherited ``add``/``remove`` raise UnsupportedOperationError.
    """

    def operation(self) -> str:
        """Return the leaf marker (``"LEAF"`` by default)."""
        return self.config.result_format.leaf_marker
