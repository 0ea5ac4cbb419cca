"""Test fixtures for compositetree consumers.

These helpers build the canonical sample tree and check parent-link
consistency, so projects embedding compositetree can assert tree shape in
their own suites without reaching into private attributes.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import CompositeConfig
from ..core.branch import Branch
from ..core.leaf import Leaf
from ..core.node import Node


@dataclass
class SampleTree:
    """The sample tree ``BRANCH[BRANCH[LEAF+LEAF]+BRANCH[LEAF]]``."""

    root: Branch
    branch1: Branch
    branch2: Branch
    leaves: List[Leaf] = field(default_factory=list)


def build_sample_tree(config: Optional[CompositeConfig] = None) -> SampleTree:
    """Build the sample tree: two leaves under branch1, one under branch2.

    Args:
        config: Configuration shared by every node (defaults to DEFAULT_CONFIG)

    Returns:
        SampleTree holding references to every node
    """
    leaves = [Leaf(name=f"leaf{i}", config=config) for i in range(1, 4)]

    branch1 = Branch(name="branch1", config=config)
    branch1.add(leaves[0])
    branch1.add(leaves[1])

    branch2 = Branch(name="branch2", config=config)
    branch2.add(leaves[2])

    root = Branch(name="tree", config=config)
    root.add(branch1)
    root.add(branch2)

    return SampleTree(root=root, branch1=branch1, branch2=branch2, leaves=leaves)


class TreeInvariantHelper:
    """Public test fixture for verifying parent links.

    Example:
        helper = TreeInvariantHelper(tree)
        assert helper.parent_link_violations() == []
    """

    def __init__(self, root: Node):
        """Initialize with the root of the tree to inspect.

        Args:
            root: Root node; its own parent link is not checked
        """
        self._root = root

    def _walk(self) -> List[Node]:
        """Distinct nodes reachable from the root, pre-order."""
        seen = set()
        ordered = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            ordered.append(node)
            stack.extend(reversed(node.children))
        return ordered

    def parent_link_violations(self) -> List[str]:
        """List children whose parent link does not name the branch holding them.

        Returns:
            Human-readable descriptions (empty if all links are consistent)
        """
        violations = []
        for node in self._walk():
            for child in node.children:
                if child.parent is not node:
                    violations.append(
                        f"{child!r} is held by {node!r} but points at {child.parent!r}"
                    )
        return violations

    def membership_counts(self) -> Dict[int, int]:
        """Count how many child sequences hold each node, keyed by id()."""
        counts: Dict[int, int] = {}
        for node in self._walk():
            for child in node.children:
                counts[id(child)] = counts.get(id(child), 0) + 1
        return counts

    def owners_of(self, target: Node) -> List[Node]:
        """Every branch whose sequence contains target."""
        return [node for node in self._walk()
                if any(child is target for child in node.children)]

    def assert_consistent(self) -> None:
        """Raise AssertionError listing every parent-link violation."""
        violations = self.parent_link_violations()
        assert not violations, "Inconsistent parent links:\n" + "\n".join(violations)
