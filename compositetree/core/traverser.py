"""Tree traversal strategies for compositetree.

Traversers walk a composite tree through the Node interface only, reading
``node.children`` and never inspecting concrete types. Each distinct node
(by identity) is yielded once, so shared subtrees and accidental cycles do
not cause endless walks.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple

from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal: every node at depth N before depth N+1."""

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()

            if id(node) in visited:
                continue
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and node.is_composite():
                for child in node.children:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a branch before its children, in the same order that
    ``operation()`` descends.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        visited: Set[int] = set()
        # Explicit stack keeps deep trees off the interpreter stack
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            if id(node) in visited:
                continue
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and node.is_composite():
                for child in reversed(node.children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits children before their branch. Good for calculating aggregate
    values bottom-up.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        visited: Set[int] = set()
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            if id(node) in visited:
                continue
            visited.add(id(node))

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth) and node.is_composite():
                for child in reversed(node.children):
                    stack.append((child, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal that completes each level before the next."""

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        current_level: List[Node] = [root]
        current_depth = 0
        visited: Set[int] = set()

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[Node] = []

            for node in current_level:
                if id(node) in visited:
                    continue
                visited.add(id(node))

                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(current_depth, max_depth) and node.is_composite():
                    next_level.extend(node.children)

            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
