"""High-level API for compositetree.

This module provides simple, functional interfaces for common questions
about a composite tree: walking it, counting and finding nodes, navigating
upward through parent links, and folding custom payloads over it.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Set

from .core.node import Node
from .core.traverser import create_traverser
from .exceptions import CycleError


def traverse_tree(
    root: Node,
    strategy: str = "dfs_pre",
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be yielded

    Yields:
        Nodes that match the criteria

    Example:
        >>> for node in traverse_tree(tree, strategy="bfs", max_depth=1):
        ...     print(node)
    """
    traverser = create_traverser(strategy)
    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        if include_filter is None or include_filter(node):
            yield node


def count_nodes(root: Node, **kwargs) -> int:
    """Count the distinct nodes reachable from root.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: Node,
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find nodes that match a predicate.

    Args:
        root: Starting node for traversal
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_leaf_nodes(root: Node, **kwargs) -> Iterator[Node]:
    """Get all non-composite nodes in a tree."""
    for node in traverse_tree(root, **kwargs):
        if not node.is_composite():
            yield node


def get_tree_stats(root: Node, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting node for traversal
        **kwargs: strategy, max_depth and min_depth (see traverse_tree)

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    strategy = kwargs.pop('strategy', 'bfs')
    traverser = create_traverser(strategy)
    for node, depth in traverser.traverse(root, **kwargs):
        stats['total_nodes'] += 1

        if not node.is_composite():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)

        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']

    return stats


def get_ancestors(node: Node) -> List[Node]:
    """Get the ancestors of a node, nearest first.

    Args:
        node: Node to start from

    Returns:
        List from the parent up to the root (empty for a root)

    Raises:
        CycleError: If the parent chain loops back on itself
    """
    ancestors = []
    seen: Set[int] = {id(node)}
    current = node.parent
    while current is not None:
        if id(current) in seen:
            raise CycleError(current, f"Parent chain of {node!r} loops through {current!r}")
        seen.add(id(current))
        ancestors.append(current)
        current = current.parent
    return ancestors


def get_root(node: Node) -> Node:
    """Follow parent links up to the topmost node."""
    ancestors = get_ancestors(node)
    return ancestors[-1] if ancestors else node


def get_depth(node: Node) -> int:
    """Depth of node measured through parent links (root = 0)."""
    return len(get_ancestors(node))


def get_path(node: Node) -> List[str]:
    """Get display labels from the root down to node.

    Nodes without a name are labelled with their class name.
    """
    chain = [node] + get_ancestors(node)
    return [n.name if n.name is not None else type(n).__name__ for n in reversed(chain)]


def fold(
    root: Node,
    leaf_fn: Callable[[Node], Any],
    combine_fn: Callable[[Node, List[Any]], Any],
) -> Any:
    """Fold a custom payload over the tree, bottom-up.

    This is the general form of ``operation()``: every non-composite node is
    mapped with ``leaf_fn`` and every composite node receives the list of its
    children's values, in order, through ``combine_fn``. Duplicated children
    contribute once per occurrence, exactly as ``operation()`` counts them.

    The walk uses an explicit stack, so depth is not limited by the
    interpreter's recursion limit.

    Args:
        root: Node to fold from
        leaf_fn: Value for a node without children capability
        combine_fn: Combines a composite node's child values

    Returns:
        The folded value for root

    Raises:
        CycleError: If a composite node is reached again while its own
            subtree is still being folded

    Example:
        >>> fold(tree, lambda leaf: 1, lambda branch, values: sum(values))
        3
    """
    results: List[List[Any]] = [[]]
    stack = [(root, False)]
    active: Set[int] = set()

    while stack:
        node, expanded = stack.pop()

        if not node.is_composite():
            results[-1].append(leaf_fn(node))
            continue

        if expanded:
            active.discard(id(node))
            values = results.pop()
            results[-1].append(combine_fn(node, values))
            continue

        if id(node) in active:
            raise CycleError(node, f"{node!r} is its own descendant")
        active.add(id(node))

        stack.append((node, True))
        results.append([])
        for child in reversed(node.children):
            stack.append((child, False))

    return results[0][0]


def render_tree(root: Node, indent: str = "  ") -> str:
    """Render an indented outline of the tree for debugging.

    Each line shows a node's repr; shared nodes appear only at their first
    position.
    """
    traverser = create_traverser('dfs_pre')
    lines = [f"{indent * depth}{node!r}" for node, depth in traverser.traverse(root)]
    return "\n".join(lines)
