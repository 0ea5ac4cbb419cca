"""Branch nodes: containers that fold their children's results."""

import sys
from typing import List, Tuple

from ..config import ReparentPolicy
from ..exceptions import AlreadyAttachedError, CycleError
from .node import Node


class Branch(Node):
    """A node owning an ordered sequence of child nodes.

    Branches usually delegate the real work to their children and then
    combine the results. Duplicates are permitted and insertion order is
    preserved. For every child in the sequence, the child's parent link names
    this Branch; add and remove keep that link current.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._children: List[Node] = []

    @property
    def children(self) -> Tuple[Node, ...]:
        """Snapshot of the child sequence in order."""
        return tuple(self._children)

    def is_composite(self) -> bool:
        """Branches always accept children, even when empty."""
        return True

    def add(self, child: Node) -> None:
        """Append a child to the end of the sequence and point it at self.

        With the default configuration no cycle, self-attachment or
        duplicate check is made; callers are responsible for keeping the
        structure acyclic.

        Args:
            child: Node to attach

        Raises:
            TypeError: If child is not a Node
            CycleError: If check_cycles is on and self is reachable from child
            AlreadyAttachedError: Under ReparentPolicy.REJECT when another
                Branch already owns child
        """
        if not isinstance(child, Node):
            raise TypeError(f"Branch children must be Node instances, got {type(child).__name__}")

        if self.config.check_cycles:
            self._check_cycle(child)

        previous = child.parent
        if previous is not None and previous is not self:
            policy = self.config.reparent_policy
            if policy is ReparentPolicy.REJECT:
                raise AlreadyAttachedError(child, previous)
            if policy is ReparentPolicy.DETACH:
                while any(existing is child for existing in previous.children):
                    previous.remove(child)
            elif self.config.verbose:
                print(f"\nWARNING: {child!r} is still listed under {previous!r} "
                      f"after being added to {self!r}", file=sys.stderr)

        self._children.append(child)
        child.parent = self

    def remove(self, child: Node) -> None:
        """Remove the first occurrence of child and clear its parent link.

        Removing a child that is not present is a no-op.

        Args:
            child: Node to detach
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child.parent = None
                return

    def operation(self) -> str:
        """Fold the children's results in order.

        Each child's ``operation()`` is called exactly once, recursing through
        nested branches, and the results are combined by the configured
        ResultFormat. Depth is bounded only by the interpreter stack.
        """
        results = [child.operation() for child in self._children]
        return self.config.result_format.combine(results)

    def _check_cycle(self, child: Node) -> None:
        """Fail if self is reachable from child through child sequences.

        Membership is followed rather than parent links, because under
        ReparentPolicy.ALLOW a node can stay listed under an owner its
        parent link no longer names.
        """
        visited = set()
        stack = [child]
        while stack:
            node = stack.pop()
            if node is self:
                raise CycleError(child, f"Adding {child!r} to {self!r} would create a cycle")
            if id(node) in visited:
                continue
            visited.add(id(node))
            stack.extend(node.children)
