"""Node abstraction for compositetree.

Node is the shared capability set of every tree element. Client code talks to
Node only: it can ask for a node's result, ask whether children can be
attached, and walk upward through the parent link, all without knowing which
concrete variant it holds.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..config import CompositeConfig, DEFAULT_CONFIG
from ..exceptions import InvalidConfigError, UnsupportedOperationError


class Node(ABC):
    """Abstract base class for leaves and branches.

    Child management is declared here rather than only on Branch so that
    trees can be assembled through the Node interface alone. The default
    implementations fail with UnsupportedOperationError; container variants
    override them.

    The parent link is a weak reference. It exists for upward navigation
    only and never keeps the owning Branch alive.
    """

    def __init__(self, name: Optional[str] = None,
                 config: Optional[CompositeConfig] = None):
        """Initialize an unattached node.

        Args:
            name: Optional display name used by repr and path helpers
            config: Node configuration (defaults to DEFAULT_CONFIG)

        Raises:
            InvalidConfigError: If the config fails validation
        """
        if config is None:
            config = DEFAULT_CONFIG
        else:
            problems = config.validate()
            if problems:
                raise InvalidConfigError(problems)

        self.name = name
        self.config = config
        self._parent_ref: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional['Node']:
        """The Branch currently holding this node, or None if unattached."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, parent: Optional['Node']) -> None:
        self.set_parent(parent)

    def set_parent(self, parent: Optional['Node']) -> None:
        """Replace the parent back-reference.

        Branch.add and Branch.remove are the only intended callers. No
        validation is performed.

        Args:
            parent: New owner, or None to detach
        """
        self._parent_ref = None if parent is None else weakref.ref(parent)

    @property
    def children(self) -> Tuple['Node', ...]:
        """Snapshot of the child sequence (always empty for non-containers)."""
        return ()

    def is_composite(self) -> bool:
        """Check whether this node can hold children.

        Returns:
            True if add/remove are supported
        """
        return False

    def add(self, child: 'Node') -> None:
        """Attach a child node.

        Raises:
            UnsupportedOperationError: Always, for nodes that hold no children
        """
        raise UnsupportedOperationError(self, "add")

    def remove(self, child: 'Node') -> None:
        """Detach a child node.

        Raises:
            UnsupportedOperationError: Always, for nodes that hold no children
        """
        raise UnsupportedOperationError(self, "remove")

    @abstractmethod
    def operation(self) -> str:
        """Compute this node's result.

        This is the single polymorphic entry point: a leaf returns its own
        result and a branch combines the results of its children.

        Returns:
            Rendered result string
        """
        pass

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        if self.name is None:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}(name={self.name!r})"
