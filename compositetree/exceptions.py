"""Exceptions raised by compositetree.

Every error is surfaced directly to the caller that triggered it. Nothing in
the library catches or retries these.
"""

from typing import Any, Optional


class CompositeError(Exception):
    """Base class for all compositetree errors."""
    pass


class UnsupportedOperationError(CompositeError):
    """Raised when a child-management call reaches a node that has no children.

    Leaves refuse ``add`` and ``remove`` loudly so that trying to nest under a
    leaf is visible at the call site. Check ``node.is_composite()`` first to
    avoid it.
    """

    def __init__(self, node: Any, operation: str):
        self.node = node
        self.operation = operation
        super().__init__(
            f"{type(node).__name__} does not support '{operation}'"
        )


class CycleError(CompositeError):
    """Raised when a node would become (or already is) its own ancestor."""

    def __init__(self, node: Any, message: Optional[str] = None):
        self.node = node
        super().__init__(message or f"{node!r} would become its own ancestor")


class AlreadyAttachedError(CompositeError):
    """Raised under ReparentPolicy.REJECT when a child already has an owner."""

    def __init__(self, child: Any, current_parent: Any):
        self.child = child
        self.current_parent = current_parent
        super().__init__(
            f"{child!r} is already attached to {current_parent!r}"
        )


class InvalidConfigError(CompositeError, ValueError):
    """Raised when a CompositeConfig fails validation."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("Invalid composite configuration: " + "; ".join(self.problems))
