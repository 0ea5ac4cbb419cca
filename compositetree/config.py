"""Configuration system for compositetree.

This module defines how users tune node behavior: how results are rendered,
and which structural guards run when children are attached.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence


class ReparentPolicy(Enum):
    """What Branch.add does with a child that another Branch already owns.

    The child's single parent reference can only name one owner, so only
    DETACH and REJECT keep sequence membership and back-references in sync.
    """
    ALLOW = "allow"      # Append anyway; previous owner keeps its entry
    DETACH = "detach"    # Remove from the previous owner first
    REJECT = "reject"    # Raise AlreadyAttachedError


@dataclass(frozen=True)
class ResultFormat:
    """How leaf and branch results are rendered by ``operation()``."""

    leaf_marker: str = "LEAF"
    branch_marker: str = "BRANCH"
    separator: str = "+"
    opening: str = "["
    closing: str = "]"

    def combine(self, results: Sequence[str]) -> str:
        """Combine child results into one branch result, preserving order.

        Args:
            results: Child results in sequence order

        Returns:
            Rendered branch result, e.g. ``BRANCH[LEAF+LEAF]``
        """
        return f"{self.branch_marker}{self.opening}{self.separator.join(results)}{self.closing}"


@dataclass(frozen=True)
class CompositeConfig:
    """Complete configuration for nodes in a composite tree.

    Nodes built without an explicit config share DEFAULT_CONFIG, which
    reproduces the unchecked reference behavior. Instances are frozen so a
    shared config cannot be changed underneath the nodes that hold it; use
    ``dataclasses.replace`` to derive a variant.
    """

    # Rendering
    result_format: ResultFormat = field(default_factory=ResultFormat)

    # Structural guards
    check_cycles: bool = False
    reparent_policy: ReparentPolicy = ReparentPolicy.ALLOW

    # Reporting
    verbose: bool = False  # Warn on stderr when ALLOW leaves two owners

    # Convenience constructors for common configurations

    @classmethod
    def reference(cls) -> 'CompositeConfig':
        """Create config with no guards at all."""
        return cls()

    @classmethod
    def strict(cls) -> 'CompositeConfig':
        """Create config that rejects cycles and double ownership.

        Returns:
            CompositeConfig with every structural guard enabled
        """
        return cls(
            check_cycles=True,
            reparent_policy=ReparentPolicy.REJECT,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.result_format, ResultFormat):
            errors.append("result_format must be a ResultFormat")
        else:
            if not self.result_format.leaf_marker:
                errors.append("leaf_marker cannot be empty")
            if not self.result_format.branch_marker:
                errors.append("branch_marker cannot be empty")

        if not isinstance(self.reparent_policy, ReparentPolicy):
            errors.append("reparent_policy must be a ReparentPolicy")

        return errors


DEFAULT_CONFIG = CompositeConfig()
