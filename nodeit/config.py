"""Configuration system for nodeit.

This module defines how users specify traversal requirements for the
high-level API: how deep to walk, which nodes to yield and whether
excluded branches are pruned.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .core.node import CONTAINER_KINDS
from .core.predicates import Predicate, all_nodes, intersect, negate


class ConfigurationError(ValueError):
    """Raised when a TraversalConfig is inconsistent."""
    pass


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Predicate] = None  # Include predicate
    exclude_filter: Optional[Predicate] = None  # Exclude predicate

    # Don't descend into excluded branches
    prune_on_exclude: bool = False

    def should_include(self, node) -> bool:
        """Check if a node should be yielded.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter is not None and self.exclude_filter(node):
            return False
        if self.include_filter is not None:
            return self.include_filter(node)
        return True

    def should_explore_children(self, node) -> bool:
        """Check if the children of a node should be walked."""
        if node.kind not in CONTAINER_KINDS:
            return False
        if not self.prune_on_exclude or self.exclude_filter is None:
            return True
        return not self.exclude_filter(node)

    def to_predicate(self) -> Predicate:
        """Fold the include/exclude filters into a single predicate."""
        predicates = []
        if self.exclude_filter is not None:
            predicates.append(negate(self.exclude_filter))
        if self.include_filter is not None:
            predicates.append(self.include_filter)
        if not predicates:
            return all_nodes
        return intersect(*predicates)


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depth 0 is the root node handed to the traversal.
    """

    min_depth: int = 0                # Minimum depth to yield
    max_depth: Optional[int] = None   # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children at this depth should be explored.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class TraversalConfig:
    """Complete configuration for a tree walk.

    This is the primary way users of ``nodeit.api`` specify what they want
    from a traversal. It is validated before any node is touched.
    """

    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Stop after this many nodes have been yielded
    max_nodes: Optional[int] = None

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> "TraversalConfig":
        """Create config for a shallow walk.

        Args:
            max_depth: How deep to walk (default 1 = immediate children only)
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        for name in ("include_filter", "exclude_filter"):
            value = getattr(self.filter, name)
            if value is not None and not callable(value):
                errors.append(f"{name} must be callable")

        return errors

    def check(self) -> "TraversalConfig":
        """Raise ConfigurationError if the config is invalid.

        Returns:
            self, so the call can be chained
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")
        return self
