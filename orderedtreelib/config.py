"""Configuration system for OrderedTreeLib.

This module defines how users describe a traversal: which order to walk
the tree in, what to collect from each node, and which nodes to keep.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalStrategy(Enum):
    """Order in which nodes are visited."""
    IN_ORDER = "in_order"           # Ascending values
    PRE_ORDER = "pre_order"         # Parent before children
    POST_ORDER = "post_order"       # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level
    CUSTOM = "custom"               # User-defined traverser


class DataRequirement(Enum):
    """What to collect from each visited node."""
    VALUE = "value"                 # The stored value
    NODE = "node"                   # The node object itself
    PATH = "path"                   # Values from the root down to the node
    CUSTOM = "custom"               # User-defined collector


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node) -> bool:
        """Check if a node passes the filters.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.include_filter:
            return self.include_filter(node)
        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                  # Minimum depth to yield
    max_depth: Optional[int] = None     # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The ExecutionPlan validates this configuration against the adapter
    before walking anything.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Node filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Stop after this many yielded nodes
    max_nodes: Optional[int] = None

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config yielding every value in ascending order."""
        return cls(
            strategy=TraversalStrategy.IN_ORDER,
            data_requirements=DataRequirement.VALUE,
        )

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Config yielding the top levels of the tree, level by level.

        Args:
            max_depth: How deep to go (default 1 = root and its children)
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
            data_requirements=DataRequirement.NODE,
        )

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

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
