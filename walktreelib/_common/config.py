"""Configuration system for WalkTreeLib.

This module defines how users specify their traversal requirements:
which strategy to use, how many walks to produce at most, and what the
adjacency must be able to do.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class TraversalStrategy(Enum):
    """How to traverse the graph.

    Different strategies are optimal for different use cases.
    """
    PRE_ORDER = "pre_order"         # Parent before children
    BREADTH_FIRST = "bfs"           # Level by level
    POST_ORDER = "post_order"       # Children before parent
    LEAVES = "leaves"               # Only childless vertices
    CHILDREN = "children"           # Root's edges only
    CUSTOM = "custom"               # User-defined traverser

    @property
    def requires_finite_depth(self) -> bool:
        """True if the strategy must reach the bottom before emitting."""
        return self in (TraversalStrategy.POST_ORDER, TraversalStrategy.LEAVES)


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The ExecutionPlan validates this configuration against the
    capabilities of the Adjacency.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Maximum walks produced per iteration (None = unlimited)
    limit: Optional[int] = None

    # Fail planning unless the adjacency can remove edges
    require_removal: bool = False

    # Convenience constructors for common configurations

    @classmethod
    def bounded(cls, limit: int,
                strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST) -> 'TraversalConfig':
        """Create config for sampling a possibly cyclic graph.

        Args:
            limit: Maximum number of walks to produce
            strategy: A cycle-tolerant strategy

        Returns:
            TraversalConfig with a walk limit
        """
        return cls(strategy=strategy, limit=limit)

    @classmethod
    def editing(cls, strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER) -> 'TraversalConfig':
        """Create config for a traversal that removes edges as it goes."""
        return cls(strategy=strategy, require_removal=True)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.limit is not None and self.limit < 0:
            errors.append("limit cannot be negative")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        return errors
