"""Execution planning for WalkTreeLib.

The ExecutionPlan validates that a TraversalConfig can be satisfied by an
Adjacency and assembles the traverser that will run it.
"""

import logging
from typing import Any, Dict, List

from .config import TraversalConfig, TraversalStrategy
from .core.adapter import Adjacency, as_adjacency
from .core.errors import CapabilityMismatchError
from .core.iterator import Traversal
from .core.traverser import Traverser, create_traverser

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for a traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. It checks the configuration and the adjacency's
    capabilities before any traversal begins.
    """

    def __init__(self, config: TraversalConfig, adjacency: Any):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adjacency: Adjacency (or Mapping / callable) for the graph; with
                the CUSTOM strategy the custom traverser's own adjacency is
                the one validated and walked

        Raises:
            CapabilityMismatchError: If the adjacency can't satisfy config
            ValueError: If adjacency is None
        """
        self.config = config
        self.adjacency: Adjacency = as_adjacency(adjacency)

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        # A custom traverser walks its own adjacency; check that one
        self.strategy = config.strategy
        if config.strategy == TraversalStrategy.CUSTOM:
            self.adjacency = config.custom_traverser.adjacency
            self.strategy = getattr(config.custom_traverser, 'strategy', TraversalStrategy.CUSTOM)

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Adjacency limitations: {'; '.join(capability_issues)}"
            )

        self.traverser = self._select_traverser()
        logger.debug("Execution plan ready: %s", self.get_summary())

    def _validate_capabilities(self) -> List[str]:
        """Validate adjacency can satisfy configuration requirements.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []

        if self.config.require_removal and not self.adjacency.supports_removal():
            issues.append(
                f"{self.adjacency.__class__.__name__} does not support edge removal"
            )

        if self.strategy.requires_finite_depth:
            finite = self.adjacency.is_finite()
            if finite is False:
                issues.append(
                    f"{self.strategy.value} traversal never terminates "
                    f"on a cyclic graph"
                )
            elif finite is None:
                logger.info(
                    "%s cannot tell whether it is acyclic; %s traversal assumes it is",
                    self.adjacency.__class__.__name__, self.strategy.value
                )

        return issues

    def _select_traverser(self) -> Traverser:
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser
        return create_traverser(self.config.strategy, self.adjacency)

    def execute(self, root: Any) -> Traversal:
        """Build the traversal for this plan.

        Args:
            root: Starting vertex

        Returns:
            Lazy Traversal, bounded by config.limit
        """
        return self.traverser.traverse(root, limit=self.config.limit)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'limit': self.config.limit,
            'require_removal': self.config.require_removal,
            'adjacency': self.adjacency.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
        }
