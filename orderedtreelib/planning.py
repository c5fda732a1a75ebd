"""Execution planning for OrderedTreeLib.

The ExecutionPlan validates that a TraversalConfig can be satisfied by
a TreeAdapter and then drives the traversal.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter
from .core.collector import (
    DataCollector,
    NodeCollector,
    PathCollector,
    ValueCollector,
)
from .core.traverser import TreeTraverser, create_traverser
from .exceptions import OrderedTreeError

logger = logging.getLogger(__name__)


class CapabilityMismatchError(OrderedTreeError):
    """Raised when configuration requirements can't be met by adapter."""
    pass


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    Bridges user intent (TraversalConfig) and execution: it checks the
    configuration, checks the adapter can serve it, and assembles the
    traverser and collector.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Tree adapter for the specific tree type

        Raises:
            CapabilityMismatchError: If adapter can't satisfy config
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Adapter limitations: {'; '.join(capability_issues)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

    def _validate_capabilities(self) -> List[str]:
        issues = []
        if (self.config.strategy == TraversalStrategy.IN_ORDER
                and not self.adapter.supports_ordered_children()):
            issues.append(
                "In-order traversal requested but adapter has no left/right children"
            )
        return issues

    def _select_traverser(self) -> TreeTraverser:
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser
        return create_traverser(self.config.strategy.value, self.adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.NODE: NodeCollector,
            DataRequirement.PATH: PathCollector,
        }
        return collector_map[self.config.data_requirements](self.adapter)

    def execute(self, root: Any) -> Iterator[Tuple[Any, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.filter.should_include(node):
                continue
            if not self.config.depth.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

            if self.config.max_nodes is not None and self.nodes_processed >= self.config.max_nodes:
                logger.debug("Stopping traversal after %d nodes", self.nodes_processed)
                break

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan."""
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
