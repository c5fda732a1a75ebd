"""Visitors and data collectors for OrderedTreeLib.

A visitor is the action taken for each node during a traversal. It is
what ``OrderedTree.visit_in_order`` calls for every node, and what an
ExecutionPlan uses to turn visited nodes into results.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .adapter import OrderedTreeAdapter, TreeAdapter


class Visitor(ABC):
    """Per-node action invoked once per node, in traversal order."""

    @abstractmethod
    def visit(self, node: Any) -> None:
        pass


class DataCollector(Visitor):
    """Visitor that turns every visited node into a stored result.

    Subclasses only decide WHAT to extract from a node. ``visit`` appends
    the extracted data to ``results``; an ExecutionPlan calls ``collect``
    directly and yields the data alongside the node.
    """

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
                (defaults to OrderedTreeAdapter)
        """
        self.adapter = adapter or OrderedTreeAdapter()
        self.results: List[Any] = []

    @abstractmethod
    def collect(self, node: Any, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth of the node. ``visit`` passes the depth below
                the structural root (``adapter.get_depth``); an
                ExecutionPlan passes the depth below the node the
                traversal started from. The two agree when the whole
                tree is walked.

        Returns:
            Collected data (type depends on collector)
        """
        pass

    def visit(self, node: Any) -> None:
        self.results.append(self.collect(node, self.adapter.get_depth(node)))

    def reset(self) -> None:
        self.results = []


class ValueCollector(DataCollector):
    """Collects node values."""

    def collect(self, node: Any, depth: int) -> Any:
        return node.value


class NodeCollector(DataCollector):
    """Collects the nodes themselves."""

    def collect(self, node: Any, depth: int) -> Any:
        return node


class PathCollector(DataCollector):
    """Collects the values on the path from the root down to each node."""

    def collect(self, node: Any, depth: int) -> List[Any]:
        path = [node.value]
        current = node
        while True:
            parent = self.adapter.get_parent(current)
            if parent is None:
                break
            path.insert(0, parent.value)
            current = parent
        return path


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Any, int], Any],
                 adapter: Optional[TreeAdapter] = None):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
            adapter: TreeAdapter for tree navigation
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Any, depth: int) -> Any:
        return self.collect_func(node, depth)


class CallbackVisitor(Visitor):
    """Visitor that calls a function for every node."""

    def __init__(self, callback: Callable[[Any], None]):
        self.callback = callback

    def visit(self, node: Any) -> None:
        self.callback(node)


class CountingVisitor(Visitor):
    """Counts visited nodes."""

    def __init__(self):
        self.count = 0

    def visit(self, node: Any) -> None:
        self.count += 1


class AggregateCollector(Visitor):
    """Base class for visitors that fold node values into one result.

    Subclasses implement ``aggregate``; ``result`` is None until at least
    one node has been visited.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        """Initialize with an optional value extractor.

        Args:
            key: Function mapping a node value to the quantity to aggregate
        """
        self.key = key or (lambda value: value)
        self.result: Any = None

    @abstractmethod
    def aggregate(self, current: Any, value: Any) -> Any:
        """Combine the running result with one more value."""
        pass

    def visit(self, node: Any) -> None:
        value = self.key(node.value)
        if value is None:
            return
        if self.result is None:
            self.result = value
        else:
            self.result = self.aggregate(self.result, value)


class SumCollector(AggregateCollector):
    """Sums values across the visited nodes."""

    def aggregate(self, current: Any, value: Any) -> Any:
        return current + value


class MaxCollector(AggregateCollector):
    """Finds the largest value across the visited nodes."""

    def aggregate(self, current: Any, value: Any) -> Any:
        return value if value > current else current
