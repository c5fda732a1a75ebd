"""Core building blocks for OrderedTreeLib.

This module contains the tree node type, its cursor, and the abstractions
used by the generic traversal machinery.
"""

from .cursor import InOrderCursor
from .node import OrderedTree
from .adapter import TreeAdapter, OrderedTreeAdapter
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .collector import (
    Visitor,
    DataCollector,
    ValueCollector,
    NodeCollector,
    PathCollector,
    CustomCollector,
    CallbackVisitor,
    CountingVisitor,
    AggregateCollector,
    SumCollector,
    MaxCollector,
)

__all__ = [
    "OrderedTree",
    "InOrderCursor",
    "TreeAdapter",
    "OrderedTreeAdapter",
    "TreeTraverser",
    "InOrderTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "Visitor",
    "DataCollector",
    "ValueCollector",
    "NodeCollector",
    "PathCollector",
    "CustomCollector",
    "CallbackVisitor",
    "CountingVisitor",
    "AggregateCollector",
    "SumCollector",
    "MaxCollector",
]
