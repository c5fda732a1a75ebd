"""OrderedTreeLib - an unbalanced binary search tree with pluggable traversal.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree()
    for value in [5, 3, 8, 1, 4, 7, 9]:
        tree.insert(value)

    tree.minimum().value          # 1
    tree.delete(5)                # two children: 7 takes its place
    list(tree)                    # [1, 3, 4, 7, 8, 9]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Beyond the tree itself, the package ships the generic traversal pieces
(adapters, traversers, visitors, configs and plans) used to walk it in
other orders or to collect data from it.
"""

__version__ = "0.3.0"

# Core components
from .core.node import OrderedTree
from .core.cursor import InOrderCursor
from .core.adapter import TreeAdapter, OrderedTreeAdapter
from .core.traverser import (
    TreeTraverser,
    InOrderTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .core.collector import (
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

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan, CapabilityMismatchError
from .exceptions import OrderedTreeError, NodeNotFoundError, EmptyTreeError

# High-level API
from .api import (
    build_tree,
    traverse_tree,
    collect_tree_data,
    collect_values,
    count_nodes,
    find_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'OrderedTree',
    'InOrderCursor',
    'TreeAdapter',
    'OrderedTreeAdapter',
    'TreeTraverser',
    'InOrderTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'Visitor',
    'DataCollector',
    'ValueCollector',
    'NodeCollector',
    'PathCollector',
    'CustomCollector',
    'CallbackVisitor',
    'CountingVisitor',
    'AggregateCollector',
    'SumCollector',
    'MaxCollector',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
    'ExecutionPlan',
    'CapabilityMismatchError',
    # Errors
    'OrderedTreeError',
    'NodeNotFoundError',
    'EmptyTreeError',
    # API
    'build_tree',
    'traverse_tree',
    'collect_tree_data',
    'collect_values',
    'count_nodes',
    'find_nodes',
    'get_tree_stats',
]
