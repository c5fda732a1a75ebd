"""High-level API for OrderedTreeLib.

Simple functional interfaces for common tree operations. These wrap the
config/plan machinery for the cases where a single call is enough.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalStrategy,
)
from .core.adapter import OrderedTreeAdapter, TreeAdapter
from .core.node import OrderedTree
from .planning import ExecutionPlan


def build_tree(values: Iterable[Any], visitor: Optional[Any] = None) -> OrderedTree:
    """Create a tree holding ``values``, inserted in iteration order.

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> tree.minimum().value
        3
    """
    return OrderedTree(visitor=visitor).insert_all(values)


def traverse_tree(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[OrderedTree], bool]] = None,
    exclude_filter: Optional[Callable[[OrderedTree], bool]] = None,
    adapter: Optional[TreeAdapter] = None,
    **kwargs
) -> Iterator[OrderedTree]:
    """Simple interface for tree traversal.

    Args:
        tree: Root of the tree (or subtree) to walk
        strategy: in_order, pre_order, post_order or bfs
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        adapter: Adapter to navigate with (defaults to OrderedTreeAdapter)
        **kwargs: Additional TraversalConfig attributes

    Yields:
        Nodes that match the criteria, in traversal order

    Example:
        >>> tree = build_tree([5, 3, 8])
        >>> [node.value for node in traverse_tree(tree, "pre_order")]
        [5, 3, 8]
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
        data_requirements=DataRequirement.NODE,
    )
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    plan = ExecutionPlan(config, adapter or OrderedTreeAdapter())
    for node, _ in plan.execute(tree):
        yield node


def collect_tree_data(
    tree: OrderedTree,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    **kwargs
) -> Iterator[Tuple[OrderedTree, Any]]:
    """Traverse tree and collect specified data.

    Yields:
        Tuples of (node, collected_data)
    """
    config = _build_config_from_kwargs(data_requirement=data_requirement, **kwargs)
    plan = ExecutionPlan(config, kwargs.get('adapter') or OrderedTreeAdapter())
    yield from plan.execute(tree)


def collect_values(tree: OrderedTree, **kwargs) -> List[Any]:
    """Return the values of the visited nodes as a list.

    Example:
        >>> collect_values(build_tree([5, 3, 8]))
        [3, 5, 8]
    """
    return [node.value for node in traverse_tree(tree, **kwargs)]


def count_nodes(tree: OrderedTree, **kwargs) -> int:
    """Count nodes in a tree that match criteria."""
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(
    tree: OrderedTree,
    predicate: Callable[[OrderedTree], bool],
    **kwargs
) -> Iterator[OrderedTree]:
    """Find nodes that match a predicate.

    Example:
        >>> tree = build_tree(range(10))
        >>> [n.value for n in find_nodes(tree, lambda n: n.value % 3 == 0)]
        [0, 3, 6, 9]
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with size, height, leaf_count, minimum and maximum.
        minimum and maximum are None for an empty tree.
    """
    stats = {
        'size': 0,
        'height': tree.height(),
        'leaf_count': 0,
        'minimum': None,
        'maximum': None,
    }

    for node in traverse_tree(tree, strategy=TraversalStrategy.BREADTH_FIRST):
        stats['size'] += 1
        if node.is_leaf():
            stats['leaf_count'] += 1

    if not tree.is_empty():
        stats['minimum'] = tree.minimum().value
        stats['maximum'] = tree.maximum().value

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum."""
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'in_order': TraversalStrategy.IN_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'post_order': TraversalStrategy.POST_ORDER,
        'dfs_post': TraversalStrategy.POST_ORDER,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'level': TraversalStrategy.BREADTH_FIRST,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
