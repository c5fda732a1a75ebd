"""Tree traversal strategies for OrderedTreeLib.

Traversers implement different algorithms for walking through trees.
They only navigate through a TreeAdapter, so the same strategy works on
any node type the adapter understands.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, Optional, Tuple

from .adapter import TreeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy.

    Visits the left subtree, then the node, then the right subtree. For a
    binary search tree this yields values in ascending order. Requires an
    adapter with ordered children.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if not self.adapter.has_value(root):
            return

        def _traverse_recursive(node: Any, depth: int) -> Iterator[Tuple[Any, int]]:
            if node is None:
                return
            explore = self._should_explore(depth, max_depth)
            if explore:
                yield from _traverse_recursive(self.adapter.get_left(node), depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if explore:
                yield from _traverse_recursive(self.adapter.get_right(node), depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. Re-inserting values in this order
    rebuilds a tree of the same shape.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if not self.adapter.has_value(root):
            return

        def _traverse_recursive(node: Any, depth: int) -> Iterator[Tuple[Any, int]]:
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for tearing a tree down or
    computing per-subtree aggregates.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if not self.adapter.has_value(root):
            return

        def _traverse_recursive(node: Any, depth: int) -> Iterator[Tuple[Any, int]]:
            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    yield from _traverse_recursive(child, depth + 1)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Any,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        if not self.adapter.has_value(root):
            return

        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, pre_order, post_order, bfs)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'post_order': DepthFirstPostOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'level': BreadthFirstTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
