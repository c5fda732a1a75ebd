"""TreeAdapter abstraction for OrderedTreeLib.

Traversers never touch node attributes directly. They ask an adapter for
a node's children and parent, which keeps the traversal strategies
independent of the node type they walk.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from .node import OrderedTree


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure.

    The adapter knows HOW to move around a specific tree type. Capability
    flags let an ExecutionPlan reject configurations the adapter cannot
    serve before any traversal starts.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes, left to right
        """
        pass

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is root
        """
        pass

    def has_value(self, node: Any) -> bool:
        """Check whether a node carries data worth yielding.

        Placeholder nodes (such as an empty tree root) return False and
        are skipped by every traverser.
        """
        return True

    def is_leaf(self, node: Any) -> bool:
        for _ in self.get_children(node):
            return False
        return True

    def get_depth(self, node: Any) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    # Capability flags

    def supports_ordered_children(self) -> bool:
        """Check if the adapter distinguishes left and right children.

        In-order traversal is only defined for binary trees.
        """
        return False

    def supports_modification(self) -> bool:
        return False

    def estimated_size(self, node: Any) -> Optional[int]:
        """Estimate the number of nodes in the subtree, or None if unknown."""
        return None

    def get_left(self, node: Any) -> Optional[Any]:
        raise NotImplementedError(f"{self.__class__.__name__} has no ordered children")

    def get_right(self, node: Any) -> Optional[Any]:
        raise NotImplementedError(f"{self.__class__.__name__} has no ordered children")

    def add_child(self, parent: Any, child: Any) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")

    def remove_child(self, parent: Any, child: Any) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")


class OrderedTreeAdapter(TreeAdapter):
    """Adapter for OrderedTree nodes."""

    def get_children(self, node: OrderedTree) -> Iterator[OrderedTree]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_parent(self, node: OrderedTree) -> Optional[OrderedTree]:
        return node.parent

    def get_left(self, node: OrderedTree) -> Optional[OrderedTree]:
        return node.left

    def get_right(self, node: OrderedTree) -> Optional[OrderedTree]:
        return node.right

    def has_value(self, node: OrderedTree) -> bool:
        return not node.is_empty()

    def is_leaf(self, node: OrderedTree) -> bool:
        return node.is_leaf()

    def get_depth(self, node: OrderedTree) -> int:
        return node.depth()

    def supports_ordered_children(self) -> bool:
        return True

    def supports_modification(self) -> bool:
        return True

    def estimated_size(self, node: OrderedTree) -> Optional[int]:
        return len(node)

    def add_child(self, parent: OrderedTree, child: OrderedTree) -> None:
        """Insert the values of ``child``'s subtree into ``parent``'s tree.

        Each value goes in by search from the root, so the sort order holds
        whatever slots below ``parent`` are already taken. The ``child``
        nodes themselves are not linked in, and values already present are
        left as they are.
        """
        root = parent.root()
        pending = [child]
        while pending:
            node = pending.pop()
            if node.is_empty():
                continue
            root.insert(node.value)
            pending.extend(n for n in (node.right, node.left) if n is not None)

    def remove_child(self, parent: OrderedTree, child: OrderedTree) -> None:
        """Delete ``child`` from the tree ``parent`` belongs to."""
        if child.parent is not parent:
            raise ValueError(f"{child!r} is not a child of {parent!r}")
        parent.root().delete(child)
