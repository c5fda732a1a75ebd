"""OrderedTree - an unbalanced binary search tree built from linked nodes.

Every node is itself a subtree handle: the tree is simply its root node.
Children are owned by their parent; the parent link is a weak
back-reference used only for upward navigation, so a detached subtree
never keeps its former ancestors alive.

An empty tree is a root node holding no value and no children. The root
object is never replaced: deleting the last value clears it in place and
deleting a root with one child makes the root absorb that child.
"""

import logging
import weakref
from collections import deque
from typing import Any, Iterable, Iterator, Optional, Union

from ..exceptions import EmptyTreeError, NodeNotFoundError
from .cursor import InOrderCursor

logger = logging.getLogger(__name__)


class OrderedTree:
    """Binary search tree node with parent links.

    Values must be mutually comparable with ``<`` and ``==``. Equal values
    are never stored twice: inserting a value that is already present
    returns the existing node.

    The ``visit`` hook is the per-node action used by ``visit_in_order``.
    By default it forwards to the ``visitor`` given at construction; a
    subclass may override it instead.

    Example:
        >>> tree = OrderedTree()
        >>> for value in [5, 3, 8]:
        ...     _ = tree.insert(value)
        >>> list(tree)
        [3, 5, 8]
    """

    def __init__(self, value: Any = None, visitor: Optional[Any] = None):
        """Create a root node.

        Args:
            value: Initial root value, or None for an empty tree
            visitor: Object with a ``visit(node)`` method, called by
                ``visit_in_order`` for every node
        """
        self.value = value
        self.left: Optional['OrderedTree'] = None
        self.right: Optional['OrderedTree'] = None
        self._parent_ref: Optional[weakref.ref] = None
        self.visitor = visitor
        self._cursor: Optional[InOrderCursor] = None

    # Structure

    @property
    def parent(self) -> Optional['OrderedTree']:
        """Structural parent, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['OrderedTree']) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    def is_empty(self) -> bool:
        """True for the empty root: no value and no children."""
        return self.value is None and self.left is None and self.right is None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def root(self) -> 'OrderedTree':
        """Walk parent links up to the structural root."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def depth(self) -> int:
        """Number of edges between this node and the structural root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def height(self) -> int:
        """Height of this subtree; 0 for a single node, -1 when empty."""
        if self.is_empty():
            return -1
        height = 0
        queue = deque([(self, 0)])
        while queue:
            node, level = queue.popleft()
            height = max(height, level)
            for child in (node.left, node.right):
                if child is not None:
                    queue.append((child, level + 1))
        return height

    # Navigation

    def search(self, value: Any) -> Optional['OrderedTree']:
        """Find the node holding ``value`` in this subtree.

        Time complexity: O(height)

        Returns:
            The matching node, or None if the value is not present
        """
        if value is None:
            return None
        node = self
        while node is not None and node.value is not None:
            if value == node.value:
                return node
            if value < node.value:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> 'OrderedTree':
        """Return the node with the smallest value in this subtree.

        Raises:
            EmptyTreeError: If the subtree holds no value
        """
        if self.is_empty():
            raise EmptyTreeError("minimum")
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> 'OrderedTree':
        """Return the node with the largest value in this subtree.

        Raises:
            EmptyTreeError: If the subtree holds no value
        """
        if self.is_empty():
            raise EmptyTreeError("maximum")
        node = self
        while node.right is not None:
            node = node.right
        return node

    def successor(self, node: 'OrderedTree') -> Optional['OrderedTree']:
        """Return the node that follows ``node`` in ascending order.

        The upward walk stops at the structural root (by identity), so the
        result does not depend on which node this method is called on.

        Time complexity: O(height)
        """
        if node.right is not None:
            return node.right.minimum()
        child = node
        ancestor = node.parent
        while ancestor is not None and child is ancestor.right:
            child = ancestor
            ancestor = ancestor.parent
        return ancestor

    def predecessor(self, node: 'OrderedTree') -> Optional['OrderedTree']:
        """Return the node that precedes ``node`` in ascending order.

        Time complexity: O(height)
        """
        if node.left is not None:
            return node.left.maximum()
        child = node
        ancestor = node.parent
        while ancestor is not None and child is ancestor.left:
            child = ancestor
            ancestor = ancestor.parent
        return ancestor

    # Insertion

    def insert(self, value: Any) -> 'OrderedTree':
        """Insert ``value`` and return the node that holds it.

        An empty root stores the value in place. If the value is already
        present the existing node is returned and nothing changes.

        Raises:
            ValueError: If value is None (None marks the empty root)
        """
        if value is None:
            raise ValueError("None cannot be stored in an OrderedTree")

        if self.is_empty():
            self.value = value
            logger.debug("Stored %r in empty root", value)
            return self

        node = self
        while value != node.value:
            if value < node.value:
                if node.left is None:
                    return node.insert_left_subtree(self._new_node(value))
                node = node.left
            else:
                if node.right is None:
                    return node.insert_right_subtree(self._new_node(value))
                node = node.right
        return node

    def insert_all(self, values: Iterable[Any]) -> 'OrderedTree':
        """Insert every value in order and return self."""
        for value in values:
            self.insert(value)
        return self

    def insert_left_subtree(self, subtree: 'OrderedTree') -> 'OrderedTree':
        """Make ``subtree`` the left child of this node.

        The previous left subtree is re-attached below the leftmost node
        of ``subtree`` so that no node becomes unreachable. Value order is
        not checked: the caller is responsible for keeping the tree sorted.

        Raises:
            ValueError: If subtree holds no value

        Returns:
            The inserted subtree
        """
        if subtree.is_empty():
            raise ValueError("An empty tree cannot be spliced in as a subtree")
        previous = self.left
        if subtree is previous:
            return subtree
        subtree._detach()
        self.left = subtree
        subtree.parent = self

        slot = subtree
        while slot.left is not None:
            slot = slot.left
        slot.left = previous
        if previous is not None:
            previous.parent = slot
            logger.debug("Re-homed left subtree %r under %r", previous.value, slot.value)
        return subtree

    def insert_right_subtree(self, subtree: 'OrderedTree') -> 'OrderedTree':
        """Make ``subtree`` the right child of this node.

        The previous right subtree is re-attached below the rightmost node
        of ``subtree``.

        Raises:
            ValueError: If subtree holds no value

        Returns:
            The inserted subtree
        """
        if subtree.is_empty():
            raise ValueError("An empty tree cannot be spliced in as a subtree")
        previous = self.right
        if subtree is previous:
            return subtree
        subtree._detach()
        self.right = subtree
        subtree.parent = self

        slot = subtree
        while slot.right is not None:
            slot = slot.right
        slot.right = previous
        if previous is not None:
            previous.parent = slot
            logger.debug("Re-homed right subtree %r under %r", previous.value, slot.value)
        return subtree

    def _new_node(self, value: Any) -> 'OrderedTree':
        logger.debug("Inserting new node %r", value)
        return self.__class__(value)

    def _detach(self) -> None:
        """Unlink this node from its current parent, if any."""
        parent = self.parent
        if parent is None:
            return
        if parent.left is self:
            parent.left = None
        elif parent.right is self:
            parent.right = None
        self.parent = None

    # Deletion

    def delete(self, node: Union['OrderedTree', Any]) -> 'OrderedTree':
        """Remove a node (or a value) from the tree.

        The target is looked up again by value before anything changes,
        so a stale handle from an earlier search is safe to pass.

        Args:
            node: A node of this tree, or a bare value

        Returns:
            The root of the tree

        Raises:
            NodeNotFoundError: If the value is not in the tree
        """
        value = node.value if isinstance(node, OrderedTree) else node
        root = self.root()
        target = root.search(value)
        if target is None:
            logger.info("Cannot delete %r: value not in tree", value)
            raise NodeNotFoundError(value)
        self._delete_node(target)
        return root

    def remove(self, value: Any) -> 'OrderedTree':
        """Remove ``value`` from the tree; alias of ``delete``."""
        return self.delete(value)

    def discard(self, value: Any) -> bool:
        """Remove ``value`` if present.

        Returns:
            True if a node was removed, False if the value was absent
        """
        target = self.root().search(value)
        if target is None:
            return False
        self._delete_node(target)
        return True

    def _delete_node(self, target: 'OrderedTree') -> None:
        left, right = target.left, target.right

        if left is None and right is None:
            parent = target.parent
            if parent is None:
                logger.debug("Deleting %r: last value, root becomes empty", target.value)
                target.value = None
            else:
                logger.debug("Deleting leaf %r", target.value)
                target._detach()

        elif left is None or right is None:
            child = left if left is not None else right
            parent = target.parent
            if parent is None:
                # The root object survives; it takes over the child's content.
                logger.debug("Deleting root %r: absorbing child %r", target.value, child.value)
                target.value = child.value
                target.left = child.left
                target.right = child.right
                for grandchild in (target.left, target.right):
                    if grandchild is not None:
                        grandchild.parent = target
                child.left = child.right = None
                child.parent = None
            else:
                logger.debug("Deleting %r: splicing child %r into its place", target.value, child.value)
                child.parent = parent
                if parent.left is target:
                    parent.left = child
                else:
                    parent.right = child
                target.left = target.right = None
                target.parent = None

        else:
            successor = self.successor(target)
            # The successor is the minimum of a non-empty right subtree, so it
            # has no left child and the recursion ends in one of the cases above.
            assert successor is not None and successor.left is None
            logger.debug("Deleting %r: replacing with successor %r", target.value, successor.value)
            self._delete_node(successor)
            target.value = successor.value

    # Traversal

    def visit(self, node: 'OrderedTree') -> None:
        """Per-node action for ``visit_in_order``.

        Forwards to ``self.visitor`` when one is set. Override in a
        subclass for a fixed action.
        """
        if self.visitor is not None:
            self.visitor.visit(node)

    def visit_in_order(self, root: Optional['OrderedTree'] = None,
                       visitor: Optional[Any] = None) -> None:
        """Recursively visit a subtree in ascending order.

        Args:
            root: Subtree to walk (defaults to this node)
            visitor: Visitor to use for this call instead of ``visit``
        """
        action = visitor.visit if visitor is not None else self.visit
        start = self if root is None else root
        if start.is_empty():
            return
        self._visit_in_order(start, action)

    def _visit_in_order(self, node: Optional['OrderedTree'], action) -> None:
        if node is None:
            return
        self._visit_in_order(node.left, action)
        action(node)
        self._visit_in_order(node.right, action)

    def restart(self) -> None:
        """Reset the traversal used by ``next_in_order`` to the first node."""
        self._cursor = InOrderCursor(self)

    def next_in_order(self) -> Optional['OrderedTree']:
        """Return the next node of the resumable in-order traversal.

        The traversal state is shared by every caller of this tree object;
        use ``cursor()`` for an independent traversal.

        Returns:
            The next node, or None once every node has been returned
        """
        if self._cursor is None:
            self.restart()
        return self._cursor.next_node()

    def cursor(self) -> InOrderCursor:
        """Create an independent in-order cursor over this subtree."""
        return InOrderCursor(self)

    def iter_in_order(self) -> Iterator['OrderedTree']:
        """Iterate over the nodes of this subtree in ascending order."""
        return iter(InOrderCursor(self))

    # Container protocol

    def to_list(self) -> list:
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        for node in InOrderCursor(self):
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in InOrderCursor(self))

    def __bool__(self) -> bool:
        # A tree object always exists, even when it holds no value.
        return True

    def __contains__(self, value: Any) -> bool:
        return self.search(value) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"
