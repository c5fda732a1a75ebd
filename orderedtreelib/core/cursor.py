"""Resumable in-order traversal.

An InOrderCursor owns the explicit stack of pending ancestors and the
next candidate node, so a traversal can be advanced one node at a time
and picked up again later without re-walking from the root. Each cursor
is independent: any number of them may walk the same tree as long as
the tree is not modified in the meantime.
"""

from typing import TYPE_CHECKING, Iterator, List, Optional

if TYPE_CHECKING:
    from .node import OrderedTree


class InOrderCursor:
    """Lazy, finite in-order sequence of nodes of one subtree.

    Example:
        >>> cursor = tree.cursor()
        >>> first = cursor.next_node()
        >>> second = cursor.next_node()
        >>> cursor.reset()  # back to the first node
    """

    def __init__(self, tree: 'OrderedTree'):
        """Create a cursor positioned before the first node of ``tree``.

        Args:
            tree: Root of the subtree to walk
        """
        self.tree = tree
        self._stack: List['OrderedTree'] = []
        self._candidate: Optional['OrderedTree'] = None
        self.reset()

    def reset(self) -> None:
        """Clear the stack and start over from the subtree root."""
        self._stack.clear()
        self._candidate = None if self.tree.is_empty() else self.tree

    @property
    def exhausted(self) -> bool:
        return not self._stack and self._candidate is None

    def next_node(self) -> Optional['OrderedTree']:
        """Return the next node in ascending order, or None when done."""
        while self._candidate is not None:
            self._stack.append(self._candidate)
            self._candidate = self._candidate.left
        if not self._stack:
            return None
        node = self._stack.pop()
        self._candidate = node.right
        return node

    def __iter__(self) -> Iterator['OrderedTree']:
        return self

    def __next__(self) -> 'OrderedTree':
        node = self.next_node()
        if node is None:
            raise StopIteration
        return node
