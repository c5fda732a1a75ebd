"""Test fixtures for OrderedTreeLib consumers.

These helpers inspect a tree's internal links so that test suites can
verify structural invariants without reaching into private attributes.
"""

from typing import Any, Dict, List, Optional

from ..core.node import OrderedTree


class TreeTestHelper:
    """Public test fixture for tree structure verification.

    Example:
        helper = TreeTestHelper(tree)
        assert helper.check_invariants() == []
        assert helper.get_summary()['size'] == 7
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree to inspect.

        Args:
            tree: Root of the tree
        """
        self._tree = tree

    def nodes(self) -> List[OrderedTree]:
        """All nodes reachable from the root, in pre-order."""
        if self._tree.is_empty():
            return []
        found = []
        stack = [self._tree]
        while stack:
            node = stack.pop()
            found.append(node)
            for child in (node.right, node.left):
                if child is not None:
                    stack.append(child)
        return found

    def check_order(self) -> List[str]:
        """Check the search-tree order invariant.

        Returns:
            Descriptions of every violation (empty if ordered)
        """
        problems = []
        previous: Optional[Any] = None
        for node in self._tree.iter_in_order():
            if previous is not None and not previous < node.value:
                problems.append(f"{node.value!r} follows {previous!r} in in-order sequence")
            previous = node.value
        return problems

    def check_parent_links(self) -> List[str]:
        """Check that every child points back at its parent.

        Returns:
            Descriptions of every broken link (empty if consistent)
        """
        problems = []
        if self._tree.parent is not None:
            problems.append(f"root {self._tree.value!r} has a parent")
        for node in self.nodes():
            for side, child in (('left', node.left), ('right', node.right)):
                if child is not None and child.parent is not node:
                    problems.append(
                        f"{side} child {child.value!r} of {node.value!r} "
                        f"has parent {getattr(child.parent, 'value', None)!r}"
                    )
        return problems

    def check_invariants(self) -> List[str]:
        return self.check_order() + self.check_parent_links()

    def is_sentinel(self) -> bool:
        """True if the tree is in the empty-root state."""
        tree = self._tree
        return tree.value is None and tree.left is None and tree.right is None

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: Number of nodes holding a value
            - height: Height of the tree (-1 when empty)
            - values: Values in ascending order
            - is_sentinel: Whether the tree is the empty root
        """
        return {
            'size': len(self.nodes()),
            'height': self._tree.height(),
            'values': list(self._tree),
            'is_sentinel': self.is_sentinel(),
        }
