"""Exception hierarchy for OrderedTreeLib.

Lookups that find nothing return None; exceptions are reserved for
operations whose contract cannot be met (deleting a value that is not
in the tree, asking an empty tree for its minimum).
"""


class OrderedTreeError(Exception):
    """Base class for all OrderedTreeLib errors."""
    pass


class NodeNotFoundError(OrderedTreeError, KeyError):
    """Raised when a delete targets a value that is not in the tree."""

    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"value not found in tree: {self.value!r}"


class EmptyTreeError(OrderedTreeError, ValueError):
    """Raised when an operation needs at least one value but the tree is empty."""

    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"{self.operation}() called on an empty tree"
