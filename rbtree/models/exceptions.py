"""
Custom exceptions for the red-black tree container.
"""


class RBTreeError(Exception):
    """Base class for all errors raised by the container."""


class IteratorStateError(RBTreeError):
    """
    Raised when an iterator is read without a current element.

    Calling key() or value() before a successful next() is a contract
    violation, not a recoverable condition.
    """

    def __init__(self, accessor: str):
        self.accessor = accessor
        super().__init__(f"{accessor} called without calling next")


class EmptyTreeError(RBTreeError, KeyError):
    """Raised when an ordered query needs at least one entry."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} on an empty tree")

    def __str__(self) -> str:
        return self.args[0]


class InvariantViolationError(RBTreeError):
    """
    Raised when the invariant check finds a corrupted tree.

    Carries the violated rule and, where one exists, the key of the node
    at which it was detected.
    """

    def __init__(self, rule: str, key=None):
        self.rule = rule
        self.key = key
        message = f"red-black invariant violated: {rule}"
        if key is not None:
            message += f" (at key {key!r})"
        super().__init__(message)
