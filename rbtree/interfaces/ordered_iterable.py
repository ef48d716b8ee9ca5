"""
OrderedIterable protocol for containers that can be walked in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that support in-order traversal.

    Implementations must support:
    - Python iteration via __iter__
    - A cursor-style iterator via iter()
    - A concurrent producer traversal via iter_channel()
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in ascending key order."""
        pass

    @abstractmethod
    def iter(self) -> Any:
        """
        Return a cursor over the entries.

        The cursor is advanced with next() and read with key()/value().
        """
        pass

    @abstractmethod
    def iter_channel(self) -> AsyncIterator[tuple[Any, Any]]:
        """
        Return a channel delivering key-value pairs from a producer task.

        Returns:
            AsyncIterator yielding (key, value) tuples in ascending key order,
            closed after the last entry.
        """
        pass
