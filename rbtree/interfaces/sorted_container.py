"""
SortedContainer abstract base class for ordered key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from rbtree.interfaces.ordered_iterable import OrderedIterable


class SortedContainer(OrderedIterable):
    """
    Abstract base class for ordered key-value containers with unique keys.

    Provides O(log N) operations for add, remove and search.
    Inherits in-order traversal from OrderedIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def add(self, key: Any, value: Any) -> None:
        """
        Insert a key-value pair, replacing the value if the key exists.

        Args:
            key: The key to insert/update. Must be comparable with the
                 keys already stored.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> tuple[Any, bool]:
        """
        Look up the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            (value, True) if found, (None, False) otherwise.

        Time complexity: O(log N)
        """
        pass

    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        return self.search(key)[1]

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    @abstractmethod
    def __len__(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    def size(self) -> int:
        return len(self)
