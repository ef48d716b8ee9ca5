"""
Ordered key-value container backed by a Red-Black Tree.

This package provides:
- add(key, value) - O(log N) insert or update
- remove(key) - O(log N), returns whether the key existed
- search(key) - O(log N), returns (value, found)
- iter() - cursor-style in-order traversal
- iter_channel() - in-order traversal fed by an asyncio producer task
"""

from rbtree.config import TreeConfig, configure_logging
from rbtree.models.exceptions import (
    EmptyTreeError,
    InvariantViolationError,
    IteratorStateError,
    RBTreeError,
)
from rbtree.models.sortedcontainers import RedBlackTree, TreeChannel, TreeIterator


def new(config: TreeConfig | None = None) -> RedBlackTree:
    """Return a new empty tree."""
    return RedBlackTree(config)


__all__ = [
    "RedBlackTree",
    "TreeIterator",
    "TreeChannel",
    "TreeConfig",
    "configure_logging",
    "new",
    "RBTreeError",
    "IteratorStateError",
    "EmptyTreeError",
    "InvariantViolationError",
]
