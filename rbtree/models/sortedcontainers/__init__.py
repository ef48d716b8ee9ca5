"""
Sorted container implementations.
"""

from rbtree.models.sortedcontainers.channel import TreeChannel
from rbtree.models.sortedcontainers.iterator import TreeIterator
from rbtree.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree", "TreeChannel", "TreeIterator"]
