"""
Abstract base classes and protocols for the ordered containers.
"""

from rbtree.interfaces.ordered_iterable import OrderedIterable
from rbtree.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
