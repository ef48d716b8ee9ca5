"""
Data models for the ordered containers.
"""

from rbtree.models.exceptions import (
    EmptyTreeError,
    InvariantViolationError,
    IteratorStateError,
    RBTreeError,
)
from rbtree.models.node import NIL, Color, Node, NodeArena

__all__ = [
    "NIL",
    "Color",
    "Node",
    "NodeArena",
    "RBTreeError",
    "IteratorStateError",
    "EmptyTreeError",
    "InvariantViolationError",
]
