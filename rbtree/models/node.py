"""
Node records and the arena that owns them.

Nodes reference each other through integer handles into the arena instead of
object references, so parent back-links never form reference cycles.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

NIL = -1


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    BLACK = 0
    RED = 1


@dataclass
class Node:
    """Node in the Red-Black Tree."""

    key: Any
    value: Any
    color: Color = Color.RED
    left: int = NIL
    right: int = NIL
    parent: int = NIL


class NodeArena:
    """
    Slot storage for tree nodes addressed by handle.

    Released handles go onto a free list and are handed out again by
    allocate(). A released slot is wiped so it holds no key, value or links.
    """

    def __init__(self) -> None:
        self._slots: list[Node | None] = []
        self._free: list[int] = []

    def __len__(self) -> int:
        """Number of live nodes."""
        return len(self._slots) - len(self._free)

    def __getitem__(self, handle: int) -> Node:
        node = self._slots[handle] if handle >= 0 else None
        if node is None:
            raise IndexError(f"no live node at handle {handle}")
        return node

    def allocate(self, key: Any, value: Any, color: Color = Color.RED) -> int:
        """Store a new detached node and return its handle."""
        node = Node(key=key, value=value, color=color)
        if self._free:
            handle = self._free.pop()
            self._slots[handle] = node
        else:
            handle = len(self._slots)
            self._slots.append(node)
        return handle

    def release(self, handle: int) -> None:
        """Drop the node at handle and make the slot reusable."""
        node = self[handle]
        node.key = node.value = None
        node.left = node.right = node.parent = NIL
        self._slots[handle] = None
        self._free.append(handle)

    def clear(self) -> None:
        self._slots.clear()
        self._free.clear()

    def color_of(self, handle: int) -> Color:
        """Color of the node at handle; nil children are black."""
        if handle == NIL:
            return Color.BLACK
        return self[handle].color

    def is_red(self, handle: int) -> bool:
        return self.color_of(handle) == Color.RED

    def is_black(self, handle: int) -> bool:
        return self.color_of(handle) == Color.BLACK

    def sibling(self, handle: int) -> int:
        parent = self[self[handle].parent]
        return parent.right if parent.left == handle else parent.left

    def grandparent(self, handle: int) -> int:
        return self[self[handle].parent].parent

    def uncle(self, handle: int) -> int:
        return self.sibling(self[handle].parent)

    def max_node(self, handle: int) -> int:
        """Rightmost node of the subtree rooted at handle."""
        while self[handle].right != NIL:
            handle = self[handle].right
        return handle

    def min_node(self, handle: int) -> int:
        """Leftmost node of the subtree rooted at handle."""
        while self[handle].left != NIL:
            handle = self[handle].left
        return handle
