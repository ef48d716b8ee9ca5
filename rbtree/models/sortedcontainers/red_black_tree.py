"""
Red-Black Tree implementation for ordered key-value storage.

Nodes live in a NodeArena and link to each other by handle. The insert and
delete fixups are explicit loops: each pass classifies the local shape into
one case, applies it, and either stops or moves on to the next node.
"""

import logging
from collections.abc import Iterator
from enum import Enum
from typing import Any

from rbtree.config import TreeConfig
from rbtree.interfaces.sorted_container import SortedContainer
from rbtree.models.exceptions import EmptyTreeError
from rbtree.models.node import NIL, Color, NodeArena
from rbtree.models.sortedcontainers.channel import TreeChannel
from rbtree.models.sortedcontainers.iterator import TreeIterator
from rbtree.models.sortedcontainers.validator import check_invariants

logger = logging.getLogger(__name__)


class InsertCase(Enum):
    """Shapes the insert fixup distinguishes around a red node N."""

    ROOT = 1
    BLACK_PARENT = 2
    RED_UNCLE = 3
    INNER_GRANDCHILD = 4
    OUTER_GRANDCHILD = 5


class DeleteCase(Enum):
    """Shapes the delete fixup distinguishes around a doubly-black node N."""

    ROOT = 1
    RED_SIBLING = 2
    BLACK_FAMILY = 3
    RED_PARENT = 4
    NEAR_NEPHEW = 5
    FAR_NEPHEW = 6


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Nil children count as black
    4. Red nodes cannot have red children
    5. Every path from a node to its nil leaves has the same number of black nodes
    6. In-order keys are strictly increasing

    Not synchronized: callers must serialize mutations.
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        self._config = config or TreeConfig()
        self._arena = NodeArena()
        self._root: int = NIL
        self._count: int = 0

    @property
    def config(self) -> TreeConfig:
        return self._config

    def add(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(log N)"""
        arena = self._arena
        parent = NIL
        current = self._root

        while current != NIL:
            parent = current
            node = arena[current]
            if key < node.key:
                current = node.left
            elif node.key < key:
                current = node.right
            else:
                # Key exists, update value
                node.value = value
                return

        new_node = arena.allocate(key, value, Color.RED)
        arena[new_node].parent = parent
        if parent == NIL:
            self._root = new_node
        elif key < arena[parent].key:
            arena[parent].left = new_node
        else:
            arena[parent].right = new_node

        self._count += 1
        self._fix_insert(new_node)
        self._after_mutation()

    def remove(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        arena = self._arena
        handle = self._lookup(key)
        if handle == NIL:
            return False

        node = arena[handle]
        if node.left != NIL and node.right != NIL:
            # Copy key/value from predecessor and then delete it instead
            pred = arena.max_node(node.left)
            node.key = arena[pred].key
            node.value = arena[pred].value
            handle = pred
            node = arena[pred]

        # Node has at most one child
        child = node.left if node.left != NIL else node.right

        if node.color == Color.BLACK:
            if arena.is_red(child):
                arena[child].color = Color.BLACK
            else:
                self._fix_delete(handle)

        self._replace_node(handle, child)
        if node.parent == NIL and child != NIL:
            arena[child].color = Color.BLACK

        arena.release(handle)
        self._count -= 1
        if self._count == 0:
            arena.clear()
        self._after_mutation()
        return True

    def search(self, key: Any) -> tuple[Any, bool]:
        """Look up a key, returning (value, found). O(log N)"""
        handle = self._lookup(key)
        if handle == NIL:
            return None, False
        return self._arena[handle].value, True

    def get(self, key: Any, default: Any = None) -> Any:
        value, found = self.search(key)
        return value if found else default

    def __len__(self) -> int:
        return self._count

    def clear(self) -> None:
        """Remove every entry."""
        self._arena.clear()
        self._root = NIL
        self._count = 0

    def min_key(self) -> Any:
        if self._root == NIL:
            raise EmptyTreeError("min_key")
        return self._arena[self._arena.min_node(self._root)].key

    def max_key(self) -> Any:
        if self._root == NIL:
            raise EmptyTreeError("max_key")
        return self._arena[self._arena.max_node(self._root)].key

    def iter(self) -> TreeIterator:
        """Return a cursor positioned before the smallest key."""
        return TreeIterator(self._arena, self._root)

    def iter_channel(self) -> TreeChannel:
        """Return a channel fed by a producer task walking the tree in order."""
        return TreeChannel(self._arena, self._root, self._config.channel_queue_size)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iter()

    def keys(self) -> Iterator[Any]:
        for key, _ in self:
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self:
            yield value

    def items(self) -> Iterator[tuple[Any, Any]]:
        return iter(self)

    def validate(self) -> int:
        """Check every invariant and return the tree's black-height."""
        return check_invariants(self._arena, self._root, self._count)

    def __repr__(self) -> str:
        entries = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return f"{type(self).__name__}({{{entries}}})"

    def _after_mutation(self) -> None:
        if self._config.validate_on_mutation:
            self.validate()

    def _lookup(self, key: Any) -> int:
        """Find node handle by key, NIL if absent."""
        arena = self._arena
        current = self._root
        while current != NIL:
            node = arena[current]
            if key < node.key:
                current = node.left
            elif node.key < key:
                current = node.right
            else:
                return current
        return NIL

    def _replace_node(self, handle: int, replacement: int) -> None:
        """Put replacement in handle's slot under handle's parent."""
        arena = self._arena
        parent = arena[handle].parent
        if parent == NIL:
            self._root = replacement
        elif arena[parent].left == handle:
            arena[parent].left = replacement
        else:
            arena[parent].right = replacement

        if replacement != NIL:
            arena[replacement].parent = parent

    def _rotate_left(self, handle: int) -> None:
        """Left rotation."""
        arena = self._arena
        node = arena[handle]
        right = node.right
        right_node = arena[right]

        self._replace_node(handle, right)
        node.right = right_node.left
        if right_node.left != NIL:
            arena[right_node.left].parent = handle
        right_node.left = handle
        node.parent = right

    def _rotate_right(self, handle: int) -> None:
        """Right rotation."""
        arena = self._arena
        node = arena[handle]
        left = node.left
        left_node = arena[left]

        self._replace_node(handle, left)
        node.left = left_node.right
        if left_node.right != NIL:
            arena[left_node.right].parent = handle
        left_node.right = handle
        node.parent = left

    def _insert_case(self, handle: int) -> InsertCase:
        arena = self._arena
        parent = arena[handle].parent
        if parent == NIL:
            return InsertCase.ROOT
        if arena.is_black(parent):
            return InsertCase.BLACK_PARENT
        if arena.is_red(arena.uncle(handle)):
            return InsertCase.RED_UNCLE

        grandparent = arena[parent].parent
        is_right_child = arena[parent].right == handle
        parent_is_left = arena[grandparent].left == parent
        if is_right_child == parent_is_left:
            return InsertCase.INNER_GRANDCHILD
        return InsertCase.OUTER_GRANDCHILD

    def _fix_insert(self, handle: int) -> None:
        """Fix Red-Black Tree properties after insert."""
        arena = self._arena
        while True:
            case = self._insert_case(handle)
            logger.debug("Insert fixup %s at key %r", case.name, arena[handle].key)
            node = arena[handle]

            if case is InsertCase.ROOT:
                node.color = Color.BLACK
                return

            if case is InsertCase.BLACK_PARENT:
                return

            parent = node.parent
            grandparent = arena[parent].parent

            if case is InsertCase.RED_UNCLE:
                arena[parent].color = Color.BLACK
                arena[arena.uncle(handle)].color = Color.BLACK
                arena[grandparent].color = Color.RED
                handle = grandparent
            elif case is InsertCase.INNER_GRANDCHILD:
                # Straighten the zig-zag; the old parent becomes the outer grandchild
                if arena[parent].right == handle:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
                handle = parent
            else:
                arena[parent].color = Color.BLACK
                arena[grandparent].color = Color.RED
                if arena[parent].left == handle:
                    self._rotate_right(grandparent)
                else:
                    self._rotate_left(grandparent)
                return

    def _delete_case(self, handle: int) -> DeleteCase:
        arena = self._arena
        parent = arena[handle].parent
        if parent == NIL:
            return DeleteCase.ROOT

        sibling = arena.sibling(handle)
        if arena.is_red(sibling):
            return DeleteCase.RED_SIBLING

        sibling_node = arena[sibling]
        if arena.is_black(sibling_node.left) and arena.is_black(sibling_node.right):
            if arena.is_black(parent):
                return DeleteCase.BLACK_FAMILY
            return DeleteCase.RED_PARENT

        far = sibling_node.right if arena[parent].left == handle else sibling_node.left
        if arena.is_black(far):
            return DeleteCase.NEAR_NEPHEW
        return DeleteCase.FAR_NEPHEW

    def _fix_delete(self, handle: int) -> None:
        """
        Fix Red-Black Tree properties before splicing out a black node.

        handle is still linked into the tree so its sibling and parent can be
        found; the caller unlinks it afterwards.
        """
        arena = self._arena
        while True:
            case = self._delete_case(handle)
            logger.debug("Delete fixup %s at key %r", case.name, arena[handle].key)

            if case is DeleteCase.ROOT:
                return

            parent = arena[handle].parent
            sibling = arena.sibling(handle)
            is_left = arena[parent].left == handle

            if case is DeleteCase.RED_SIBLING:
                arena[sibling].color = Color.BLACK
                arena[parent].color = Color.RED
                if is_left:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
            elif case is DeleteCase.BLACK_FAMILY:
                arena[sibling].color = Color.RED
                handle = parent
            elif case is DeleteCase.RED_PARENT:
                arena[sibling].color = Color.RED
                arena[parent].color = Color.BLACK
                return
            elif case is DeleteCase.NEAR_NEPHEW:
                arena[sibling].color = Color.RED
                if is_left:
                    arena[arena[sibling].left].color = Color.BLACK
                    self._rotate_right(sibling)
                else:
                    arena[arena[sibling].right].color = Color.BLACK
                    self._rotate_left(sibling)
            else:
                arena[sibling].color = arena[parent].color
                arena[parent].color = Color.BLACK
                if is_left:
                    arena[arena[sibling].right].color = Color.BLACK
                    self._rotate_left(parent)
                else:
                    arena[arena[sibling].left].color = Color.BLACK
                    self._rotate_right(parent)
                return
