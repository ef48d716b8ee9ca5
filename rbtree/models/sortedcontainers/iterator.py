"""
Cursor-style in-order iterator over a Red-Black Tree.
"""

from collections.abc import Iterator
from typing import Any

from rbtree.models.exceptions import IteratorStateError
from rbtree.models.node import NIL, NodeArena


class TreeIterator(Iterator[tuple[Any, Any]]):
    """
    Lazy in-order walk driven by an explicit stack.

    The root handle is captured at construction; reset() restarts from it.
    Mutating the tree while the iterator is in use is not supported.

    >>> it = tree.iter()
    >>> while it.next():
    ...     print(it.key(), it.value())
    """

    def __init__(self, arena: NodeArena, root: int) -> None:
        self._arena = arena
        self._root = root
        self._cursor = root
        self._current = NIL
        self._stack: list[int] = []

    def reset(self) -> None:
        """Rewind to the first entry."""
        self._cursor = self._root
        self._current = NIL
        self._stack.clear()

    def next(self) -> bool:
        """Advance to the next entry, returning False once exhausted."""
        while self._stack or self._cursor != NIL:
            if self._cursor != NIL:
                self._stack.append(self._cursor)
                self._cursor = self._arena[self._cursor].left
            else:
                self._current = self._stack.pop()
                self._cursor = self._arena[self._current].right
                return True
        return False

    def key(self) -> Any:
        if self._current == NIL:
            raise IteratorStateError("key")
        return self._arena[self._current].key

    def value(self) -> Any:
        if self._current == NIL:
            raise IteratorStateError("value")
        return self._arena[self._current].value

    def __iter__(self) -> "TreeIterator":
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self.next():
            raise StopIteration
        return self.key(), self.value()
