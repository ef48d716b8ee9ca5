"""
Shared pytest fixtures for red-black tree tests.
"""

import pytest

from rbtree import RedBlackTree, TreeConfig
from rbtree.models.node import NIL

NAMES = ["Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]


@pytest.fixture
def tree():
    """Provide an empty tree that checks its invariants after every mutation."""
    return RedBlackTree(TreeConfig(validate_on_mutation=True))


@pytest.fixture
def digits_tree(tree):
    """Provide a tree holding 0..9 mapped to their English names."""
    for i, name in enumerate(NAMES):
        tree.add(i, name)
    return tree


@pytest.fixture
def fixup_log(caplog):
    """Capture fixup case names logged by the tree at DEBUG level."""
    caplog.set_level("DEBUG", logger="rbtree.models.sortedcontainers.red_black_tree")

    def cases(prefix: str) -> list[str]:
        return [
            record.args[0]
            for record in caplog.records
            if record.getMessage().startswith(prefix)
        ]

    return cases


def _shape(tree: RedBlackTree):
    """
    Describe the tree as nested (key, color, left, right) tuples.

    Colors are "B" or "R"; an absent child is None.
    """
    arena = tree._arena

    def walk(handle):
        if handle == NIL:
            return None
        node = arena[handle]
        return (node.key, node.color.name[0], walk(node.left), walk(node.right))

    return walk(tree._root)


@pytest.fixture
def shape():
    """Provide a function rendering a tree's structure for comparisons."""
    return _shape
