"""
Invariant checking for Red-Black Trees.
"""

from rbtree.models.exceptions import InvariantViolationError
from rbtree.models.node import NIL, Color, NodeArena


def check_invariants(arena: NodeArena, root: int, count: int) -> int:
    """
    Walk the whole tree and verify every red-black and BST rule.

    Args:
        arena: Arena holding the tree's nodes.
        root: Handle of the root node, NIL for an empty tree.
        count: Number of entries the tree believes it holds.

    Returns:
        The black-height of the root, counting neither the root itself
        nor the nil leaves.

    Raises:
        InvariantViolationError: naming the first rule found broken.
    """
    if root == NIL:
        if count != 0:
            raise InvariantViolationError(f"empty tree reports {count} entries")
        if len(arena) != 0:
            raise InvariantViolationError(f"empty tree holds {len(arena)} nodes")
        return 0

    root_node = arena[root]
    if root_node.parent != NIL:
        raise InvariantViolationError("root has a parent", root_node.key)
    if root_node.color != Color.BLACK:
        raise InvariantViolationError("root is not black", root_node.key)

    visited = 0
    previous = None
    has_previous = False
    # Explicit post-order walk computing black-heights bottom-up
    heights: dict[int, int] = {NIL: 0}
    stack: list[tuple[int, bool]] = [(root, False)]
    while stack:
        handle, expanded = stack.pop()
        node = arena[handle]
        if not expanded:
            if node.color not in (Color.RED, Color.BLACK):
                raise InvariantViolationError("node is neither red nor black", node.key)
            stack.append((handle, True))
            for child in (node.right, node.left):
                if child != NIL:
                    if arena[child].parent != handle:
                        raise InvariantViolationError("broken parent link", arena[child].key)
                    if node.color == Color.RED and arena[child].color == Color.RED:
                        raise InvariantViolationError("red node has a red child", node.key)
                    stack.append((child, False))
            continue

        left_height = heights.pop(node.left) if node.left != NIL else 0
        right_height = heights.pop(node.right) if node.right != NIL else 0
        if left_height != right_height:
            raise InvariantViolationError("unequal black-height", node.key)
        heights[handle] = left_height + (1 if node.color == Color.BLACK else 0)
        visited += 1

    # In-order check for strictly increasing keys
    stack_handles: list[int] = []
    cursor = root
    while stack_handles or cursor != NIL:
        if cursor != NIL:
            stack_handles.append(cursor)
            cursor = arena[cursor].left
            continue
        node = arena[stack_handles.pop()]
        if has_previous and not previous < node.key:
            raise InvariantViolationError("keys not strictly increasing", node.key)
        previous, has_previous = node.key, True
        cursor = node.right

    if visited != count:
        raise InvariantViolationError(f"tree reports {count} entries, found {visited}")
    if len(arena) != visited:
        raise InvariantViolationError(f"arena holds {len(arena)} nodes, found {visited}")
    return heights[root] - 1
