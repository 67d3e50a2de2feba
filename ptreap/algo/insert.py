from __future__ import annotations

from typing import Any, Optional

from ptreap.core.node import TreapNode
from ptreap.core.ordering import LessFn, Ordering
from ptreap.core.persistence import rotate_left, rotate_right, with_left, with_right
from ptreap.core.priority import PrioritySource


def insert_node(root: Optional[TreapNode], new: TreapNode, less: LessFn) -> TreapNode:
    """Return a new root holding every node of `root` plus the leaf `new`.

    Nodes on the descent path are copied with their size incremented; all
    other subtrees are shared. On the way back up, a child whose priority now
    exceeds its parent's is rotated above it. Values ordering equal to an
    existing node descend to its left.
    """

    if root is None:
        return new

    go_right = new.score > root.score or (
        not new.score < root.score and less(root.value, new.value)
    )
    if go_right:
        right = insert_node(root.right, new, less)
        if right.priority > root.priority:
            return rotate_left(root, right)
        return with_right(root, right, size=root.size + 1)

    left = insert_node(root.left, new, less)
    if left.priority > root.priority:
        return rotate_right(root, left)
    return with_left(root, left, size=root.size + 1)


def insert(
    root: Optional[TreapNode],
    value: Any,
    ordering: Ordering,
    priorities: PrioritySource,
) -> TreapNode:
    new = TreapNode.leaf(value, priority=priorities.draw(), score=ordering.score_of(value))
    return insert_node(root, new, ordering.less)
