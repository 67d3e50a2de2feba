from __future__ import annotations

from typing import Any, Optional, Tuple

from ptreap.core.node import TreapNode
from ptreap.core.ordering import LessFn, Ordering
from ptreap.core.persistence import sink, with_left, with_right


def remove_leftmost(node: TreapNode) -> Tuple[TreapNode, Optional[TreapNode]]:
    """Detach the smallest node of `node`'s subtree.

    Returns the detached node and the subtree without it.
    """

    if node.left is None:
        return node, node.right
    detached, left = remove_leftmost(node.left)
    return detached, with_left(node, left, size=node.size - 1)


def remove_root(node: TreapNode) -> Optional[TreapNode]:
    """Return `node`'s subtree with `node` itself spliced out."""

    left, right = node.left, node.right
    if left is None:
        return right
    if right is None:
        return left
    successor, right = remove_leftmost(right)
    spliced = TreapNode(
        node.size - 1,
        successor.priority,
        successor.value,
        successor.score,
        left,
        right,
    )
    return sink(spliced)


def _remove(
    node: Optional[TreapNode], value: Any, score: float, less: LessFn
) -> Tuple[Optional[TreapNode], bool]:
    if node is None:
        return None, False

    if score < node.score:
        go_right = False
    elif node.score < score or less(node.value, value):
        go_right = True
    elif not less(value, node.value):
        return remove_root(node), True
    else:
        go_right = False

    if go_right:
        right, found = _remove(node.right, value, score, less)
        if not found:
            return node, False
        return with_right(node, right, size=node.size - 1), True

    left, found = _remove(node.left, value, score, less)
    if not found:
        return node, False
    return with_left(node, left, size=node.size - 1), True


def remove(root: Optional[TreapNode], value: Any, ordering: Ordering) -> Optional[TreapNode]:
    """Return a root without one node ordering equal to `value`.

    When nothing matches, `root` itself is returned and no node is allocated.
    When several nodes match, exactly one of them is removed.
    """

    new_root, found = _remove(root, value, ordering.score_of(value), ordering.less)
    return new_root if found else root
