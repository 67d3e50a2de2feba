"""Copy-on-write primitives shared by the structural operations.

Every helper here returns freshly allocated nodes and leaves its inputs
untouched; the subtrees passed in are linked by reference, never copied.
"""

from __future__ import annotations

from typing import Optional

from ptreap.core.node import TreapNode, sum_sizes


def with_children(
    node: TreapNode,
    left: Optional[TreapNode],
    right: Optional[TreapNode],
) -> TreapNode:
    """Clone `node` with new children and a size recomputed from them."""

    return TreapNode(
        1 + sum_sizes(left, right),
        node.priority,
        node.value,
        node.score,
        left,
        right,
    )


def with_left(node: TreapNode, left: Optional[TreapNode], *, size: int) -> TreapNode:
    return TreapNode(size, node.priority, node.value, node.score, left, node.right)


def with_right(node: TreapNode, right: Optional[TreapNode], *, size: int) -> TreapNode:
    return TreapNode(size, node.priority, node.value, node.score, node.left, right)


def rotate_right(node: TreapNode, left: TreapNode) -> TreapNode:
    """Promote `left` (the new left child of `node`) above `node`.

    `node.left` is ignored; `left` replaces it. The returned root covers the
    same values as `node` with `left` substituted.
    """

    demoted = with_children(node, left.right, node.right)
    return TreapNode(
        1 + sum_sizes(left.left, demoted),
        left.priority,
        left.value,
        left.score,
        left.left,
        demoted,
    )


def rotate_left(node: TreapNode, right: TreapNode) -> TreapNode:
    """Mirror image of :func:`rotate_right`."""

    demoted = with_children(node, node.left, right.left)
    return TreapNode(
        1 + sum_sizes(demoted, right.right),
        right.priority,
        right.value,
        right.score,
        demoted,
        right.right,
    )


def sink(node: Optional[TreapNode]) -> Optional[TreapNode]:
    """Move a correctly ordered but misprioritised root down to its heap level.

    Both children of `node` must already be valid treaps. The root is rotated
    with whichever child carries the higher priority until neither child
    outranks it.
    """

    if node is None:
        return None
    left, right = node.left, node.right
    left_wins = left is not None and left.priority > node.priority
    right_wins = right is not None and right.priority > node.priority
    if not left_wins and not right_wins:
        return node
    if left_wins and (not right_wins or left.priority > right.priority):
        demoted = sink(with_children(node, left.right, right))
        return TreapNode(node.size, left.priority, left.value, left.score, left.left, demoted)
    demoted = sink(with_children(node, left, right.left))
    return TreapNode(node.size, right.priority, right.value, right.score, demoted, right.right)


__all__ = [
    "with_children",
    "with_left",
    "with_right",
    "rotate_left",
    "rotate_right",
    "sink",
]
