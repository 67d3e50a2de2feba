"""Order-statistics queries driven by the subtree size counters."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from ptreap.core.node import TreapNode, node_size
from ptreap.core.persistence import with_left, with_right
from ptreap.algo.remove import remove_root


def in_range(root: Optional[TreapNode], rank: int) -> bool:
    return 0 <= rank < node_size(root)


def get_rank(root: Optional[TreapNode], rank: int) -> Any:
    """Return the value at 0-based `rank`, or None when out of range."""

    if not in_range(root, rank):
        return None
    node = root
    while node is not None:
        left_count = node_size(node.left)
        if rank < left_count:
            node = node.left
        elif rank > left_count:
            rank -= left_count + 1
            node = node.right
        else:
            return node.value
    return None


def _remove_rank(node: TreapNode, rank: int) -> Tuple[Optional[TreapNode], Any]:
    left_count = node_size(node.left)
    if rank < left_count:
        left, value = _remove_rank(node.left, rank)
        return with_left(node, left, size=node.size - 1), value
    if rank > left_count:
        right, value = _remove_rank(node.right, rank - left_count - 1)
        return with_right(node, right, size=node.size - 1), value
    return remove_root(node), node.value


def remove_rank(root: Optional[TreapNode], rank: int) -> Tuple[Optional[TreapNode], Any]:
    """Remove the node at 0-based `rank`.

    Returns the new root and the detached value. An out-of-range rank returns
    `root` unchanged together with None.
    """

    if not in_range(root, rank):
        return root, None
    return _remove_rank(root, rank)
