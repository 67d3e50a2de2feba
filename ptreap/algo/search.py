from __future__ import annotations

from typing import Any, Optional

from ptreap.core.node import TreapNode
from ptreap.core.ordering import Ordering


def contains(root: Optional[TreapNode], value: Any, ordering: Ordering) -> bool:
    """Return True iff a node ordering equal to `value` is reachable from `root`."""

    score = ordering.score_of(value)
    less = ordering.less
    node = root
    while node is not None:
        if score < node.score:
            node = node.left
        elif node.score < score:
            node = node.right
        elif less(value, node.value):
            node = node.left
        elif less(node.value, value):
            node = node.right
        else:
            return True
    return False
