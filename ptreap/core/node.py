from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, eq=False)
class TreapNode:
    """Immutable treap node; the subtree rooted here is a complete treap.

    Nodes are never modified after construction. Versions of a treap share
    every subtree that an operation did not touch, so a node may be reachable
    from any number of roots. Equality is identity.
    """

    size: int
    priority: int
    value: Any
    score: float
    left: Optional["TreapNode"] = None
    right: Optional["TreapNode"] = None

    @classmethod
    def leaf(cls, value: Any, *, priority: int, score: float) -> "TreapNode":
        return cls(1, priority, value, score)

    def __repr__(self) -> str:
        return (
            f"TreapNode(value={self.value!r}, priority={self.priority}, "
            f"size={self.size})"
        )


def node_size(node: Optional[TreapNode]) -> int:
    return 0 if node is None else node.size


def sum_sizes(left: Optional[TreapNode], right: Optional[TreapNode]) -> int:
    return node_size(left) + node_size(right)


__all__ = ["TreapNode", "node_size", "sum_sizes"]
