"""Core data structures and persistence primitives for the treap."""

from .node import TreapNode, node_size, sum_sizes
from .ordering import LESS_ONLY, NO_SCORE, Ordering, Scored, resolve_ordering
from .persistence import rotate_left, rotate_right, sink, with_children, with_left, with_right
from .priority import (
    PrioritySource,
    as_priority_source,
    default_priority_source,
    reset_default_priority_source,
)

__all__ = [
    "TreapNode",
    "node_size",
    "sum_sizes",
    "LESS_ONLY",
    "NO_SCORE",
    "Ordering",
    "Scored",
    "resolve_ordering",
    "rotate_left",
    "rotate_right",
    "sink",
    "with_children",
    "with_left",
    "with_right",
    "PrioritySource",
    "as_priority_source",
    "default_priority_source",
    "reset_default_priority_source",
]
