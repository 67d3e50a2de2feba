"""Node-level treap algorithms: search, copy-on-write mutation, order statistics."""

from .insert import insert, insert_node
from .rank import get_rank, in_range, remove_rank
from .remove import remove, remove_leftmost, remove_root
from .search import contains
from .traverse import height, iter_nodes, iter_values, render, validate

__all__ = [
    "contains",
    "insert",
    "insert_node",
    "remove",
    "remove_leftmost",
    "remove_root",
    "get_rank",
    "in_range",
    "remove_rank",
    "height",
    "iter_nodes",
    "iter_values",
    "render",
    "validate",
]
