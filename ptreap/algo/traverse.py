from __future__ import annotations

from typing import Any, Iterator, List, Optional

from ptreap.core.node import TreapNode, sum_sizes
from ptreap.core.ordering import Ordering


def iter_nodes(root: Optional[TreapNode]) -> Iterator[TreapNode]:
    """Yield the nodes reachable from `root` in ascending order."""

    stack: List[TreapNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def iter_values(root: Optional[TreapNode]) -> Iterator[Any]:
    for node in iter_nodes(root):
        yield node.value


def render(root: Optional[TreapNode]) -> str:
    """Space separated ``str()`` of each value in order; empty text when empty."""

    return " ".join(str(value) for value in iter_values(root))


def height(root: Optional[TreapNode]) -> int:
    if root is None:
        return 0
    deepest = 0
    frontier = [(root, 1)]
    while frontier:
        node, depth = frontier.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                frontier.append((child, depth + 1))
    return deepest


def validate(root: Optional[TreapNode], ordering: Ordering) -> None:
    """Raise ValueError if any node breaks the size, order or heap invariants."""

    previous: Optional[TreapNode] = None
    for node in iter_nodes(root):
        expected = 1 + sum_sizes(node.left, node.right)
        if node.size != expected:
            raise ValueError(
                f"Size invariant broken at {node!r}: stored {node.size}, expected {expected}."
            )
        for child in (node.left, node.right):
            if child is not None and child.priority > node.priority:
                raise ValueError(f"Heap invariant broken: {child!r} outranks parent {node!r}.")
        if ordering.score is not None and node.score != ordering.score_of(node.value):
            raise ValueError(f"Cached score of {node!r} does not match its value.")
        if previous is not None and ordering.compare(
            node.value, node.score, previous.value, previous.score
        ) < 0:
            raise ValueError(f"Order invariant broken: {node!r} follows {previous!r}.")
        previous = node
