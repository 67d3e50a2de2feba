import dataclasses

import pytest

from ptreap.core import TreapNode, rotate_left, rotate_right, sink, with_children
from ptreap.core.ordering import resolve_ordering
from ptreap.algo import iter_values, validate


def _leaf(value: int, priority: int) -> TreapNode:
    return TreapNode.leaf(value, priority=priority, score=float(value))


def test_nodes_are_frozen():
    node = _leaf(1, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = 2  # type: ignore[misc]


def test_with_children_recomputes_size_and_keeps_input():
    node = _leaf(5, 10)
    left, right = _leaf(3, 1), _leaf(7, 2)
    cloned = with_children(node, left, right)
    assert cloned is not node
    assert cloned.size == 3
    assert (cloned.left, cloned.right) == (left, right)
    assert node.left is None and node.size == 1


def test_rotate_right_promotes_left_child():
    a, c, e = _leaf(1, 1), _leaf(3, 1), _leaf(5, 1)
    child = TreapNode(3, 50, 2, 2.0, a, c)
    parent = TreapNode(2, 10, 4, 4.0, None, e)
    rotated = rotate_right(parent, child)
    assert rotated.value == 2
    assert rotated.priority == 50
    assert rotated.size == 5
    assert rotated.left is a
    assert rotated.right.value == 4
    assert rotated.right.left is c
    assert rotated.right.right is e
    assert list(iter_values(rotated)) == [1, 2, 3, 4, 5]


def test_rotate_left_promotes_right_child():
    a, c, e = _leaf(1, 1), _leaf(3, 1), _leaf(5, 1)
    child = TreapNode(3, 50, 4, 4.0, c, e)
    parent = TreapNode(2, 10, 2, 2.0, a, None)
    rotated = rotate_left(parent, child)
    assert rotated.value == 4
    assert rotated.size == 5
    assert rotated.right is e
    assert rotated.left.left is a
    assert rotated.left.right is c
    assert list(iter_values(rotated)) == [1, 2, 3, 4, 5]


def test_sink_restores_heap_order():
    left = TreapNode(2, 70, 2, 2.0, _leaf(1, 20), _leaf(3, 30))
    right = TreapNode(2, 60, 6, 6.0, _leaf(5, 40), None)
    misplaced = TreapNode(6, 1, 4, 4.0, left, right)
    repaired = sink(misplaced)
    validate(repaired, resolve_ordering(0))
    assert repaired.priority == 70
    assert list(iter_values(repaired)) == [1, 2, 3, 4, 5, 6]
    assert sink(None) is None
    assert sink(left) is left


def test_validate_rejects_broken_sizes():
    broken = TreapNode(5, 10, 2, 2.0, _leaf(1, 1), None)
    with pytest.raises(ValueError, match="Size"):
        validate(broken, resolve_ordering(0))


def test_validate_rejects_heap_violation():
    broken = TreapNode(2, 10, 2, 2.0, _leaf(1, 99), None)
    with pytest.raises(ValueError, match="Heap"):
        validate(broken, resolve_ordering(0))


def test_validate_rejects_misordered_children():
    broken = TreapNode(2, 10, 2, 2.0, _leaf(3, 1), None)
    with pytest.raises(ValueError, match="Order"):
        validate(broken, resolve_ordering(0))


def test_validate_rejects_stale_score():
    broken = TreapNode(1, 10, 2, 9.0)
    with pytest.raises(ValueError, match="score"):
        validate(broken, resolve_ordering(0))
