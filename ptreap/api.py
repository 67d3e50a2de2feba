"""Public persistent treap handle."""

from __future__ import annotations

import operator
from typing import Any, Iterator, Optional, Tuple

from ptreap import algo
from ptreap.core.node import TreapNode, node_size
from ptreap.core.ordering import Ordering, resolve_ordering
from ptreap.core.priority import PrioritySource, as_priority_source


class Treap:
    """Immutable ordered multiset with O(log N) expected updates and rank access.

    Every "mutating" method returns a new :class:`Treap` and leaves the
    receiver untouched; versions share all the structure an operation did not
    need to copy.

    Parameters
    ----------
    ordering:
        Explicit comparison strategy used for every value. When omitted, the
        strategy is resolved from each value's type (``<`` plus an optional
        numeric score, see :mod:`ptreap.core.ordering`).
    seed:
        Seed for a private priority source, making the shapes of this version
        family reproducible. Ignored when `rng` is given.
    rng:
        Priority source to draw from. Defaults to the process-wide source.
    """

    __slots__ = ("_root", "_ordering", "_priorities")

    def __init__(
        self,
        *,
        ordering: Optional[Ordering] = None,
        seed: int | None = None,
        rng: Optional[PrioritySource] = None,
    ) -> None:
        self._root: Optional[TreapNode] = None
        self._ordering = ordering
        self._priorities = rng if rng is not None else as_priority_source(seed)

    def _derive(self, root: Optional[TreapNode]) -> "Treap":
        derived = Treap.__new__(Treap)
        derived._root = root
        derived._ordering = self._ordering
        derived._priorities = self._priorities
        return derived

    def _ordering_for(self, value: Any) -> Ordering:
        if self._ordering is not None:
            return self._ordering
        return resolve_ordering(value)

    @property
    def root(self) -> Optional[TreapNode]:
        return self._root

    @property
    def ordering(self) -> Optional[Ordering]:
        return self._ordering

    @property
    def priorities(self) -> PrioritySource:
        return self._priorities

    def insert(self, value: Any) -> "Treap":
        ordering = self._ordering_for(value)
        return self._derive(algo.insert(self._root, value, ordering, self._priorities))

    def remove(self, value: Any) -> "Treap":
        """Remove one value ordering equal to `value`; return self if none does."""

        root = algo.remove(self._root, value, self._ordering_for(value))
        if root is self._root:
            return self
        return self._derive(root)

    def remove_n(self, n: int) -> Tuple["Treap", Any]:
        """Remove the value at 0-based rank `n`.

        Returns the new treap and the removed value. When `n` is outside
        ``[0, len(self))`` the result is ``(self, None)``.
        """

        root, value = algo.remove_rank(self._root, n)
        if root is self._root:
            return self, value
        return self._derive(root), value

    def get_n(self, n: int) -> Any:
        """Return the value at 0-based rank `n`, or None when out of range."""

        return algo.get_rank(self._root, n)

    def contains(self, value: Any) -> bool:
        if self._root is None:
            return False
        return algo.contains(self._root, value, self._ordering_for(value))

    def height(self) -> int:
        return algo.height(self._root)

    def validate(self) -> None:
        """Check every structural invariant, raising ValueError on the first failure."""

        if self._root is None:
            return
        algo.validate(self._root, self._ordering_for(self._root.value))

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return node_size(self._root)

    def __iter__(self) -> Iterator[Any]:
        return algo.iter_values(self._root)

    def __getitem__(self, index: int | slice) -> Any:
        size = len(self)
        if isinstance(index, slice):
            return [algo.get_rank(self._root, rank) for rank in range(*index.indices(size))]
        try:
            index = operator.index(index)
        except TypeError as exc:
            raise TypeError(
                f"treap indices must be integers or slices, not {type(index).__name__}"
            ) from exc
        if index < 0:
            index += size
        if not algo.in_range(self._root, index):
            raise IndexError("treap index out of range")
        return algo.get_rank(self._root, index)

    def __str__(self) -> str:
        return algo.render(self._root)

    def __repr__(self) -> str:
        return f"Treap([{', '.join(repr(value) for value in self)}])"


def new(
    *,
    ordering: Optional[Ordering] = None,
    seed: int | None = None,
    rng: Optional[PrioritySource] = None,
) -> Treap:
    """Return an empty treap."""

    return Treap(ordering=ordering, seed=seed, rng=rng)


__all__ = ["Treap", "new"]
