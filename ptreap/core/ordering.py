"""Comparator contract used by every positional operation.

A value type must support ``<``. It may additionally expose a numeric
projection through :class:`Scored`; when it does, comparisons discriminate on
the cached score first and only call ``<`` to break ties between equal
scores. Scores must be monotonic with ``<``: ``score(a) < score(b)`` implies
``a < b``. A violated contract yields undefined ordering, not an error.
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import Any, Callable, Optional, Protocol, runtime_checkable

LessFn = Callable[[Any, Any], bool]
ScoreFn = Callable[[Any], float]

NO_SCORE = 0.0

_STR_BASE = 0x110001
_BYTES_BASE = 257
_STR_PREFIX = 2
_BYTES_PREFIX = 6


@runtime_checkable
class Scored(Protocol):
    def sort_score(self) -> float:
        ...


def _prefix_score(codes: Any, base: int, width: int) -> float:
    score = 0
    for idx in range(width):
        digit = codes[idx] + 1 if idx < len(codes) else 0
        score = score * base + digit
    return float(score)


def score_number(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # Beyond the float range; equal infinite scores defer to `<`.
        return math.inf if value > 0 else -math.inf


def score_str(value: str) -> float:
    return _prefix_score([ord(ch) for ch in value[:_STR_PREFIX]], _STR_BASE, _STR_PREFIX)


def score_bytes(value: bytes) -> float:
    return _prefix_score(value[:_BYTES_PREFIX], _BYTES_BASE, _BYTES_PREFIX)


def score_scored(value: Scored) -> float:
    return float(value.sort_score())


@dataclass(frozen=True)
class Ordering:
    """Resolved comparison strategy: mandatory `less`, optional `score`."""

    less: LessFn = operator.lt
    score: Optional[ScoreFn] = None

    def score_of(self, value: Any) -> float:
        if self.score is None:
            return NO_SCORE
        return self.score(value)

    def compare(self, value: Any, score: float, other: Any, other_score: float) -> int:
        """Return -1, 0 or 1 as `value` orders before, with or after `other`."""

        if score < other_score:
            return -1
        if other_score < score:
            return 1
        if self.less(value, other):
            return -1
        if self.less(other, value):
            return 1
        return 0


LESS_ONLY = Ordering()


@lru_cache(maxsize=None)
def _ordering_for_type(value_type: type) -> Ordering:
    if issubclass(value_type, (numbers.Real, Decimal)):
        return Ordering(score=score_number)
    if issubclass(value_type, str):
        return Ordering(score=score_str)
    if issubclass(value_type, (bytes, bytearray)):
        return Ordering(score=score_bytes)
    if issubclass(value_type, Scored):
        return Ordering(score=score_scored)
    return LESS_ONLY


def resolve_ordering(value: Any) -> Ordering:
    """Select the ordering strategy for `value` from its type."""

    return _ordering_for_type(type(value))


__all__ = [
    "LESS_ONLY",
    "NO_SCORE",
    "Ordering",
    "Scored",
    "resolve_ordering",
    "score_bytes",
    "score_number",
    "score_scored",
    "score_str",
]
