"""Random heap priorities for newly inserted nodes."""

from __future__ import annotations

import threading
from typing import Optional

import numpy as np
from numpy.random import Generator, default_rng

from ptreap import config as pt_config
from ptreap.logging import get_logger

_BLOCK_SIZE = 1024


class PrioritySource:
    """Thread-safe stream of independent uniform priorities.

    Priorities are drawn in blocks from a NumPy ``Generator`` so that a given
    seed always yields the same sequence regardless of how draws interleave
    with tree operations.
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        bits: int | None = None,
        generator: Optional[Generator] = None,
    ) -> None:
        if bits is None:
            bits = pt_config.runtime_config().priority_bits
        if not 1 <= bits <= 63:
            raise ValueError(f"Priority bits must be in [1, 63], got {bits}.")
        self.seed = seed
        self.bits = bits
        self._high = 1 << bits
        self._rng = generator if generator is not None else default_rng(seed)
        self._lock = threading.Lock()
        self._block = np.empty(0, dtype=np.int64)
        self._cursor = 0

    def _refill(self) -> None:
        self._block = self._rng.integers(0, self._high, size=_BLOCK_SIZE, dtype=np.int64)
        self._cursor = 0

    def draw(self) -> int:
        with self._lock:
            if self._cursor >= self._block.shape[0]:
                self._refill()
            priority = int(self._block[self._cursor])
            self._cursor += 1
        return priority

    def __repr__(self) -> str:
        return f"PrioritySource(seed={self.seed!r}, bits={self.bits})"


_default_source: PrioritySource | None = None
_default_lock = threading.Lock()


def default_priority_source() -> PrioritySource:
    """Return the process-wide source, seeded from ``PTREAP_SEED`` if set."""

    global _default_source
    with _default_lock:
        if _default_source is None:
            runtime = pt_config.runtime_config()
            logger = get_logger(__name__)
            _default_source = PrioritySource(runtime.seed, bits=runtime.priority_bits)
            if runtime.seed is None:
                logger.debug("Seeding default priority source from OS entropy.")
            else:
                logger.debug("Seeding default priority source with %d.", runtime.seed)
        return _default_source


def reset_default_priority_source() -> None:
    global _default_source
    with _default_lock:
        _default_source = None


def as_priority_source(rng: PrioritySource | int | None) -> PrioritySource:
    if rng is None:
        return default_priority_source()
    if isinstance(rng, PrioritySource):
        return rng
    return PrioritySource(int(rng))


__all__ = [
    "PrioritySource",
    "as_priority_source",
    "default_priority_source",
    "reset_default_priority_source",
]
