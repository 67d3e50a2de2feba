from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List

from numpy.random import Generator, default_rng

from ptreap import Treap


class Benchmark(str, Enum):
    insert = "insert"
    contains = "contains"
    remove = "remove"
    get_n_first = "get-n-first"
    get_n_last = "get-n-last"
    get_n_random = "get-n-random"
    remove_n_first = "remove-n-first"
    remove_n_last = "remove-n-last"
    remove_n_mid = "remove-n-mid"
    remove_n_random = "remove-n-random"


@dataclass(frozen=True)
class OperationBenchmarkResult:
    name: str
    size: int
    operations: int
    elapsed_seconds: float
    final_length: int

    @property
    def ns_per_op(self) -> float:
        if self.operations == 0:
            return 0.0
        return self.elapsed_seconds * 1e9 / self.operations

    def to_payload(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["ns_per_op"] = self.ns_per_op
        return payload


def permutation(rng: Generator, size: int) -> List[int]:
    return [int(value) for value in rng.permutation(size)]


def build_treap(values: Iterable[int], *, seed: int | None = None) -> Treap:
    tree = Treap(seed=seed)
    for value in values:
        tree = tree.insert(value)
    return tree


def _bench_insert(size: int, rng: Generator, seed: int) -> tuple[int, float, Treap]:
    values = permutation(rng, size)
    tree = Treap(seed=seed)
    start = time.perf_counter()
    for value in values:
        tree = tree.insert(value)
    return size, time.perf_counter() - start, tree


def _bench_contains(size: int, rng: Generator, seed: int) -> tuple[int, float, Treap]:
    tree = build_treap(permutation(rng, size), seed=seed)
    probes = permutation(rng, size)
    start = time.perf_counter()
    for value in probes:
        tree.contains(value)
    return size, time.perf_counter() - start, tree


def _bench_remove(size: int, rng: Generator, seed: int) -> tuple[int, float, Treap]:
    tree = build_treap(permutation(rng, size), seed=seed)
    victims = permutation(rng, size)
    start = time.perf_counter()
    for value in victims:
        tree = tree.remove(value)
    return size, time.perf_counter() - start, tree


def _get_n_runner(choose: Callable[[Treap, int, Generator], List[int]]):
    def _run(size: int, rng: Generator, seed: int) -> tuple[int, float, Treap]:
        tree = build_treap(permutation(rng, size), seed=seed)
        ranks = choose(tree, size, rng)
        start = time.perf_counter()
        for rank in ranks:
            tree.get_n(rank)
        return len(ranks), time.perf_counter() - start, tree

    return _run


def _remove_n_runner(choose: Callable[[int, Generator], int]):
    def _run(size: int, rng: Generator, seed: int) -> tuple[int, float, Treap]:
        tree = build_treap(permutation(rng, size), seed=seed)
        ranks = [choose(remaining, rng) for remaining in range(size, 0, -1)]
        start = time.perf_counter()
        for rank in ranks:
            tree, _ = tree.remove_n(rank)
        return len(ranks), time.perf_counter() - start, tree

    return _run


_RUNNERS: Dict[Benchmark, Callable[[int, Generator, int], tuple[int, float, Treap]]] = {
    Benchmark.insert: _bench_insert,
    Benchmark.contains: _bench_contains,
    Benchmark.remove: _bench_remove,
    Benchmark.get_n_first: _get_n_runner(lambda tree, size, rng: [0] * size),
    Benchmark.get_n_last: _get_n_runner(lambda tree, size, rng: [len(tree) - 1] * size),
    Benchmark.get_n_random: _get_n_runner(lambda tree, size, rng: permutation(rng, size)),
    Benchmark.remove_n_first: _remove_n_runner(lambda remaining, rng: 0),
    Benchmark.remove_n_last: _remove_n_runner(lambda remaining, rng: remaining - 1),
    Benchmark.remove_n_mid: _remove_n_runner(lambda remaining, rng: remaining // 2),
    Benchmark.remove_n_random: _remove_n_runner(
        lambda remaining, rng: int(rng.integers(remaining))
    ),
}


def run_benchmark(benchmark: Benchmark, *, size: int, seed: int) -> OperationBenchmarkResult:
    """Time one operation family; tree construction for read benchmarks is untimed."""

    if size < 0:
        raise ValueError(f"Benchmark size must be non-negative, got {size}.")
    rng = default_rng(seed)
    operations, elapsed, tree = _RUNNERS[benchmark](size, rng, seed)
    return OperationBenchmarkResult(
        name=benchmark.value,
        size=size,
        operations=operations,
        elapsed_seconds=elapsed,
        final_length=len(tree),
    )


__all__ = [
    "Benchmark",
    "OperationBenchmarkResult",
    "build_treap",
    "permutation",
    "run_benchmark",
]
