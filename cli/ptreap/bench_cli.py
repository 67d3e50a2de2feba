from __future__ import annotations

import json
from typing import List, Optional

import typer

from ptreap.logging import get_logger

from .support.benchmark_utils import Benchmark, OperationBenchmarkResult, run_benchmark

LOGGER = get_logger("cli.bench")


def _format_text(results: List[OperationBenchmarkResult]) -> str:
    width = max(len(result.name) for result in results)
    lines = [f"{'benchmark':<{width}}  {'ops':>9}  {'seconds':>10}  {'ns/op':>10}"]
    for result in results:
        lines.append(
            f"{result.name:<{width}}  {result.operations:>9d}  "
            f"{result.elapsed_seconds:>10.4f}  {result.ns_per_op:>10.1f}"
        )
    return "\n".join(lines)


def bench_command(
    size: int = typer.Option(10_000, "--size", "-n", min=0, help="Number of elements per tree."),
    seed: int = typer.Option(0, "--seed", help="Seed for permutations and priorities."),
    ops: Optional[List[Benchmark]] = typer.Option(
        None, "--op", help="Benchmark to run (repeatable). Defaults to all."
    ),
    output_format: str = typer.Option("text", "--format", help="Output format: text or json."),
) -> None:
    """Time insert, remove, contains and rank operations on a random tree."""

    if output_format not in {"text", "json"}:
        raise typer.BadParameter("expected 'text' or 'json'", param_hint="--format")
    selected = list(ops) if ops else list(Benchmark)
    LOGGER.debug("Running %d benchmark(s) on %d elements.", len(selected), size)
    try:
        results = [run_benchmark(benchmark, size=size, seed=seed) for benchmark in selected]
    except ValueError as exc:
        typer.echo(f"Benchmark failed: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    if output_format == "json":
        payload = {
            "size": size,
            "seed": seed,
            "results": [result.to_payload() for result in results],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    typer.echo(_format_text(results))


__all__ = ["bench_command"]
