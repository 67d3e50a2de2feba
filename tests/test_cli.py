from __future__ import annotations

import json

from typer.testing import CliRunner

from cli.ptreap import app as ptreap_app
from cli.ptreap.support.benchmark_utils import Benchmark, run_benchmark


def test_render_prints_sorted_values() -> None:
    runner = CliRunner()
    result = runner.invoke(ptreap_app, ["render", "3", "1", "2", "0", "--seed", "1"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "0 1 2 3"
    assert lines[1].startswith("len=4 height=")


def test_render_applies_rank_removals_in_order() -> None:
    runner = CliRunner()
    values = [str(value) for value in range(11)]
    result = runner.invoke(
        ptreap_app,
        ["render", *values, "--remove-rank", "0", "--remove-rank", "4", "--remove-rank", "8"],
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines()[0] == "1 2 3 4 6 7 8 9"


def test_render_skips_out_of_range_rank() -> None:
    runner = CliRunner()
    result = runner.invoke(ptreap_app, ["render", "5", "6", "-r", "9"])
    assert result.exit_code == 0
    assert "5 6" in result.stdout
    assert "len=2" in result.stdout


def test_bench_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(
        ptreap_app,
        ["bench", "--size", "64", "--op", "insert", "--op", "remove-n-random", "--format", "json"],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["size"] == 64
    by_name = {entry["name"]: entry for entry in payload["results"]}
    assert set(by_name) == {"insert", "remove-n-random"}
    assert by_name["insert"]["final_length"] == 64
    assert by_name["remove-n-random"]["final_length"] == 0
    assert by_name["insert"]["operations"] == 64


def test_bench_text_output_lists_every_benchmark() -> None:
    runner = CliRunner()
    result = runner.invoke(ptreap_app, ["bench", "--size", "16"])
    assert result.exit_code == 0
    for benchmark in Benchmark:
        assert benchmark.value in result.stdout


def test_bench_rejects_unknown_format() -> None:
    runner = CliRunner()
    result = runner.invoke(ptreap_app, ["bench", "--size", "4", "--format", "xml"])
    assert result.exit_code != 0


def test_run_benchmark_final_lengths() -> None:
    assert run_benchmark(Benchmark.contains, size=32, seed=3).final_length == 32
    assert run_benchmark(Benchmark.remove, size=32, seed=3).final_length == 0
    assert run_benchmark(Benchmark.remove_n_mid, size=32, seed=3).final_length == 0
    assert run_benchmark(Benchmark.get_n_last, size=32, seed=3).operations == 32
    empty = run_benchmark(Benchmark.get_n_first, size=0, seed=3)
    assert empty.operations == 0
    assert empty.ns_per_op == 0.0
