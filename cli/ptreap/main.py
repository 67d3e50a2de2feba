from __future__ import annotations

import typer

from .bench_cli import bench_command
from .render_cli import render_command


_HELP = """Persistent treap command line interface.

Subcommands cover benchmarking and rendering small trees."""

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help=_HELP,
)


@app.callback()
def ptreap_callback() -> None:
    """Root callback reserved for shared options (none yet)."""


app.command("bench", help="Time treap operations on random permutations.")(bench_command)
app.command("render", help="Insert integers and print the resulting tree.")(render_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
