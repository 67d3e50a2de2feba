from __future__ import annotations

from typing import List, Optional

import typer

from ptreap import Treap


def render_command(
    values: List[int] = typer.Argument(..., help="Integers to insert, in order."),
    remove_ranks: Optional[List[int]] = typer.Option(
        None,
        "--remove-rank",
        "-r",
        help="Rank to remove after building (repeatable, applied to the current tree).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for node priorities."),
) -> None:
    """Build a treap from VALUES and print its in-order rendering."""

    tree = Treap(seed=seed)
    for value in values:
        tree = tree.insert(value)
    for rank in remove_ranks or []:
        tree, removed = tree.remove_n(rank)
        if removed is None:
            typer.echo(f"rank {rank} out of range (len {len(tree)}); skipped", err=True)
    typer.echo(str(tree))
    typer.echo(f"len={len(tree)} height={tree.height()}")


__all__ = ["render_command"]
