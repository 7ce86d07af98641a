#!/usr/bin/env python3
"""Fifteen puzzle command line.

Usage::

    fifteen shuffle                      # random board and its verdict
    fifteen shuffle --steps 30 --seed 7  # board 30 random slides from solved
    fifteen check 2 1 3 4 5 6 7 8 9 10 11 12 13 14 15 16
    fifteen solve 1 2 3 4 5 6 7 8 9 10 11 12 13 16 14 15
    fifteen hint  1 2 3 4 5 6 7 8 9 10 11 12 13 16 14 15
"""

import json
import logging
import random
from typing import List, Optional

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gamesolver import Solver, is_solvable
from fifteen.engine.worker import SolverWorker
from fifteen.models.board import Board, InvalidBoardError, Tile
from fifteen.settings import Settings, load_settings

console = Console()
err_console = Console(stderr=True)

EXIT_UNSOLVABLE = 1
EXIT_INVALID = 2


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def _parse_board(tiles: List[int]) -> Board:
    try:
        return Board.from_flat(tiles)
    except InvalidBoardError as e:
        err_console.print(f"[red]Invalid board:[/red] {e}")
        raise typer.Exit(EXIT_INVALID)


def _load_settings() -> Settings:
    try:
        return load_settings()
    except ValueError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(EXIT_INVALID)


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.blank - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.to_rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == board.blank:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.size + c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)
    return table


def _render_moves(moves: list[Tile]) -> Table:
    table = Table(box=rich.box.SIMPLE, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("value", justify="right")
    table.add_column("index", justify="right")
    for i, tile in enumerate(moves, 1):
        table.add_row(str(i), str(tile.value), str(tile.index))
    return table


def _print_verdict(solvable: bool) -> None:
    if solvable:
        console.print("[bold green]Solvable[/bold green]")
    else:
        console.print("[bold red]Unsolvable configuration[/bold red]")


# -- CLI ----------------------------------------------------------------------

app = typer.Typer(add_completion=False, help="Fifteen puzzle solver.")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log solver progress at DEBUG level."
    ),
) -> None:
    """Fifteen puzzle solver."""
    settings = _load_settings()
    _configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def shuffle(
    size: Optional[int] = typer.Option(
        None, "-s", "--size", min=2, max=8, help="Grid size."
    ),
    unsolvable: bool = typer.Option(
        False, "--unsolvable", help="Deal an unsolvable board."
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=1,
        help="Scramble by this many random slides instead of a full shuffle.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print a shuffled board and whether it can be solved."""
    size = size or _load_settings().size
    rng = random.Random(seed)
    if steps is not None and not unsolvable:
        board = GameGenerator.generate(size, steps=steps, rng=rng)
    else:
        board = GameGenerator.shuffle(size, force_unsolvable=unsolvable, rng=rng)

    console.print(_render_board(board))
    console.print(" ".join(str(v) for v in board.tiles))
    _print_verdict(is_solvable(board))


@app.command()
def check(tiles: List[int] = typer.Argument(..., help="Tile values in slot order.")) -> None:
    """Exit 0 if the board is solvable, 1 otherwise."""
    board = _parse_board(tiles)
    solvable = is_solvable(board)
    _print_verdict(solvable)
    if not solvable:
        raise typer.Exit(EXIT_UNSOLVABLE)


@app.command()
def solve(
    tiles: List[int] = typer.Argument(..., help="Tile values in slot order."),
    as_json: bool = typer.Option(False, "--json", help="Print moves as JSON."),
) -> None:
    """Print the move list that solves the board."""
    board = _parse_board(tiles)
    if not is_solvable(board):
        _print_verdict(False)
        raise typer.Exit(EXIT_UNSOLVABLE)

    settings = _load_settings()
    with SolverWorker(settings.executor, settings.max_workers) as worker:
        worker.submit(board)
        if as_json:
            moves = worker.result()
        else:
            with console.status("Searching…"):
                moves = worker.result()

    if as_json:
        typer.echo(json.dumps([m.to_dict() for m in moves], indent=2))
        return

    console.print(_render_board(board))
    if not moves:
        console.print("[green]Already solved![/green]")
        return
    console.print(_render_moves(moves))
    console.print(f"[bold green]Solved in {len(moves)} moves![/bold green]")


@app.command()
def hint(tiles: List[int] = typer.Argument(..., help="Tile values in slot order.")) -> None:
    """Print the next tile to move."""
    board = _parse_board(tiles)
    if not is_solvable(board):
        _print_verdict(False)
        raise typer.Exit(EXIT_UNSOLVABLE)

    move = Solver.hint(board)
    if move is None:
        console.print("[green]Already solved![/green]")
        return
    console.print(
        f"[cyan]Hint:[/cyan] move [bold]{move.value}[/bold] into slot {move.index}"
    )


if __name__ == "__main__":
    app()
