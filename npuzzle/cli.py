"""Command line front door.

Usage::

    npuzzle solve 1 2 3 4 5 6 7 0 8        # size inferred from tile count
    npuzzle solve --random -s 3 --seed 7   # scrambled 3×3
    npuzzle solve -v --timeout 5 ...       # debug logging, 5 s deadline
    npuzzle render 1 2 3 4 5 6 7 0 8       # plain text rendering
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import rich.box
import typer
from rich.align import Align
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.generator import BoardGenerator
from npuzzle.engine.solver import Solver, SolverConfig
from npuzzle.errors import InvalidArgumentError, InvalidBoardError, SearchAbortedError
from npuzzle.models.board import Board

console = Console()

app = typer.Typer(add_completion=False, help="Optimal N-puzzle solver.")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _board_from_args(tiles: list[int], size: Optional[int]) -> Board:
    if not tiles:
        raise typer.BadParameter("No tiles given.", param_hint="TILES")
    if size is None:
        size = math.isqrt(len(tiles))
        if size * size != len(tiles):
            raise typer.BadParameter(
                f"{len(tiles)} tiles do not form a square board.",
                param_hint="TILES",
            )
    try:
        return Board.from_flat(size, tiles)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint="TILES") from exc


# -- board rendering ----------------------------------------------------------


_TILE_STYLES = {"blank": "dim", "placed": "bold green", "misplaced": "bold white"}


def _tile_cell(board: Board, row: int, col: int, width: int) -> Text:
    value = board.tiles[row][col]
    if value == 0:
        return Text("·", style=_TILE_STYLES["blank"])
    state = "placed" if board.is_tile_correct(row, col) else "misplaced"
    return Text(str(value).rjust(width), style=_TILE_STYLES[state])


def _render_board(board: Board) -> Table:
    """Grid of tiles; tiles already in their goal cell are green."""
    width = len(str(board.size ** 2 - 1))
    table = Table(show_header=False, box=rich.box.HEAVY, border_style="bright_blue")
    for _ in range(board.size):
        table.add_column(justify="center", min_width=width)
    for r in range(board.size):
        table.add_row(*(_tile_cell(board, r, c, width) for c in range(board.size)))
    return table


def _print_solution(solver: Solver, show_boards: bool) -> None:
    directions = solver.directions() or []
    console.print(
        f"[bold green]Solvable in {solver.moves()} moves.[/bold green]"
    )
    if directions:
        console.print(
            Text("Moves: ", style="cyan")
            + Text(" ".join(d.value for d in directions))
        )
    if show_boards:
        boards = solver.solution() or []
        for i, (direction, board) in enumerate(zip(directions, boards[1:]), 1):
            console.print(Text(f"Move {i}: {direction.value}", style="dim"))
            console.print(_render_board(board))


# -- commands -----------------------------------------------------------------


@app.command()
def solve(
    tiles: Optional[list[int]] = typer.Argument(
        None, help="Row-major tiles, 0 for the blank.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=1,
        help="Board size. Inferred from TILES when omitted; 3 with --random.",
    ),
    random_board: bool = typer.Option(
        False, "--random",
        help="Solve a randomly scrambled board instead of TILES.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    depth: Optional[int] = typer.Option(
        None, "--depth",
        min=1,
        help="Number of random slides for --random.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        envvar="NPUZZLE_TIMEOUT",
        help="Abort the search after this many seconds.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        envvar="NPUZZLE_MAX_EXPANSIONS",
        help="Abort the search after expanding this many nodes.",
    ),
    show_boards: bool = typer.Option(
        False, "--show-boards",
        help="Print every board along the solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find a shortest solution, or report that none exists."""
    _configure_logging(verbose)

    if random_board:
        if tiles:
            raise typer.BadParameter("Give either TILES or --random, not both.")
        try:
            board = BoardGenerator.generate(size or 3, depth=depth, seed=seed)
        except InvalidArgumentError as exc:
            raise typer.BadParameter(str(exc), param_hint="--size") from exc
    else:
        board = _board_from_args(tiles or [], size)

    try:
        config = SolverConfig(timeout=timeout, max_expansions=max_expansions)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc

    console.print(
        Panel(
            Align.center(_render_board(board)),
            title=f"[bold cyan]{board.size}×{board.size} puzzle[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
    )

    try:
        solver = Solver(board, config)
    except SearchAbortedError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1) from exc

    if solver.is_solvable():
        _print_solution(solver, show_boards)
    else:
        console.print("[bold red]Unsolvable.[/bold red]")

    stats = solver.stats
    console.print(
        f"[dim]Expanded {stats.expanded} nodes "
        f"(+{stats.twin_expanded} on the twin) in {stats.elapsed:.3f}s[/dim]"
    )


@app.command()
def render(
    tiles: list[int] = typer.Argument(..., help="Row-major tiles, 0 for the blank."),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=1,
        help="Board size. Inferred from TILES when omitted.",
    ),
) -> None:
    """Print the plain text rendering of a board."""
    typer.echo(str(_board_from_args(tiles, size)), nl=False)
