"""Rich terminal frontend — coloured grids, move tables, and stat panels.

Uses the ``rich`` library for styled output while sharing the same
backend results as the vanilla CLI.
"""

from __future__ import annotations

from collections.abc import Iterable

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SolveResult
from backend.models.board import CLEAR, GOAL, MASTER, WALL, Board, Move

console = Console()

_PIECE_STYLES = ("cyan", "magenta", "blue", "yellow", "bright_cyan", "bright_magenta")


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


def _cell(val: int, width: int) -> str:
    if val == GOAL:
        return f"[bold yellow]{'◎':>{width}}[/bold yellow]"
    if val == CLEAR:
        return f"[dim]{'·':>{width}}[/dim]"
    if val == WALL:
        return f"[grey50]{'█' * width}[/grey50]"
    if val == MASTER:
        return f"[bold red]{val:>{width}}[/bold red]"
    style = _PIECE_STYLES[val % len(_PIECE_STYLES)]
    return f"[bold {style}]{val:>{width}}[/bold {style}]"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(len(str(v)) for row in board.tiles for v in row)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width, justify="center")

    for row in board.tiles:
        table.add_row(*(_cell(v, width) for v in row))
    return table


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=f"[bold]{title}[/bold]",
        border_style=style,
        padding=(0, 2),
        expand=False,
    )


def _stats(result: SolveResult) -> Text:
    stats = Text()
    stats.append("  Nodes visited: ", style="dim")
    stats.append(str(result.nodes_visited), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(result.elapsed_time), style="bold yellow")
    if result.moves is not None:
        stats.append("    Moves: ", style="dim")
        stats.append(str(len(result.moves)), style="bold yellow")
    return stats


def _moves_table(moves: list[Move]) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        title="Solution",
        title_style="bold cyan",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Piece", justify="right", style="bold")
    table.add_column("Direction", style="cyan")
    for i, move in enumerate(moves, 1):
        table.add_row(str(i), str(move.piece), move.direction.value)
    return table


# -- public entry points ------------------------------------------------------


def show_search(
    board: Board,
    result: SolveResult,
    path: list[Board],
    show_path: bool = False,
) -> None:
    """Render the starting board, the solution (or failure), and stats."""
    console.print(_board_panel(board, f"Puzzle  {board.width}×{board.height}"))

    if result.moves is None:
        console.print(
            Panel(
                Group(Text("No solution found.", style="bold red"), _stats(result)),
                border_style="red",
                expand=False,
            )
        )
        return

    if show_path:
        for i, (move, after) in enumerate(zip(result.moves, path), 1):
            console.print(_board_panel(after, f"{i}. {move}", style="cyan"))
    else:
        console.print(_moves_table(result.moves))
        if path:
            console.print(_board_panel(path[-1], "Solved", style="bold green"))

    console.print(
        Panel(
            Group(Text("Solved!", style="bold green"), _stats(result)),
            border_style="bold green",
            expand=False,
        )
    )


def show_walk(steps: Iterable[tuple[Board, Move | None]]) -> None:
    """Render each board of a random walk."""
    count = 0
    for board, move in steps:
        title = "Start" if move is None else f"{count}. {move}"
        style = "bold green" if board.is_solved() else "bright_blue"
        console.print(_board_panel(board, title, style=style))
        count += 1


def show_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
