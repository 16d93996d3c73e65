"""Vanilla terminal frontend — no third-party dependencies.

Prints boards in the level file format, so any board it shows can be
pasted back into a level file.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from backend.engine.gamesolver import SolveResult
from backend.models.board import Board, Move


def _format_time(seconds: float) -> str:
    return f"{seconds:.3f}s"


# -- public entry points ------------------------------------------------------


def show_search(
    board: Board,
    result: SolveResult,
    path: list[Board],
    show_path: bool = False,
) -> None:
    """Print the starting board, the solution moves, and the run stats.

    *path* holds the board after each solution move. With *show_path*
    every one of them is printed after its move, otherwise only the last.
    """
    print(board.to_text())

    if result.moves is None:
        print("No solution found.")
    else:
        for move, after in zip(result.moves, path):
            print(move)
            if show_path:
                print()
                print(after.to_text())
        if path and not show_path:
            print()
            print(path[-1].to_text())

    print(f"Nodes visited: {result.nodes_visited}")
    print(f"Search time: {_format_time(result.elapsed_time)}")
    if result.moves is not None:
        print(f"Solution length: {len(result.moves)}")


def show_walk(steps: Iterable[tuple[Board, Move | None]]) -> None:
    """Print each board of a random walk, preceded by the move that made it."""
    for board, move in steps:
        if move is not None:
            print(move)
            print()
        print(board.to_text())


def show_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
