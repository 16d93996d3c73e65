#!/usr/bin/env python3
"""Sliding Block Puzzle solver.

Usage::

    python main.py                          # BFS on assets/SBP-level0.txt
    python main.py SBP-level1.txt -m dfs    # depth-first search
    python main.py -m walk -n 10 --seed 3   # random walk, 10 moves
    python main.py -f rich --show-path      # Rich output, every board
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from types import ModuleType
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
DEFAULT_LEVEL = Path("assets") / "SBP-level0.txt"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gameplay import GamePlay  # noqa: E402
from backend.engine.gamesolver import Solver, Strategy  # noqa: E402
from backend.engine.gamestate import SearchContext, normalize  # noqa: E402
from backend.engine.gamewalker import RandomWalker  # noqa: E402
from backend.models import Board, LevelFile, MalformedInput, PuzzleError  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Mode(StrEnum):
    bfs = "bfs"
    dfs = "dfs"
    walk = "walk"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, markup=False)],
        force=True,
    )


def _load(level: Path, frontend: ModuleType) -> Board:
    try:
        board = LevelFile(level, search_dirs=[PROJECT_ROOT, ASSETS_DIR]).load()
    except (FileNotFoundError, MalformedInput) as exc:
        frontend.show_error(str(exc))
        raise typer.Exit(code=2) from exc
    normalize(board)
    return board


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    level: Path = typer.Argument(
        DEFAULT_LEVEL,
        help="Level file. Relative paths also resolve against assets/.",
    ),
    mode: Mode = typer.Option(
        Mode.bfs, "-m", "--mode",
        help="Search strategy, or a random walk.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output frontend.",
    ),
    steps: int = typer.Option(
        20, "-n", "--steps",
        min=0,
        help="Random walk length.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random walk seed.",
    ),
    max_nodes: Optional[int] = typer.Option(
        None, "--max-nodes",
        min=1,
        help="Abort the search after visiting this many nodes.",
    ),
    strict: bool = typer.Option(
        False, "--strict",
        help="Abort the search at the first board with no legal moves.",
    ),
    show_path: bool = typer.Option(
        False, "--show-path",
        help="Print every board along the solution.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug details.",
    ),
) -> None:
    """Sliding Block Puzzle solver."""
    _configure_logging(verbose)
    out = importlib.import_module(_RUNNERS[frontend])
    board = _load(level, out)

    if mode is Mode.walk:
        out.show_walk(RandomWalker.walk(board, steps, random.Random(seed)))
        return

    ctx = SearchContext(strict_dead_ends=strict, max_nodes=max_nodes)
    try:
        result = Solver.search(board, Strategy(mode.value), ctx)
    except PuzzleError as exc:
        out.show_error(str(exc))
        raise typer.Exit(code=1) from exc

    path = GamePlay.from_board(board).replay(result.moves) if result.solved else []
    out.show_search(board, result, path, show_path=show_path)
    if not result.solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
