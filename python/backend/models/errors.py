"""Error kinds raised by the puzzle core."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error the solver raises."""


class MalformedInput(PuzzleError, ValueError):
    """A level could not be parsed into a board."""


class DimensionMismatch(PuzzleError, ValueError):
    """Two boards (or a board and its tiles) disagree on shape."""


class NoLegalMoves(PuzzleError):
    """A strict search reached a board on which nothing can move."""

    def __init__(self, board_text: str) -> None:
        super().__init__(f"No legal moves from:\n{board_text}")
        self.board_text = board_text


class NoSolution(PuzzleError):
    """The search space was exhausted without reaching a solved board."""


class SearchLimitReached(PuzzleError):
    """The search visited more nodes than its context allows."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Search aborted after visiting {limit} nodes.")
        self.limit = limit
