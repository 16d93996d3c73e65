from backend.models.board import (
    CLEAR,
    GOAL,
    MASTER,
    WALL,
    Board,
    Direction,
    Move,
)
from backend.models.errors import (
    DimensionMismatch,
    MalformedInput,
    NoLegalMoves,
    NoSolution,
    PuzzleError,
    SearchLimitReached,
)
from backend.models.level import LevelFile

__all__ = [
    "CLEAR",
    "GOAL",
    "MASTER",
    "WALL",
    "Board",
    "DimensionMismatch",
    "Direction",
    "LevelFile",
    "MalformedInput",
    "Move",
    "NoLegalMoves",
    "NoSolution",
    "PuzzleError",
    "SearchLimitReached",
]
