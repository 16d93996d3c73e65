"""Replay session — applies moves to one board and checks the win condition."""

from __future__ import annotations

from backend.engine.gameplay.rules import MoveRules
from backend.models.board import Board, Move


class GamePlay:
    """Owns a board and counts the moves applied to it."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Start a session on a private copy of *board*."""
        return cls(board.copy())

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Apply *move* if it is legal. Returns True if the board changed."""
        if not MoveRules.apply_move(self.board, move):
            return False
        self.moves += 1
        return True

    def replay(self, moves: list[Move]) -> list[Board]:
        """Apply *moves* in order and return a snapshot after each one.

        Raises ``ValueError`` at the first move that is not legal.
        """
        snapshots: list[Board] = []
        for i, m in enumerate(moves):
            if not self.move(m):
                raise ValueError(f"Move {i} {m} is not legal on the current board.")
            snapshots.append(self.board.copy())
        return snapshots

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
