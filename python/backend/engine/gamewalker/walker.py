"""Random walks over legal moves, for smoke-testing move generation."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from backend.engine.gameplay.rules import MoveRules
from backend.engine.gamestate.normalize import normalize
from backend.models.board import Board, Move

logger = logging.getLogger(__name__)


class RandomWalker:
    """Applies uniformly chosen legal moves; no search, no backtracking."""

    @staticmethod
    def walk(
        board: Board,
        steps: int,
        rng: random.Random | None = None,
    ) -> Iterator[tuple[Board, Move | None]]:
        """Yield ``(board, move)`` pairs, starting with the initial board.

        ``move`` is the move that produced the yielded board (``None`` for
        the first). The walk stops once the board is solved, after *steps*
        moves, or when no move is legal. *board* is mutated in place and
        renormalized after every move; each yielded board is a snapshot.
        """
        rng = rng or random.Random()
        move: Move | None = None

        for step in range(steps + 1):
            yield board.copy(), move
            if board.is_solved() or step == steps:
                return

            moves = MoveRules.all_moves(board)
            if not moves:
                logger.info("Random walk stuck after %d moves", step)
                return

            move = rng.choice(moves)
            MoveRules.apply_move(board, move)
            normalize(board)
