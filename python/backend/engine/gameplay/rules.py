"""Move legality and application for rigid pieces."""

from __future__ import annotations

import logging

from backend.models.board import CLEAR, GOAL, MASTER, Board, Direction, Move

logger = logging.getLogger(__name__)

# Enumeration order of directions within one piece.
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class MoveRules:
    """Stateless move generator — all methods are static."""

    @staticmethod
    def can_move(board: Board, piece: int, direction: Direction) -> bool:
        """Return True if every cell of *piece* may step in *direction*.

        A destination cell must be on the board and be CLEAR, part of the
        piece itself, or a GOAL when the piece is the master. A piece that
        is not on the board cannot move.
        """
        dr, dc = direction.delta
        found = False
        for r, row in enumerate(board.tiles):
            for c, v in enumerate(row):
                if v != piece:
                    continue
                found = True
                nr, nc = r + dr, c + dc
                if not board.in_bounds(nr, nc):
                    return False
                target = board.tiles[nr][nc]
                if target == piece or target == CLEAR:
                    continue
                if target == GOAL and piece == MASTER:
                    continue
                return False
        return found

    @staticmethod
    def moves_for_piece(board: Board, piece: int) -> set[Direction]:
        return {d for d in DIRECTIONS if MoveRules.can_move(board, piece, d)}

    @staticmethod
    def all_moves(board: Board) -> list[Move]:
        """Every legal move, by ascending piece id then UP, DOWN, LEFT, RIGHT."""
        moves: list[Move] = []
        for piece in board.pieces():
            for d in DIRECTIONS:
                if MoveRules.can_move(board, piece, d):
                    moves.append(Move(piece, d))
        return moves

    @staticmethod
    def apply_move(board: Board, move: Move) -> bool:
        """Translate the piece in place. Returns False (no-op) if illegal.

        Cells are swept starting from the leading edge of the move (bottom
        rows first for DOWN, rightmost columns first for RIGHT, and so on),
        so a cell is always written into space the sweep has already left.
        """
        if not MoveRules.can_move(board, move.piece, move.direction):
            logger.warning("Ignoring illegal move %s", move)
            return False

        dr, dc = move.direction.delta
        tiles = board.tiles
        for r, c in _sweep(board, move.direction):
            if tiles[r][c] != move.piece:
                continue
            tiles[r + dr][c + dc] = move.piece
            tiles[r][c] = CLEAR
        return True

    @staticmethod
    def apply_move_cloning(board: Board, move: Move) -> Board:
        """Return a copy of *board* with *move* applied; *board* is untouched."""
        clone = board.copy()
        MoveRules.apply_move(clone, move)
        return clone


# -- helpers ------------------------------------------------------------------


def _sweep(board: Board, direction: Direction) -> list[tuple[int, int]]:
    rows = range(board.height)
    cols = range(board.width)
    if direction is Direction.DOWN:
        rows = range(board.height - 1, -1, -1)
    elif direction is Direction.RIGHT:
        cols = range(board.width - 1, -1, -1)

    if direction in (Direction.UP, Direction.DOWN):
        return [(r, c) for r in rows for c in cols]
    return [(r, c) for c in cols for r in rows]
