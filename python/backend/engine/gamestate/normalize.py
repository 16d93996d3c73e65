"""Canonical piece numbering.

Two boards that hold the same physical configuration can carry different
piece ids: ids come from the level file and pieces keep their id while
they move. ``normalize`` renumbers ordinary pieces by the row-major
position of their first cell, so such boards become cell-for-cell equal.
GOAL, CLEAR, WALL and MASTER cells are never touched.
"""

from __future__ import annotations

from backend.models.board import FIRST_PIECE, MASTER, Board

CanonicalKey = tuple[tuple[int, ...], ...]


def tile_swap(board: Board, old: int, new: int) -> None:
    """Rewrite every cell holding *old* to *new*."""
    for row in board.tiles:
        for c, v in enumerate(row):
            if v == old:
                row[c] = new


def normalize(board: Board) -> None:
    """Renumber the ordinary pieces of *board* in place.

    1. Displace every piece id by ``height * width + 3`` so it exceeds
       every position index ``row * width + col + 3``.
    2. Scanning row-major, rename a piece to the position index of the
       first of its cells reached.
    3. Scanning row-major again, rename each piece whose anchor cell is
       reached to the next id counting up from 3.
    """
    width = board.width
    offset = board.height * width + FIRST_PIECE
    tiles = board.tiles

    for row in tiles:
        for c, v in enumerate(row):
            if v > MASTER:
                row[c] = v + offset

    for r, row in enumerate(tiles):
        for c, v in enumerate(row):
            pos = r * width + c + FIRST_PIECE
            if v > MASTER and v > pos:
                tile_swap(board, v, pos)

    next_id = FIRST_PIECE
    for r, row in enumerate(tiles):
        for c, v in enumerate(row):
            if v > MASTER and v == r * width + c + FIRST_PIECE:
                tile_swap(board, v, next_id)
                next_id += 1


def normalized(board: Board) -> Board:
    """Return a normalized copy of *board*."""
    clone = board.copy()
    normalize(clone)
    return clone


def canonical_key(board: Board) -> CanonicalKey:
    """Hashable canonical grid content, equal for relabelled boards."""
    return normalized(board).key()
