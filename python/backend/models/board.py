"""Board model for the sliding block puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import DimensionMismatch, MalformedInput

# Reserved cell values; piece ids start above MASTER.
GOAL = -1
CLEAR = 0
WALL = 1
MASTER = 2
FIRST_PIECE = 3


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Move:
    """Translate every cell of *piece* one step in *direction*."""

    piece: int
    direction: Direction

    def inverse(self) -> Move:
        return Move(self.piece, self.direction.opposite)

    def __str__(self) -> str:
        return f"({self.piece},{self.direction.value})"


@dataclass
class Board:
    """Represents the sliding block puzzle grid.

    Cells are stored as a 2D list of ints, ``tiles[row][col]``. See the
    module constants for the reserved values; every value from
    ``FIRST_PIECE`` up names an ordinary rigid piece.
    """

    width: int
    height: int
    tiles: list[list[int]]

    def __post_init__(self) -> None:
        if len(self.tiles) != self.height or any(
            len(row) != self.width for row in self.tiles
        ):
            raise DimensionMismatch(
                f"Tiles do not form a {self.width}×{self.height} grid."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse the level format: ``width,height,`` then one line per row.

        Example::

            Board.from_text("3,1,\\n2,0,-1,\\n")

        Trailing commas and trailing blank lines are tolerated.
        """
        lines = [line.strip() for line in text.strip().splitlines()]
        if not lines:
            raise MalformedInput("Level is empty.")

        header = _split_ints(lines[0], lineno=1)
        if len(header) != 2:
            raise MalformedInput(
                f"Expected 'width,height,' on line 1, got {lines[0]!r}."
            )
        width, height = header
        if width <= 0 or height <= 0:
            raise MalformedInput(f"Invalid dimensions {width}×{height}.")

        rows = lines[1:]
        if len(rows) != height:
            raise MalformedInput(
                f"Expected {height} rows for a {width}×{height} board, "
                f"got {len(rows)}."
            )

        tiles: list[list[int]] = []
        for lineno, line in enumerate(rows, start=2):
            row = _split_ints(line, lineno=lineno)
            if len(row) != width:
                raise MalformedInput(
                    f"Line {lineno}: expected {width} cells, got {len(row)}."
                )
            if any(v < GOAL for v in row):
                raise MalformedInput(f"Line {lineno}: cell value below {GOAL}.")
            tiles.append(row)
        return cls(width=width, height=height, tiles=tiles)

    def to_text(self) -> str:
        """Render the board in the same format ``from_text`` reads."""
        lines = [f"{self.width},{self.height},"]
        for row in self.tiles:
            lines.append("".join(f"{v}," for v in row))
        return "\n".join(lines) + "\n"

    # -- queries --------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_solved(self) -> bool:
        """A board is solved once the master has consumed every goal cell."""
        return all(GOAL not in row for row in self.tiles)

    def goal_count(self) -> int:
        return sum(row.count(GOAL) for row in self.tiles)

    def cells_of(self, piece: int) -> list[tuple[int, int]]:
        """Row-major list of the cells holding *piece*."""
        return [
            (r, c)
            for r, row in enumerate(self.tiles)
            for c, v in enumerate(row)
            if v == piece
        ]

    def pieces(self) -> list[int]:
        """Ascending ids of the pieces on the board, master included."""
        return sorted({v for row in self.tiles for v in row if v >= MASTER})

    def state_equal(self, other: Board) -> bool:
        """Cell-by-cell equality; boards of different shape cannot be compared."""
        if (self.width, self.height) != (other.width, other.height):
            raise DimensionMismatch(
                f"Cannot compare a {self.width}×{self.height} board with a "
                f"{other.width}×{other.height} board."
            )
        return self.tiles == other.tiles

    def key(self) -> tuple[tuple[int, ...], ...]:
        """Hashable snapshot of the grid content."""
        return tuple(tuple(row) for row in self.tiles)

    def copy(self) -> Board:
        return Board(
            width=self.width,
            height=self.height,
            tiles=[row[:] for row in self.tiles],
        )


def _split_ints(line: str, lineno: int) -> list[int]:
    fields = line.split(",")
    while fields and not fields[-1].strip():
        fields.pop()
    try:
        return [int(f) for f in fields]
    except ValueError:
        raise MalformedInput(f"Line {lineno}: non-integer cell in {line!r}.") from None
