"""Level file resolution and loading."""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.board import Board

logger = logging.getLogger(__name__)


class LevelFile:
    """Locates a level on disk and reads it into a ``Board``.

    Relative paths are tried against the current directory first and then
    against each of *search_dirs* in order.
    """

    def __init__(self, path: Path | str, search_dirs: list[Path] | None = None) -> None:
        self.requested = Path(path)
        self.search_dirs = list(search_dirs or [])
        self.filepath = self._resolve()

    # -- resolution -----------------------------------------------------------

    def _candidates(self) -> list[Path]:
        if self.requested.is_absolute():
            return [self.requested]
        candidates = [Path.cwd() / self.requested]
        candidates.extend(d / self.requested for d in self.search_dirs)
        return candidates

    def _resolve(self) -> Path:
        for candidate in self._candidates():
            if candidate.is_file():
                resolved = candidate.resolve()
                logger.debug("Resolved level path to %s", resolved)
                return resolved
        raise FileNotFoundError(f"Level file not found: {self.requested}")

    # -- loading --------------------------------------------------------------

    def load(self) -> Board:
        board = Board.from_text(self.filepath.read_text())
        logger.debug(
            "Loaded %d×%d board from %s", board.width, board.height, self.filepath
        )
        return board
