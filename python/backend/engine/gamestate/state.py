"""Tracks the mutable bookkeeping of one search run."""

from __future__ import annotations

import time

from backend.models.errors import SearchLimitReached


class SearchContext:
    """Holds the run options, the node-visited counter, and elapsed time.

    One context is created per driver call and passed in explicitly.
    """

    def __init__(
        self,
        strict_dead_ends: bool = False,
        max_nodes: int | None = None,
    ) -> None:
        self.strict_dead_ends = strict_dead_ends
        self.max_nodes = max_nodes
        self.nodes_visited: int = 0
        self._start_time: float = 0.0
        self._elapsed_banked: float = 0.0
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.perf_counter() - self._start_time)
        return self._elapsed_banked

    def start(self) -> None:
        if not self._running:
            self._start_time = time.perf_counter()
            self._running = True

    def stop(self) -> None:
        if self._running:
            self._elapsed_banked += time.perf_counter() - self._start_time
            self._running = False

    # -- nodes ----------------------------------------------------------------

    def visit(self) -> None:
        """Count one newly discovered board."""
        if self.max_nodes is not None and self.nodes_visited >= self.max_nodes:
            raise SearchLimitReached(self.max_nodes)
        self.nodes_visited += 1
