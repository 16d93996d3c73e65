"""Uninformed search over sliding block puzzle states."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gameplay.rules import MoveRules
from backend.engine.gamestate.normalize import CanonicalKey, canonical_key
from backend.engine.gamestate.state import SearchContext
from backend.models.board import Board, Move
from backend.models.errors import NoLegalMoves, NoSolution

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    DFS = "dfs"
    BFS = "bfs"


@dataclass
class SolveResult:
    """Outcome of one driver call. ``moves`` is ``None`` when unsolved."""

    moves: list[Move] | None
    nodes_visited: int
    elapsed_time: float

    @property
    def solved(self) -> bool:
        return self.moves is not None

    def unwrap(self) -> list[Move]:
        if self.moves is None:
            raise NoSolution(
                f"No solution found after visiting {self.nodes_visited} nodes."
            )
        return self.moves


@dataclass
class SearchNode:
    """A frontier entry: a board and the moves that reached it from the root."""

    board: Board
    path: list[Move] = field(default_factory=list)


class Solver:
    """Stateless solver — all methods are static.

    Returned paths name pieces by the ids they carry on the board passed
    in; children are only renumbered to build duplicate-detection keys.
    """

    @staticmethod
    def solve(board: Board, strategy: Strategy = Strategy.BFS) -> list[Move]:
        """Return a move sequence that solves *board*.

        Raises ``NoSolution`` if the reachable state space holds no solved
        board.
        """
        return Solver.search(board, strategy).unwrap()

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the first move of a shortest solution, or ``None``."""
        if board.is_solved():
            return None
        result = Solver.bfs(board, SearchContext())
        return result.moves[0] if result.moves else None

    @staticmethod
    def search(
        board: Board,
        strategy: Strategy = Strategy.BFS,
        ctx: SearchContext | None = None,
    ) -> SolveResult:
        ctx = ctx or SearchContext()
        if strategy is Strategy.DFS:
            return Solver.dfs(board, ctx)
        return Solver.bfs(board, ctx)

    # -- depth-first ----------------------------------------------------------

    @staticmethod
    def dfs(board: Board, ctx: SearchContext) -> SolveResult:
        """Depth-first search with backtracking over an explicit stack.

        Gives the first solution in move-enumeration order, not
        necessarily the shortest.
        """
        logger.info("DFS started on %d×%d board", board.width, board.height)
        ctx.start()
        try:
            if board.is_solved():
                moves: list[Move] | None = []
            else:
                closed: set[CanonicalKey] = {canonical_key(board)}
                moves = _dfs(board, closed, ctx)
        finally:
            ctx.stop()
        logger.info(
            "DFS finished: %s, %d nodes visited",
            "solved" if moves is not None else "no solution",
            ctx.nodes_visited,
        )
        return SolveResult(moves, ctx.nodes_visited, ctx.elapsed_time)

    # -- breadth-first --------------------------------------------------------

    @staticmethod
    def bfs(board: Board, ctx: SearchContext) -> SolveResult:
        """Breadth-first search; the first solution found is a shortest one."""
        logger.info("BFS started on %d×%d board", board.width, board.height)
        ctx.start()
        try:
            moves = _bfs(board, ctx)
        finally:
            ctx.stop()
        logger.info(
            "BFS finished: %s, %d nodes visited",
            "solved" if moves is not None else "no solution",
            ctx.nodes_visited,
        )
        return SolveResult(moves, ctx.nodes_visited, ctx.elapsed_time)


# -- helpers ------------------------------------------------------------------


def _dead_end(board: Board, ctx: SearchContext) -> None:
    if ctx.strict_dead_ends:
        raise NoLegalMoves(board.to_text())
    logger.debug("Dead end:\n%s", board.to_text())


@dataclass
class _Frame:
    """One level of the depth-first stack."""

    board: Board
    moves: Iterator[Move]
    move: Move | None = None
    added: list[CanonicalKey] = field(default_factory=list)


def _dfs(
    board: Board, closed: set[CanonicalKey], ctx: SearchContext
) -> list[Move] | None:
    moves = MoveRules.all_moves(board)
    if not moves:
        _dead_end(board, ctx)
        return None

    stack = [_Frame(board, iter(moves))]
    while stack:
        frame = stack[-1]
        for move in frame.moves:
            child = MoveRules.apply_move_cloning(frame.board, move)
            key = canonical_key(child)
            if key in closed:
                continue
            closed.add(key)
            frame.added.append(key)
            ctx.visit()

            if child.is_solved():
                return [f.move for f in stack[1:]] + [move]
            child_moves = MoveRules.all_moves(child)
            if not child_moves:
                _dead_end(child, ctx)
                continue
            stack.append(_Frame(child, iter(child_moves), move))
            break
        else:
            # Exhausted: forget the boards this level discovered.
            stack.pop()
            closed.difference_update(frame.added)
    return None


def _bfs(board: Board, ctx: SearchContext) -> list[Move] | None:
    if board.is_solved():
        return []

    closed: set[CanonicalKey] = {canonical_key(board)}
    ctx.visit()
    frontier: deque[SearchNode] = deque([SearchNode(board.copy())])

    while frontier:
        node = frontier.popleft()
        moves = MoveRules.all_moves(node.board)
        if not moves:
            _dead_end(node.board, ctx)
            continue

        for move in moves:
            child = MoveRules.apply_move_cloning(node.board, move)
            if child.is_solved():
                return node.path + [move]

            key = canonical_key(child)
            if key in closed:
                continue
            closed.add(key)
            ctx.visit()
            frontier.append(SearchNode(child, node.path + [move]))

    return None
