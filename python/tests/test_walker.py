"""Random walk tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import MoveRules
from backend.engine.gamestate import normalized
from backend.engine.gamewalker import RandomWalker
from backend.models.board import Board

LEVEL = "6,5,\n1,1,1,1,1,1,\n1,2,2,0,3,-1,\n1,0,0,0,3,-1,\n1,0,0,0,0,0,\n1,1,1,1,1,1,\n"


@pytest.mark.parametrize("seed", range(10))
def test_each_board_follows_from_a_legal_move(seed: int) -> None:
    walk = list(RandomWalker.walk(Board.from_text(LEVEL), 25, random.Random(seed)))

    first, first_move = walk[0]
    assert first_move is None
    assert first == Board.from_text(LEVEL)

    for (prev, _), (board, move) in zip(walk, walk[1:]):
        assert move in MoveRules.all_moves(prev)
        assert board == normalized(MoveRules.apply_move_cloning(prev, move))


def test_walk_respects_step_budget() -> None:
    walk = list(RandomWalker.walk(Board.from_text(LEVEL), 3, random.Random(0)))
    assert len(walk) == 4


def test_walk_is_reproducible_with_a_seed() -> None:
    a = list(RandomWalker.walk(Board.from_text(LEVEL), 15, random.Random(7)))
    b = list(RandomWalker.walk(Board.from_text(LEVEL), 15, random.Random(7)))
    assert a == b


def test_walk_stops_when_solved() -> None:
    walk = list(RandomWalker.walk(Board.from_text("2,1,\n2,-1,\n"), 50))
    assert len(walk) == 2
    assert walk[-1][0].is_solved()


def test_walk_stops_when_stuck() -> None:
    board = Board.from_text("3,1,\n1,2,1,\n")
    assert list(RandomWalker.walk(board, 5)) == [(board, None)]


def test_walk_of_solved_board_emits_it_once() -> None:
    board = Board.from_text("1,1,\n2,\n")
    assert list(RandomWalker.walk(board, 5)) == [(board, None)]
