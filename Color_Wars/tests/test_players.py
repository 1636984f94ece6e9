"""Player controllers: text input parsing, random and greedy baselines."""

import random

import pytest

from Color_Wars.Board import Cell
from Color_Wars.Player import GreedyPlayer, HumanPlayer, RandomPlayer
from Color_Wars.ai import move_selector
from Color_Wars.engine.turn_controller import TurnController


def test_human_player_parses_coordinates():
    c = TurnController(3, 3, ["me", "you"])
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        return " 2 1 "

    assert HumanPlayer("me", reader=reader).next_move(c) == (2, 1)
    assert "place" in prompts[0]


@pytest.mark.parametrize("raw", ["", "1", "a b", "1 2 3", "5 0"])
def test_human_player_rejects_bad_input(raw):
    c = TurnController(3, 3, ["me", "you"])
    with pytest.raises(ValueError):
        HumanPlayer("me", reader=lambda _: raw).next_move(c)


def test_random_player_picks_legal_moves():
    c = TurnController(3, 3, ["A", "B"])
    c.attempt_move("A", 1, 1)
    player = RandomPlayer("B", rng=random.Random(7))
    for _ in range(10):
        assert player.next_move(c) in c.legal_moves("B")


def test_random_player_without_moves_raises():
    c = TurnController(3, 3, ["A", "B"])
    with pytest.raises(ValueError):
        RandomPlayer("B").next_move(c)


def test_greedy_ties_follow_scan_order_and_leave_board_untouched():
    c = TurnController(3, 3, ["A", "B"])
    before = c.snapshot()
    assert GreedyPlayer("A").next_move(c) == (0, 0)
    assert c.snapshot() == before
    assert c.current_player() == "A"


def test_greedy_prefers_the_capturing_explosion():
    c = TurnController(4, 4, ["A", "B"])
    c.attempt_move("A", 0, 0)
    c.attempt_move("B", 1, 0)
    c.board.cells[3][3] = Cell((3, 3), "A", 1)
    c.board.cells[2][3] = Cell((3, 2), "B", 2)

    ranked = move_selector.rank_moves(c, "A")
    assert ranked[0][0] == (0, 0)
    assert GreedyPlayer("A").next_move(c) == (0, 0)
    assert move_selector.evaluate_move(c, "A", (3, 3)) < ranked[0][1]


def test_evaluate_move_penalizes_rejected_moves():
    c = TurnController(3, 3, ["A", "B"])
    assert move_selector.evaluate_move(c, "B", (0, 0)) == -10**9
