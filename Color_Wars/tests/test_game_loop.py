"""Tests for Colorwarsgame turn handling, rejections and end-of-game state."""

from Color_Wars.Colorwarsgame import Colorwarsgame
from Color_Wars.Player import Player


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, identity, moves):
        super().__init__(identity)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, controller):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def test_elimination_win_and_final_render():
    a = SeqPlayer("A", [(0, 0), (0, 0)])
    b = SeqPlayer("B", [(1, 0)])
    messages = []
    renders = []

    def renderer(snapshot, player_states, current_player, outcome):
        renders.append((current_player, outcome))

    game = Colorwarsgame(3, 1, [a, b], logger=messages.append, renderer=renderer)
    assert game.play() == "A"

    assert game.turns == 3
    assert game.history == [("A", (0, 0), 0), ("B", (1, 0), 0), ("A", (0, 0), 2)]
    assert "Eliminated: B" in messages
    assert "Winner: A" in messages
    final_current, final_outcome = renders[-1]
    assert final_current is None
    assert len(final_outcome.events) == 2


def test_repeated_rejections_forfeit_the_player():
    a = SeqPlayer("A", [(0, 0)])
    b = SeqPlayer("B", [(0, 0), (0, 0), (0, 0)])
    messages = []

    game = Colorwarsgame(3, 3, [a, b], logger=messages.append, max_rejections=3)
    assert game.play() == "A"
    assert sum(1 for m in messages if m.startswith("Rejected: B")) == 3
    assert any(m.startswith("Forfeit: B") for m in messages)


def test_player_errors_count_as_rejections():
    a = SeqPlayer("A", [(0, 0)])
    b = SeqPlayer("B", [])
    messages = []

    game = Colorwarsgame(3, 3, [a, b], logger=messages.append, max_rejections=2)
    assert game.play() == "A"
    assert "Rejected: B No more scripted moves" in messages


def test_turn_cap_is_a_draw():
    a = SeqPlayer("A", [(0, 0)])
    b = SeqPlayer("B", [(2, 2)])
    messages = []

    game = Colorwarsgame(3, 3, [a, b], logger=messages.append, max_turns=1)
    assert game.play() is None
    assert game.turns == 1
    assert "Result: Draw (turn limit)" in messages
