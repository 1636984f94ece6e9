"""CLI wiring: settings loading, player specs and a quiet full match."""

import pytest

from Color_Wars import main as main_mod
from Color_Wars.Player import GreedyPlayer, HumanPlayer, RandomPlayer


def test_load_settings_resolves_package_config():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_width"] == 5
    assert settings["players"]


def test_load_settings_missing_file_is_empty(tmp_path):
    assert main_mod.load_settings(tmp_path / "nope.yaml") == {}


def test_parse_player_specs():
    assert main_mod.parse_player_specs("human:red, greedy:blue,random") == [
        ("human", "red"),
        ("greedy", "blue"),
        ("random", "random3"),
    ]
    with pytest.raises(ValueError):
        main_mod.parse_player_specs("wizard:x")
    with pytest.raises(ValueError):
        main_mod.parse_player_specs(["random:a", "greedy:a"])


def test_build_players_kinds():
    players = main_mod.build_players([("human", "h"), ("random", "r"), ("greedy", "g")])
    assert [type(p) for p in players] == [HumanPlayer, RandomPlayer, GreedyPlayer]
    assert [p.identity for p in players] == ["h", "r", "g"]


def test_main_runs_a_quiet_ai_match(capsys):
    winner = main_mod.main(
        ["--players", "random:a,greedy:b", "--width", "4", "--height", "4", "--seed", "5",
         "--max-turns", "300", "--quiet"]
    )
    out = capsys.readouterr().out
    assert winner in ("a", "b", None)
    assert "Move 1: a" in out
