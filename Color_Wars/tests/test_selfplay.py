"""Tests for self-play helpers and the JSON summary."""

import json
import random

from Color_Wars import selfplay
from Color_Wars.Player import RandomPlayer


def test_play_game_reports_stats():
    players = [RandomPlayer("r1", rng=random.Random(1)), RandomPlayer("r2", rng=random.Random(2))]
    winner, info = selfplay.play_game(4, 4, players, max_turns=200)

    assert winner in ("r1", "r2", None)
    assert info["turns"] >= 2
    assert info["max_explosions"] <= info["explosions"]
    assert set(info["final_scores"]) == {"r1", "r2"}


def test_summarize_counts_wins_and_draws():
    results = [
        ("a", {"turns": 10, "explosions": 4, "max_explosions": 3, "max_waves": 2}),
        (None, {"turns": 30, "explosions": 6, "max_explosions": 5, "max_waves": 4}),
    ]
    summary = selfplay.summarize(results, ["a", "b"])
    assert summary["games"] == 2
    assert summary["wins"] == {"a": 1, "b": 0}
    assert summary["draws"] == 1
    assert summary["avg_turns"] == 20
    assert summary["avg_explosions_per_move"] == 0.25
    assert summary["max_explosions_per_move"] == 5
    assert summary["longest_cascade_waves"] == 4


def test_main_writes_summary(tmp_path, capsys):
    out = tmp_path / "stats.json"
    summary = selfplay.main(
        ["--games", "2", "--width", "4", "--height", "4", "--players", "random,greedy",
         "--seed", "3", "--rotate", "--output", str(out)]
    )
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved == summary
    assert saved["games"] == 2
    assert set(saved["wins"]) == {"random1", "greedy2"}
    assert "[2/2]" in capsys.readouterr().out
