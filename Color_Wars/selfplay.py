"""Self-play runner for baseline players with a JSON summary of match statistics."""

from __future__ import annotations

import argparse
import json
import random
import statistics
from collections import Counter
from pathlib import Path

from Color_Wars.Colorwarsgame import Colorwarsgame
from Color_Wars.Player import GreedyPlayer, RandomPlayer
from Color_Wars.utils.logger import configure_logging, quiet_event


def make_baseline_player(identity, kind: str, rng: random.Random):
    if kind == "random":
        return RandomPlayer(identity, rng=random.Random(rng.random()))
    if kind == "greedy":
        return GreedyPlayer(identity)
    raise ValueError(f"Unsupported baseline: {kind}")


def play_game(width: int, height: int, players, max_turns: int = 500) -> tuple[object, dict]:
    """Play one quiet match. Returns (winner or None, per-game info)."""
    waves: list[int] = []

    def track(snapshot, player_states, current_player, outcome):
        if outcome is not None:
            waves.append(outcome.waves)

    game = Colorwarsgame(width, height, players, logger=quiet_event, renderer=track, max_turns=max_turns)
    winner = game.play()
    explosions = [n for _, _, n in game.history]
    info = {
        "turns": game.turns,
        "explosions": sum(explosions),
        "max_explosions": max(explosions, default=0),
        "max_waves": max(waves, default=0),
        "final_scores": game.controller.scores(),
    }
    return winner, info


def summarize(results, tags) -> dict:
    wins = Counter(w for w, _ in results if w is not None)
    turns = [info["turns"] for _, info in results]
    total_moves = sum(turns)
    return {
        "games": len(results),
        "wins": {tag: wins.get(tag, 0) for tag in tags},
        "draws": sum(1 for w, _ in results if w is None),
        "avg_turns": statistics.mean(turns) if turns else 0,
        "avg_explosions_per_move": (sum(info["explosions"] for _, info in results) / total_moves) if total_moves else 0.0,
        "max_explosions_per_move": max((info["max_explosions"] for _, info in results), default=0),
        "longest_cascade_waves": max((info["max_waves"] for _, info in results), default=0),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Color Wars self-play statistics")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--width", type=int, default=5, help="Board width")
    parser.add_argument("--height", type=int, default=5, help="Board height")
    parser.add_argument(
        "--players",
        default="random,greedy",
        help="Comma-separated baseline kinds in turn order (random|greedy)",
    )
    parser.add_argument("--max-turns", type=int, default=500, help="Draw after this many accepted moves")
    parser.add_argument("--rotate", action="store_true", help="Rotate the seating order every game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for self-play randomness (optional)")
    parser.add_argument("--output", default="selfplay_stats.json", help="Output JSON summary path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging for the engine")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    rng = random.Random(args.seed)
    kinds = [k.strip() for k in args.players.split(",") if k.strip()]
    tags = [f"{kind}{i}" for i, kind in enumerate(kinds, start=1)]
    seats = list(zip(tags, kinds))

    results = []
    for g in range(args.games):
        order = seats[g % len(seats):] + seats[:g % len(seats)] if args.rotate else seats
        players = [make_baseline_player(tag, kind, rng) for tag, kind in order]
        winner, info = play_game(args.width, args.height, players, max_turns=args.max_turns)
        results.append((winner, info))
        print(
            f"[{g+1}/{args.games}] winner={winner} turns={info['turns']} "
            f"explosions={info['explosions']} max_waves={info['max_waves']}"
        )

    summary = summarize(results, tags)
    print(f"Wins: {summary['wins']}, draws={summary['draws']}, avg_turns={summary['avg_turns']:.1f}")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
    print(f"Saved stats to {output_path}")
    return summary


if __name__ == "__main__":
    main()
