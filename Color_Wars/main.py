"""Entry point for Color Wars matches. Load config, wire players, start the game loop."""

import random
from pathlib import Path

import yaml

from Color_Wars.Colorwarsgame import Colorwarsgame
from Color_Wars.Player import GreedyPlayer, HumanPlayer, RandomPlayer
from Color_Wars.gui.text_view import TextView
from Color_Wars.utils.cli import parse_args
from Color_Wars.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_PLAYERS = ["human:red", "greedy:blue"]
PLAYER_KINDS = ("human", "random", "greedy")


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Color_Wars/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_player_specs(specs) -> list[tuple[str, str]]:
    """Turn ['greedy:blue', 'random'] into [('greedy', 'blue'), ('random', 'random2')]."""
    if isinstance(specs, str):
        specs = [s for s in specs.split(",") if s.strip()]
    parsed = []
    for i, spec in enumerate(specs, start=1):
        kind, _, name = str(spec).strip().partition(":")
        kind = kind.strip().lower()
        if kind not in PLAYER_KINDS:
            raise ValueError(f"Unsupported player kind: {kind!r} (choose from {', '.join(PLAYER_KINDS)})")
        parsed.append((kind, name.strip() or f"{kind}{i}"))
    names = [name for _, name in parsed]
    if len(set(names)) != len(names):
        raise ValueError("Player names must be unique")
    return parsed


def build_players(specs, rng=None):
    rng = rng or random.Random()
    players = []
    for kind, name in specs:
        if kind == "human":
            players.append(HumanPlayer(name))
        elif kind == "random":
            players.append(RandomPlayer(name, rng=random.Random(rng.random())))
        else:
            players.append(GreedyPlayer(name))
    return players


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)

    width = args.width or settings.get("board_width", 5)
    height = args.height or settings.get("board_height", 5)
    max_turns = args.max_turns or settings.get("max_turns", 500)
    max_rejections = settings.get("max_rejections", 3)
    player_specs = parse_player_specs(args.players or settings.get("players", DEFAULT_PLAYERS))

    if width < 3 or height < 3:
        log_event(f"Warning: {width}x{height} board is smaller than the recommended 3x3")
    if len(player_specs) < 2:
        log_event("Warning: single-player game; there is no contest and no winner")

    rng = random.Random(args.seed)
    players = build_players(player_specs, rng=rng)
    view = None if args.quiet else TextView([p.identity for p in players])

    game = Colorwarsgame(
        width,
        height,
        players,
        logger=log_event,
        renderer=view.render if view else None,
        max_turns=max_turns,
        max_rejections=max_rejections,
    )
    winner = game.play()
    print(f"{winner} wins" if winner is not None else "Draw")
    return winner


if __name__ == "__main__":
    main()
