"""CLI options for board size, player line-up and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Color Wars (chain-reaction territory game)")
    parser.add_argument("--width", type=int, help="Board width (columns)")
    parser.add_argument("--height", type=int, help="Board height (rows)")
    parser.add_argument(
        "--players",
        help="Comma-separated player specs 'kind:name' with kind in human|random|greedy "
        "(e.g. 'human:red,greedy:blue')",
    )
    parser.add_argument("--max-turns", type=int, help="Declare a draw after this many accepted moves")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random players (optional)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--quiet", action="store_true", help="Do not draw the board after each move")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging for the engine")
    return parser.parse_args(argv)
