"""Color_Wars package exports."""

from .Board import Board, BoardSnapshot, Cell, ColorWarsError, IllegalMove, OutOfBounds
from .Colorwarsgame import Colorwarsgame
from .Player import Player, HumanPlayer, RandomPlayer, GreedyPlayer
from .engine.turn_controller import MoveOutcome, Phase, TurnController

# Subpackages for the rule engine, baseline AI, text view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "BoardSnapshot",
    "Cell",
    "ColorWarsError",
    "IllegalMove",
    "OutOfBounds",
    "Colorwarsgame",
    "Player",
    "HumanPlayer",
    "RandomPlayer",
    "GreedyPlayer",
    "MoveOutcome",
    "Phase",
    "TurnController",
    "ai",
    "engine",
    "gui",
    "utils",
]
