"""Abstract player interface for human or AI controllers."""

import random

from Color_Wars.ai import move_selector


class Player:
    def __init__(self, identity):
        self.identity = identity

    def next_move(self, controller):
        """Return (x, y) for the next move given the live TurnController."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, identity, reader=input):
        super().__init__(identity)
        self.reader = reader

    def next_move(self, controller):
        """Text-input player; raises ValueError on malformed input."""
        phase = "place" if controller.first_round else "grow"
        raw = self.reader(f"{self.identity} to {phase}, enter move as 'x y' (0-indexed): ").strip()
        try:
            x_str, y_str = raw.split()
            x, y = int(x_str), int(y_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
        if not controller.board.in_bounds(x, y):
            raise ValueError("move out of bounds")
        return x, y


class RandomPlayer(Player):
    """Uniformly random legal move."""

    def __init__(self, identity, rng=None):
        super().__init__(identity)
        self.rng = rng or random.Random()

    def next_move(self, controller):
        legal = controller.legal_moves(self.identity)
        if not legal:
            raise ValueError("No legal moves for random player")
        return self.rng.choice(legal)


class GreedyPlayer(Player):
    """Greedy baseline: pick the legal move with the best one-ply score margin."""

    def next_move(self, controller):
        ranked = move_selector.rank_moves(controller, self.identity, limit=1)
        if not ranked:
            raise ValueError("No legal moves for greedy player")
        return ranked[0][0]
