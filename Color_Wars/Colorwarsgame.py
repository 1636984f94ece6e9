"""Game loop driving player controllers through the turn controller."""

from Color_Wars.engine.turn_controller import TurnController


class Colorwarsgame:
    def __init__(self, width, height, players, logger=print, renderer=None, max_turns=500, max_rejections=3):
        self.players = {p.identity: p for p in players}
        if len(self.players) != len(players):
            raise ValueError("player identities must be unique")
        self.controller = TurnController(width, height, [p.identity for p in players])
        self.logger = logger
        self.renderer = renderer
        self.max_turns = max_turns
        self.max_rejections = max_rejections
        self.turns = 0
        self.history = []

    def _render(self, outcome=None):
        if self.renderer:
            c = self.controller
            self.renderer(c.snapshot(), c.player_states(), c.current_player(), outcome)

    def play(self):
        """Run a single game. Returns the winner's identity, or None on a draw (turn cap)."""
        controller = self.controller
        rejections = 0
        alive = set(controller.active_identities())
        self._render()

        while not controller.is_game_over and self.turns < self.max_turns:
            identity = controller.current_player()
            player = self.players[identity]

            try:
                move = player.next_move(controller)
                outcome = controller.attempt_move(identity, *move)
            except ValueError as exc:
                # Bad input or no move available; counts as a rejection
                outcome = None
                reason = str(exc)
            else:
                reason = outcome.reason

            if outcome is None or not outcome.accepted:
                if outcome is not None and outcome.skipped:
                    continue
                rejections += 1
                self.logger(f"Rejected: {identity} {reason}")
                if rejections >= self.max_rejections:
                    self.logger(f"Forfeit: {identity} after {rejections} rejected moves")
                    controller.resign(identity)
                    alive.discard(identity)
                    rejections = 0
                    self._render()
                continue

            rejections = 0
            self.turns += 1
            self.history.append((identity, move, len(outcome.events)))
            self.logger(f"Move {self.turns}: {identity} {move}")
            if outcome.events:
                self.logger(f"Cascade: {len(outcome.events)} explosions over {outcome.waves} waves")
            active = set(controller.active_identities())
            for eliminated in [p for p in alive if p not in active]:
                self.logger(f"Eliminated: {eliminated}")
            alive = active
            self._render(outcome)

        winner = controller.winner()
        if winner is not None:
            self.logger(f"Winner: {winner}")
        elif controller.is_game_over:
            self.logger("Result: no players left")
        else:
            self.logger("Result: Draw (turn limit)")
        return winner
