"""Turn and elimination state machine: attempt move -> resolve cascade -> rotate."""

from __future__ import annotations

import copy
import enum
import logging
from dataclasses import dataclass, field
from typing import Hashable, Iterable

from Color_Wars.Board import Board, BoardSnapshot, IllegalMove
from Color_Wars.engine import explosions, referee


LOGGER = logging.getLogger(__name__)


class Phase(enum.Enum):
    AWAITING_MOVE = "awaiting_move"
    RESOLVING = "resolving"
    GAME_OVER = "game_over"


@dataclass
class PlayerRecord:
    identity: Hashable
    score: int = 0
    active: bool = True


@dataclass(frozen=True)
class MoveOutcome:
    accepted: bool
    events: tuple[explosions.ExplosionEvent, ...] = ()
    scores: dict = field(default_factory=dict)
    reason: str | None = None
    skipped: bool = False
    waves: int = 0


class TurnController:
    """
    Owns the board and the player registry for one game.

    Players act in roster order. During the first round every player places
    one piece on an empty cell; afterwards a move grows one of the mover's own
    cells. Each accepted move is resolved to a fixed point before the turn
    passes on, and players left with no cells are eliminated for good.
    """

    def __init__(self, width: int, height: int, players: Iterable[Hashable], max_waves: int | None = None):
        players = list(players)
        if not players:
            raise ValueError("at least one player is required")
        if any(p is None for p in players):
            raise ValueError("player identity must not be None")
        if len(set(players)) != len(players):
            raise ValueError("player identities must be unique")
        self.board = Board(width, height)
        self.players = [PlayerRecord(p) for p in players]
        self.current_index = 0
        self.first_round = True
        self.phase = Phase.AWAITING_MOVE
        self.last_outcome: MoveOutcome | None = None
        self.max_waves = max_waves

    # ------------------------------------------------------------------ queries
    @property
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def identities(self) -> list[Hashable]:
        return [r.identity for r in self.players]

    def active_identities(self) -> list[Hashable]:
        return [r.identity for r in self.players if r.active]

    def current_player(self):
        if self.is_game_over:
            return None
        return self.players[self.current_index].identity

    def scores(self) -> dict:
        return {r.identity: r.score for r in self.players}

    def player_states(self) -> list[dict]:
        return [{"id": r.identity, "active": r.active, "score": r.score} for r in self.players]

    def snapshot(self) -> BoardSnapshot:
        return self.board.snapshot()

    def winner(self):
        """Sole surviving player once the game is over, else None."""
        if not self.is_game_over:
            return None
        survivors = self.active_identities()
        return survivors[0] if len(survivors) == 1 else None

    def legal_moves(self, player) -> list[tuple[int, int]]:
        if self.is_game_over or player != self.current_player():
            return []
        if not self._record(player).active:
            return []
        if self.first_round:
            return [(x, y) for x, y in self.board.positions() if self.board.cells[y][x].is_empty]
        return self.board.cells_owned_by(player)

    def clone(self) -> "TurnController":
        return copy.deepcopy(self)

    # -------------------------------------------------------------- transitions
    def attempt_move(self, player, x: int, y: int) -> MoveOutcome:
        referee.check_bounds(self.board, x, y)
        if self.is_game_over:
            return self._reject(player, "game is over")

        current = self.players[self.current_index]
        if player == current.identity and not current.active:
            LOGGER.debug("skipping eliminated player %r", player)
            self._advance()
            return MoveOutcome(accepted=False, scores=self.scores(), reason="player eliminated", skipped=True)

        try:
            referee.check_turn(current.identity, player, current.active)
            referee.check_move(self.board, player, x, y, self.first_round)
        except IllegalMove as exc:
            return self._reject(player, str(exc))

        # Resolve on a copy; the live board only changes once the cascade settles
        board = self.board.clone()
        if self.first_round:
            board.place(x, y, player)
        else:
            board.grow(x, y, player)

        self.phase = Phase.RESOLVING
        try:
            resolution = explosions.resolve(
                board, self.identities(), self.active_identities(), max_waves=self.max_waves
            )
        except explosions.CascadeLimitExceeded:
            self.phase = Phase.AWAITING_MOVE
            raise
        self.board = board
        for record in self.players:
            record.score = resolution.scores[record.identity]
        self._end_turn()

        outcome = MoveOutcome(
            accepted=True,
            events=resolution.events,
            scores=dict(resolution.scores),
            waves=resolution.waves,
        )
        self.last_outcome = outcome
        return outcome

    def resign(self, player):
        """Withdraw a player for the rest of the game; their cells stay on the board."""
        record = self._record(player)
        if not record.active or self.is_game_over:
            return
        record.active = False
        record.score = 0
        LOGGER.info("%r resigned", player)
        if self._contest_over():
            self.phase = Phase.GAME_OVER
            return
        if self.players[self.current_index] is record:
            if self.first_round and self._round_complete():
                self.first_round = False
            self._advance()

    def reset(self):
        self.board.reset_all()
        for record in self.players:
            record.score = 0
            record.active = True
        self.current_index = 0
        self.first_round = True
        self.phase = Phase.AWAITING_MOVE
        self.last_outcome = None

    # ------------------------------------------------------------------ helpers
    def _record(self, player) -> PlayerRecord:
        for record in self.players:
            if record.identity == player:
                return record
        raise ValueError(f"unknown player {player!r}")

    def _reject(self, player, reason: str) -> MoveOutcome:
        LOGGER.debug("rejected move by %r: %s", player, reason)
        return MoveOutcome(accepted=False, scores=self.scores(), reason=reason)

    def _round_complete(self) -> bool:
        return not any(r.active for r in self.players[self.current_index + 1:])

    def _contest_over(self) -> bool:
        return len(self.players) >= 2 and len(self.active_identities()) < 2

    def _end_turn(self):
        if self.first_round and self._round_complete():
            self.first_round = False

        if not self.first_round:
            for record in self.players:
                if record.active and record.score == 0:
                    record.active = False
                    LOGGER.info("%r eliminated", record.identity)

        if self._contest_over():
            self.phase = Phase.GAME_OVER
            return
        self.phase = Phase.AWAITING_MOVE
        self._advance()

    def _advance(self):
        # Bounded by the roster length; no active candidate means the game is over
        n = len(self.players)
        for step in range(1, n + 1):
            candidate = (self.current_index + step) % n
            if self.players[candidate].active:
                self.current_index = candidate
                return
        self.phase = Phase.GAME_OVER
