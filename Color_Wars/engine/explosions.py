"""Cascade resolution: explode overloaded cells wave by wave until the board settles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable, Iterable, Optional

from Color_Wars.Board import Board, ColorWarsError


LOGGER = logging.getLogger(__name__)

EXPLOSION_THRESHOLD = 4


class CascadeLimitExceeded(ColorWarsError, RuntimeError):
    """Cascade did not settle within the wave bound."""


@dataclass(frozen=True)
class ExplosionEvent:
    source: tuple[int, int]
    targets: tuple[tuple[int, int], ...]
    owner: Optional[Hashable] = None
    wave: int = 0

    def as_dict(self):
        return {"from": self.source, "to": list(self.targets)}


@dataclass(frozen=True)
class Resolution:
    events: tuple[ExplosionEvent, ...] = ()
    scores: dict = field(default_factory=dict)
    waves: int = 0


def compute_scores(board: Board, players: Iterable[Hashable], active: Iterable[Hashable] | None = None) -> dict:
    """Sum of owned levels per player; inactive players score 0."""
    scores = {p: 0 for p in players}
    counted = set(scores) if active is None else set(active)
    for row in board.cells:
        for cell in row:
            if cell.owner is not None and cell.owner in counted and cell.owner in scores:
                scores[cell.owner] += cell.level
    return scores


def single_explosion(board: Board, x: int, y: int, wave: int = 0) -> ExplosionEvent:
    """Discharge the piece at (x, y) into its in-bounds neighbors and consume it."""
    piece = board.cell(x, y)
    if piece.level < EXPLOSION_THRESHOLD:
        raise ValueError(f"cell ({x}, {y}) at level {piece.level} is not explosive")
    targets = board.neighbors(x, y)
    for nx, ny in targets:
        board.capture(nx, ny, piece.owner)
    board.clear(x, y)
    return ExplosionEvent(source=(x, y), targets=tuple(targets), owner=piece.owner, wave=wave)


def resolve(board: Board, players: Iterable[Hashable], active: Iterable[Hashable] | None = None, *, max_waves: int | None = None) -> Resolution:
    """
    Explode every cell at or above the threshold, re-scanning after each wave
    until none remain. Events come back in cascade order (all of wave 1, then
    wave 2, ...); within a wave sources follow the board scan order.
    Scores are folded once from the settled board.
    """
    players = list(players)
    limit = max_waves if max_waves is not None else board.width * board.height
    events: list[ExplosionEvent] = []
    wave = 0

    pending = board.explosive_cells(EXPLOSION_THRESHOLD)
    while pending:
        if wave >= limit:
            raise CascadeLimitExceeded(f"cascade still active after {limit} waves")
        wave += 1
        for x, y in pending:
            events.append(single_explosion(board, x, y, wave=wave))
        LOGGER.debug("wave %d: %d explosions", wave, len(pending))
        pending = board.explosive_cells(EXPLOSION_THRESHOLD)

    scores = compute_scores(board, players, active)
    return Resolution(events=tuple(events), scores=scores, waves=wave)
