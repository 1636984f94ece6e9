"""One-ply move evaluation on a cloned controller (greedy ranking)."""

from __future__ import annotations


def evaluate_move(controller, player, move) -> int:
    """
    Score a move by playing it on a clone: own score minus the best opponent
    score after the cascade settles. Rejected moves score as very bad.
    """
    sim = controller.clone()
    outcome = sim.attempt_move(player, *move)
    if not outcome.accepted:
        return -10**9
    own = outcome.scores.get(player, 0)
    others = [s for p, s in outcome.scores.items() if p != player]
    return own - (max(others) if others else 0)


def rank_moves(controller, player, limit=None) -> list[tuple[tuple[int, int], int]]:
    """Return (move, score) pairs best first; ties keep board scan order."""
    scored = [(mv, evaluate_move(controller, player, mv)) for mv in controller.legal_moves(player)]
    ranked = sorted(scored, key=lambda kv: kv[1], reverse=True)
    return ranked[:limit] if limit else ranked
