"""Move validation: bounds, turn ownership, placement and growth legality."""

from Color_Wars.Board import Board, IllegalMove, OutOfBounds


def check_bounds(board: Board, x: int, y: int):
    if not board.in_bounds(x, y):
        raise OutOfBounds(f"move out of bounds: ({x}, {y})")


def check_turn(expected, player, active=True):
    if player != expected:
        raise IllegalMove(f"not {player!r}'s turn (expected {expected!r})")
    if not active:
        raise IllegalMove(f"{player!r} has been eliminated")


def check_move(board: Board, player, x: int, y: int, first_round: bool):
    """
    Validate a move against bounds and the current round's rule.
    Raises OutOfBounds for coordinates off the board, IllegalMove otherwise.
    """
    check_bounds(board, x, y)
    cell = board.cell(x, y)

    if first_round:
        if not cell.is_empty:
            raise IllegalMove("cell already occupied")
        return True

    if cell.is_empty:
        raise IllegalMove("cannot grow an empty cell")
    if cell.owner != player:
        raise IllegalMove("cell belongs to another player")
    return True
