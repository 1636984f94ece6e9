"""Board state container: cells, placement/growth rules and snapshots."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Hashable, Iterator, Optional

START_LEVEL = 3

# Direction order used for neighbor enumeration and explosion targets
NEIGHBORS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


class ColorWarsError(Exception):
    """Base class for game errors."""


class IllegalMove(ColorWarsError, ValueError):
    """Move rejected by the rules; state is left unchanged."""


class OutOfBounds(ColorWarsError, IndexError):
    """Coordinate outside the board; a caller bug, not a rules violation."""


@dataclass(frozen=True)
class Cell:
    position: tuple[int, int]
    owner: Optional[Hashable] = None
    level: int = 0

    def __post_init__(self):
        if self.level < 0:
            raise ValueError("level must be non-negative")
        if (self.owner is None) != (self.level == 0):
            raise ValueError("empty cells have level 0 and owned cells level >= 1")

    @property
    def is_empty(self) -> bool:
        return self.owner is None


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable point-in-time copy of a board, indexed as cells[y][x]."""

    width: int
    height: int
    cells: tuple[tuple[Cell, ...], ...]

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(f"({x}, {y}) outside {self.width}x{self.height} board")
        return self.cells[y][x]

    def owners(self) -> list[list[Optional[Hashable]]]:
        return [[c.owner for c in row] for row in self.cells]

    def levels(self) -> list[list[int]]:
        return [[c.level for c in row] for row in self.cells]


class Board:
    def __init__(self, width=5, height=5):
        if width < 1 or height < 1:
            raise ValueError("board dimensions must be at least 1x1")
        self.width = width
        self.height = height
        # Stored as cells[y][x]; Cell values are immutable and replaced on change
        self.cells = [[Cell((x, y)) for x in range(width)] for y in range(height)]

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x, y):
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"move out of bounds: ({x}, {y})")

    def cell(self, x, y) -> Cell:
        self._check(x, y)
        return self.cells[y][x]

    def owner_at(self, x, y):
        return self.cell(x, y).owner

    def level_at(self, x, y) -> int:
        return self.cell(x, y).level

    def is_empty(self, x, y) -> bool:
        return self.cell(x, y).is_empty

    def _set(self, x, y, owner, level):
        self.cells[y][x] = replace(self.cells[y][x], owner=owner, level=level)

    def place(self, x, y, player):
        """Put a fresh piece on an empty cell; raise IllegalMove if occupied."""
        if player is None:
            raise ValueError("player must not be None")
        self._check(x, y)
        if not self.cells[y][x].is_empty:
            raise IllegalMove("cell already occupied")
        self._set(x, y, player, START_LEVEL)

    def grow(self, x, y, player):
        """Reinforce one of the player's own cells by one level."""
        self._check(x, y)
        current = self.cells[y][x]
        if current.is_empty:
            raise IllegalMove("cannot grow an empty cell")
        if current.owner != player:
            raise IllegalMove("cell belongs to another player")
        self._set(x, y, player, current.level + 1)

    def capture(self, x, y, new_owner):
        """Take over a cell during a cascade regardless of its previous owner."""
        self._check(x, y)
        self._set(x, y, new_owner, self.cells[y][x].level + 1)

    def clear(self, x, y):
        self._check(x, y)
        self._set(x, y, None, 0)

    def reset_all(self):
        for y in range(self.height):
            for x in range(self.width):
                self._set(x, y, None, 0)

    def neighbors(self, x, y) -> list[tuple[int, int]]:
        """In-bounds orthogonal neighbors of (x, y), in NEIGHBORS_4 order."""
        self._check(x, y)
        result = []
        for dx, dy in NEIGHBORS_4:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def positions(self) -> Iterator[tuple[int, int]]:
        """All coordinates in scan order: x outer, y inner."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def occupied(self) -> list[tuple[int, int]]:
        return [(x, y) for x, y in self.positions() if not self.cells[y][x].is_empty]

    def cells_owned_by(self, player) -> list[tuple[int, int]]:
        return [(x, y) for x, y in self.positions() if self.cells[y][x].owner == player]

    def explosive_cells(self, threshold) -> list[tuple[int, int]]:
        return [(x, y) for x, y in self.positions() if self.cells[y][x].level >= threshold]

    def total_mass(self) -> int:
        return sum(c.level for row in self.cells for c in row)

    def clone(self):
        new_board = Board(self.width, self.height)
        new_board.cells = [row[:] for row in self.cells]
        return new_board

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(self.width, self.height, tuple(tuple(row) for row in self.cells))
