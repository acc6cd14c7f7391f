"""Value types and fixed parameters of the snake game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_ROW = 21
MAX_COL = 31

INITIAL_LENGTH = 3

MAX_ITEMS = 3
ITEM_LIFETIME = 3

GATE_MIN_LENGTH = 5
GATE_LIFETIME = 7

STAGE_COUNT = 4

TICK_MS = 100
GAME_OVER_TIMEOUT_MS = 10000

GROWTH = 1
DOUBLE_GROWTH = 2
POISON = -1


class Direction(IntEnum):
    """Heading of the snake, numbered clockwise from up."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def opposite(self) -> Direction:
        return Direction((self + 2) % 4)

    @property
    def clockwise(self) -> Direction:
        return Direction((self + 1) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        """Row and column offset of one step in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


class CellType(IntEnum):
    """Kind of a wall cell on the board."""

    WALL = 1
    IMMUNE_WALL = 2
    GATE_WALL = 3


@dataclass(frozen=True)
class Point:
    """A board position."""

    row: int
    col: int

    def moved(self, direction: Direction | int) -> Point:
        """Return the neighbouring point one step in ``direction``."""
        d_row, d_col = Direction(direction).delta
        return Point(self.row + d_row, self.col + d_col)


@dataclass(frozen=True)
class Cell:
    """A board cell; ``kind`` is set for walls only."""

    point: Point
    kind: CellType | None = None


@dataclass(frozen=True)
class Item:
    """A collectible item worth ``points`` (2, 1 or -1 for poison)."""

    point: Point
    points: int