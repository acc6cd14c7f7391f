"""The snake, its items and gates, and the rules of one move."""

from __future__ import annotations

import random
import time
from collections import deque
from collections.abc import Callable

from .models import (
    DOUBLE_GROWTH,
    GATE_LIFETIME,
    GATE_MIN_LENGTH,
    GROWTH,
    INITIAL_LENGTH,
    ITEM_LIFETIME,
    MAX_COL,
    MAX_ITEMS,
    MAX_ROW,
    POISON,
    Cell,
    Direction,
    Item,
    Point,
)
from .rules import random_free_point, random_gate_point, random_score
from .stage import stage_walls


class Snake:
    """State of one stage: the snake's body, the items, the walls and the gates.

    ``rng`` supplies ``choice`` and ``randrange``; ``clock`` returns the
    current time in seconds and drives item and gate lifetimes.
    """

    def __init__(
        self,
        stage: int = 1,
        rng=None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._stage = stage
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.time
        self._walls = stage_walls(stage)
        self._wall_points = {wall.point for wall in self._walls}
        self._cells: deque[Cell] = deque()
        self._items: list[Item] = []
        self._gates: list[Cell] = []
        self._direction = Direction.RIGHT
        self._growth = 0
        self._poison = 0
        self._gate_count = 0
        self._collided = False
        self._items_started = 0.0
        self._gates_started: float | None = None
        self._place_body()
        self.make_items()

    def _place_body(self) -> None:
        start = random_free_point(self._cells, self._items, self._walls, self._rng)
        row, col = start.row, start.col
        ahead = Point(row, col + INITIAL_LENGTH)
        if col + INITIAL_LENGTH >= MAX_ROW - 1 or self.is_wall(ahead):
            col -= MAX_ROW - INITIAL_LENGTH
        for step in range(INITIAL_LENGTH - 1):
            col += step
            if col + step >= MAX_COL - 1:
                col = MAX_COL - step - 1
            self._cells.appendleft(Cell(Point(row, col)))
        col += INITIAL_LENGTH - 1
        self._cells.appendleft(Cell(Point(row, col)))

    @property
    def stage(self) -> int:
        return self._stage

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def head(self) -> Point:
        return self._cells[0].point

    @property
    def body(self) -> tuple[Point, ...]:
        """Points of the snake, head first."""
        return tuple(cell.point for cell in self._cells)

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    @property
    def walls(self) -> tuple[Cell, ...]:
        return tuple(self._walls)

    @property
    def gates(self) -> tuple[Point, ...]:
        return tuple(gate.point for gate in self._gates)

    @property
    def score(self) -> int:
        """Current body length."""
        return len(self._cells)

    @property
    def growth(self) -> int:
        return self._growth

    @property
    def poison(self) -> int:
        return self._poison

    @property
    def gate_count(self) -> int:
        return self._gate_count

    @property
    def collided(self) -> bool:
        return self._collided

    def turn(self, direction: Direction | int) -> None:
        """Set the heading used by the next move."""
        self._direction = Direction(direction)

    def make_items(self) -> None:
        """Replace the items with one to three fresh ones."""
        self._items_started = self._clock()
        self._items = []
        for _ in range(self._rng.randrange(MAX_ITEMS) + 1):
            point = random_free_point(self._cells, self._items, self._walls, self._rng)
            self._items.append(Item(point, random_score(self._rng)))

    def make_gates(self) -> None:
        """Open a new pair of gates, unless the snake is passing through one."""
        body = set(self.body)
        if any(gate.point in body for gate in self._gates):
            return
        self._gates = []
        self._gates_started = self._clock()
        for _ in range(2):
            point = random_gate_point(
                self._cells, self._items, self._walls, self._gates, self._rng
            )
            self._gates.append(Cell(point))

    def move(self) -> None:
        """Advance one step; eat items, pass gates and renew items and gates."""
        if self.collides_with_wall() or self.collides_with_self():
            self._collided = True
            return

        head = self.head.moved(self._direction)
        self._cells.appendleft(Cell(head))

        eaten = next((item for item in self._items if item.point == head), None)

        entered = False
        exit_gate: Point | None = None
        for gate in self._gates:
            if gate.point == head:
                entered = True
            else:
                exit_gate = gate.point

        if eaten is not None:
            if eaten.points == DOUBLE_GROWTH:
                self._growth += 2
            elif eaten.points == POISON:
                for _ in range(2):
                    if self._cells:
                        self._cells.pop()
                self._poison += 1
            elif eaten.points == GROWTH:
                self._growth += 1
            self._items.remove(eaten)
        else:
            self._cells.pop()

        now = self._clock()
        if now - self._items_started >= ITEM_LIFETIME:
            self.make_items()

        if entered and exit_gate is not None:
            self._direction = self._exit_direction(exit_gate)
            self._cells.appendleft(Cell(exit_gate))
            self._cells.pop()
            self._gate_count += 1
        elif len(self._cells) >= GATE_MIN_LENGTH and (
            self._gates_started is None or now - self._gates_started >= GATE_LIFETIME
        ):
            self.make_gates()

    def _exit_direction(self, gate: Point) -> Direction:
        if gate.row == 0:
            return Direction.DOWN
        if gate.row == MAX_ROW - 1:
            return Direction.UP
        if gate.col == 0:
            return Direction.RIGHT
        if gate.col == MAX_COL - 1:
            return Direction.LEFT
        direction = self._direction
        for attempt in range(4):
            if not self.is_wall(gate.moved(direction)):
                break
            direction = direction.opposite if attempt == 0 else direction.clockwise
        return direction

    def collides_with_self(self) -> bool:
        """Tell whether the head overlaps another part of the body."""
        head = self.head
        return any(cell.point == head for cell in list(self._cells)[1:])

    def collides_with_wall(self) -> bool:
        """Tell whether the head sits on a wall."""
        return self.is_wall(self.head)

    def is_wall(self, point: Point) -> bool:
        """Tell whether ``point`` is a wall; open gates do not count."""
        if any(gate.point == point for gate in self._gates):
            return False
        return point in self._wall_points