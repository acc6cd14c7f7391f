"""Random placement, item scores and stage missions."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .models import (
    DOUBLE_GROWTH,
    GROWTH,
    MAX_COL,
    MAX_ROW,
    POISON,
    STAGE_COUNT,
    Cell,
    CellType,
    Item,
    Point,
)


@dataclass(frozen=True)
class Mission:
    """Targets a stage sets: body length and counts of items and gates."""

    length: int
    growth: int
    poison: int
    gates: int


MISSIONS = (
    Mission(6, 4, 2, 1),
    Mission(7, 5, 2, 1),
    Mission(8, 6, 3, 2),
    Mission(9, 7, 4, 3),
)


def _points(things: Iterable[Cell | Item]) -> set[Point]:
    return {thing.point for thing in things}


def random_free_point(
    cells: Iterable[Cell],
    items: Iterable[Item],
    walls: Iterable[Cell],
    rng=None,
) -> Point:
    """Pick a random interior point not taken by the snake, an item or a wall."""
    rng = rng if rng is not None else random
    taken = _points(cells) | _points(items) | _points(walls)
    free = [
        Point(row, col)
        for row in range(1, MAX_ROW)
        for col in range(1, MAX_COL)
        if Point(row, col) not in taken
    ]
    if not free:
        raise ValueError("no free point left on the board")
    return rng.choice(free)


def random_gate_point(
    cells: Iterable[Cell],
    items: Iterable[Item],
    walls: Iterable[Cell],
    gates: Iterable[Cell],
    rng=None,
) -> Point:
    """Pick a random wall that may become a gate.

    Immune walls and walls under the snake, an item or another gate are skipped.
    """
    rng = rng if rng is not None else random
    taken = _points(cells) | _points(items) | _points(gates)
    candidates = [
        wall.point
        for wall in walls
        if wall.kind != CellType.IMMUNE_WALL and wall.point not in taken
    ]
    if not candidates:
        raise ValueError("no wall can hold a gate")
    return rng.choice(candidates)


def random_score(rng=None) -> int:
    """Draw an item value: 2, 1 or -1 (poison), each equally likely."""
    rng = rng if rng is not None else random
    return (DOUBLE_GROWTH, GROWTH, POISON)[rng.randrange(3)]


def direction_diff(a: int, b: int) -> int:
    """Distance between two direction numbers; 2 means opposite headings."""
    return abs(a - b)


def mission_for(stage: int) -> Mission:
    """Return the mission of ``stage`` (1-based)."""
    if not 1 <= stage <= STAGE_COUNT:
        raise ValueError(f"stage must be between 1 and {STAGE_COUNT}, got {stage}")
    return MISSIONS[stage - 1]


def mission_clear(stage: int, length: int, growth: int, poison: int, gates: int) -> bool:
    """Tell whether every target of the stage's mission has been reached."""
    mission = mission_for(stage)
    return (
        mission.length <= length
        and mission.growth <= growth
        and mission.poison <= poison
        and mission.gates <= gates
    )