import dataclasses

import pytest

from snakestage.models import Cell, CellType, Direction, Item, Point


def test_direction_numbering_matches_clockwise_order():
    assert [Direction(v) for v in range(4)] == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]
    assert list(Direction) == [Direction(0), Direction(1), Direction(2), Direction(3)]


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_an_involution(direction):
    p = Point(10, 15)
    assert Direction(direction.opposite.opposite.value) == direction
    assert p.moved(direction.opposite) != p.moved(direction)


@pytest.mark.parametrize("direction", list(Direction))
def test_four_clockwise_turns_return_home(direction):
    start = Point(10, 15)
    p = start
    d = direction
    for _ in range(4):
        p = p.moved(d)
        d = d.clockwise
    assert d == direction
    assert p == start


def test_opposites():
    p = Point(5, 5)
    assert p.moved(Direction.UP.opposite) == Point(6, 5)
    assert p.moved(Direction.LEFT.opposite) == Point(5, 6)


@pytest.mark.parametrize("direction", list(Direction))
def test_moved_then_back_returns_original(direction):
    p = Point(10, 15)
    assert p.moved(direction).moved(direction.opposite) == p


@pytest.mark.parametrize("direction", list(Direction))
def test_moved_changes_exactly_one_axis_by_one(direction):
    p = Point(10, 15)
    q = p.moved(direction)
    assert abs(q.row - p.row) + abs(q.col - p.col) == 1


def test_moved_up_and_right():
    p = Point(5, 5)
    assert p.moved(Direction.UP) == Point(4, 5)
    assert p.moved(Direction.RIGHT) == Point(5, 6)


def test_moved_accepts_plain_int():
    p = Point(5, 5)
    assert p.moved(2) == p.moved(Direction.DOWN)


def test_moved_rejects_unknown_direction():
    with pytest.raises(ValueError):
        Point(1, 1).moved(7)


def test_cell_defaults_to_no_kind_and_compares_by_value():
    assert Cell(Point(1, 2)).kind is None
    assert Cell(Point(1, 2), CellType.WALL) == Cell(Point(1, 2), CellType.WALL)
    assert Cell(Point(1, 2), CellType.WALL) != Cell(Point(1, 2), CellType.IMMUNE_WALL)


def test_cell_type_values():
    assert CellType(1) == CellType.WALL
    assert CellType(2) == CellType.IMMUNE_WALL
    assert CellType(3) == CellType.GATE_WALL
    with pytest.raises(ValueError):
        CellType(0)


def test_values_are_immutable_and_hashable():
    item = Item(Point(3, 4), 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.points = 1  # type: ignore[misc]
    assert len({Point(3, 4), Point(3, 4), Point(4, 3)}) == 2