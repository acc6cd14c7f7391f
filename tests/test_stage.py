import pytest

from snakestage.models import MAX_COL, MAX_ROW, STAGE_COUNT, Cell, CellType, Point
from snakestage.stage import stage_walls

STAGES = range(1, STAGE_COUNT + 1)


def _kinds(stage):
    return {cell.point: cell.kind for cell in stage_walls(stage)}


@pytest.mark.parametrize("stage", STAGES)
def test_border_is_fully_walled(stage):
    kinds = _kinds(stage)
    for row in range(MAX_ROW):
        assert Point(row, 0) in kinds
        assert Point(row, MAX_COL - 1) in kinds
    for col in range(MAX_COL):
        assert Point(0, col) in kinds
        assert Point(MAX_ROW - 1, col) in kinds


@pytest.mark.parametrize("stage", STAGES)
def test_corners_are_immune(stage):
    kinds = _kinds(stage)
    for corner in (Point(0, 0), Point(0, MAX_COL - 1), Point(MAX_ROW - 1, 0), Point(MAX_ROW - 1, MAX_COL - 1)):
        assert kinds[corner] == CellType.IMMUNE_WALL


@pytest.mark.parametrize("stage", STAGES)
def test_walls_are_in_bounds_unique_and_row_major(stage):
    walls = stage_walls(stage)
    keys = [(c.point.row, c.point.col) for c in walls]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)
    assert all(0 <= r < MAX_ROW and 0 <= c < MAX_COL for r, c in keys)
    assert all(c.kind in (CellType.WALL, CellType.IMMUNE_WALL) for c in walls)


def test_first_stage_has_no_interior_walls():
    interior = [
        c for c in stage_walls(1)
        if 0 < c.point.row < MAX_ROW - 1 and 0 < c.point.col < MAX_COL - 1
    ]
    assert interior == []


@pytest.mark.parametrize("stage", [2, 3, 4])
def test_later_stages_have_interior_walls(stage):
    assert len(stage_walls(stage)) > len(stage_walls(1))


def test_stage_two_layout_points():
    kinds = _kinds(2)
    assert kinds[Point(4, 6)] == CellType.IMMUNE_WALL
    assert kinds[Point(4, 7)] == CellType.WALL
    assert kinds[Point(14, 18)] == CellType.IMMUNE_WALL
    assert kinds[Point(13, 18)] == CellType.WALL
    assert Point(14, 20) not in kinds


def test_stage_three_layout_points():
    kinds = _kinds(3)
    assert kinds[Point(5, 8)] == CellType.IMMUNE_WALL
    assert kinds[Point(9, 21)] == CellType.WALL
    assert kinds[Point(15, 12)] == CellType.WALL
    assert Point(15, 16) not in kinds


def test_stage_four_layout_points():
    kinds = _kinds(4)
    assert kinds[Point(4, 25)] == CellType.IMMUNE_WALL
    assert kinds[Point(13, 17)] == CellType.WALL
    assert Point(13, 18) not in kinds
    assert kinds[Point(8, 5)] == CellType.IMMUNE_WALL


def test_returned_list_is_a_fresh_copy():
    walls = stage_walls(1)
    walls.append(Cell(Point(5, 5), CellType.WALL))
    assert Cell(Point(5, 5), CellType.WALL) not in stage_walls(1)


@pytest.mark.parametrize("stage", [0, 5, -1])
def test_unknown_stage_is_rejected(stage):
    with pytest.raises(ValueError):
        stage_walls(stage)