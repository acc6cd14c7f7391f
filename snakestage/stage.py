"""Wall layouts of the four stages."""

from __future__ import annotations

from .models import MAX_COL, MAX_ROW, STAGE_COUNT, Cell, CellType, Point

# '#' is a wall a gate may open in, '@' a wall that never holds a gate,
# '.' open floor.
_EDGE = "@" + "#" * (MAX_COL - 2) + "@"
_OPEN = "#" + "." * (MAX_COL - 2) + "#"

_STAGE_1 = [_EDGE, *[_OPEN] * 19, _EDGE]

_STAGE_2 = [
    _EDGE,
    _OPEN,
    _OPEN,
    _OPEN,
    "#.....@###....................#",
    "#.....#.......................#",
    "#.....#.......................#",
    "#.....@###....................#",
    _OPEN,
    _OPEN,
    _OPEN,
    _OPEN,
    _OPEN,
    "#.................#...#.......#",
    "#................#@@.@@#......#",
    "#.................#...#.......#",
    _OPEN,
    _OPEN,
    _OPEN,
    _OPEN,
    _EDGE,
]

_STAGE_3 = [
    _EDGE,
    _OPEN,
    _OPEN,
    _OPEN,
    "#........####...####..........#",
    "#.......@....@.@....@.........#",
    "#......@......@...............#",
    "#.....#.......................#",
    "#.....#.......................#",
    "#.....#..............#........#",
    "#......#............#.........#",
    "#..................#..........#",
    "#.................#...........#",
    "#.........#......#............#",
    "#..........@....@.............#",
    "#...........####..............#",
    _OPEN,
    _OPEN,
    _OPEN,
    _OPEN,
    _EDGE,
]

_STAGE_4 = [
    _EDGE,
    _OPEN,
    _OPEN,
    _OPEN,
    "#....####################@....#",
    "#........................#....#",
    _OPEN,
    "#........................#....#",
    "#....@####...############@....#",
    "#....#........................#",
    _OPEN,
    _OPEN,
    "#....#........................#",
    "#....@############...####@....#",
    "#........................#....#",
    _OPEN,
    "#........................#....#",
    "#....####################@....#",
    _OPEN,
    _OPEN,
    _EDGE,
]

_SYMBOLS = {"#": CellType.WALL, "@": CellType.IMMUNE_WALL}


def _parse(layout: list[str]) -> tuple[Cell, ...]:
    if len(layout) != MAX_ROW or any(len(line) != MAX_COL for line in layout):
        raise ValueError("stage layout does not match the board size")
    return tuple(
        Cell(Point(row, col), _SYMBOLS[symbol])
        for row, line in enumerate(layout)
        for col, symbol in enumerate(line)
        if symbol in _SYMBOLS
    )


_WALLS = tuple(_parse(layout) for layout in (_STAGE_1, _STAGE_2, _STAGE_3, _STAGE_4))


def stage_walls(stage: int) -> list[Cell]:
    """Return the wall cells of ``stage`` (1-based), in row-major order."""
    if not 1 <= stage <= STAGE_COUNT:
        raise ValueError(f"stage must be between 1 and {STAGE_COUNT}, got {stage}")
    return list(_WALLS[stage - 1])