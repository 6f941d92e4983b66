"""The static maze layout and queries on it."""

from __future__ import annotations

from enum import IntEnum

from pacgame.direction import Direction
from pacgame.position import GridPosition, Position

ROWS = 31
COLUMNS = 28


class Cell(IntEnum):
    WALL = 0
    PELLET = 1
    NOTHING = 2
    POWER_PELLET = 4
    PEN = 5
    LEFT_PORTAL = 6
    RIGHT_PORTAL = 7


_LAYOUT = (
    "0000000000000000000000000000",  # 0
    "0111111111111001111111111110",  # 1
    "0100001000001001000001000010",  # 2
    "0400001000001001000001000040",  # 3
    "0100001000001001000001000010",  # 4
    "0111111111111111111111111110",  # 5
    "0100001001000000001001000010",  # 6
    "0100001001000000001001000010",  # 7
    "0111111001111001111001111110",  # 8
    "0000001000002002000001000000",  # 9
    "0000001000002002000001000000",  # 10
    "0000001002222222222001000000",  # 11
    "0000001002000550002001000000",  # 12
    "0000001002055555502001000000",  # 13
    "6222221222055555502221222227",  # 14
    "0000001002055555502001000000",  # 15
    "0000001002000000002001000000",  # 16
    "0000001002222222222001000000",  # 17
    "0000001002000000002001000000",  # 18
    "0000001002000000002001000000",  # 19
    "0111111111111001111111111110",  # 20
    "0100001000001001000001000010",  # 21
    "0100001000001001000001000010",  # 22
    "0411001111111221111111001140",  # 23
    "0001001001000000001001001000",  # 24
    "0001001001000000001001001000",  # 25
    "0111111001111001111001111110",  # 26
    "0100000000001001000000000010",  # 27
    "0100000000001001000000000010",  # 28
    "0111111111111111111111111110",  # 29
    "0000000000000000000000000000",  # 30
)

_BOARD: tuple[tuple[Cell, ...], ...] = tuple(
    tuple(Cell(int(ch)) for ch in row) for row in _LAYOUT
)


def _cell_at(point: GridPosition) -> Cell:
    if not (0 <= point.x < COLUMNS and 0 <= point.y < ROWS):
        return Cell.WALL
    return _BOARD[point.y][point.x]


def is_walkable_for_pacman(point: GridPosition) -> bool:
    """Return whether Pac-Man may stand on the cell."""
    return _cell_at(point) not in (Cell.WALL, Cell.PEN)


def is_walkable_for_ghost(
    target_position: GridPosition, current_position: GridPosition, is_eyes: bool
) -> bool:
    """Return whether a ghost may move from one cell into another.

    Only eyes, or ghosts already in the pen, may enter the pen.
    """
    if _cell_at(target_position) is Cell.WALL:
        return False
    return is_eyes or is_in_pen(current_position) or not is_in_pen(target_position)


def is_in_pen(point: GridPosition) -> bool:
    """Return whether the cell belongs to the ghost pen."""
    return _cell_at(point) is Cell.PEN


def is_portal(point: GridPosition, direction: Direction) -> bool:
    """Return whether moving in a direction from the cell goes through a portal."""
    cell = _cell_at(point)
    return (cell is Cell.LEFT_PORTAL and direction is Direction.LEFT) or (
        cell is Cell.RIGHT_PORTAL and direction is Direction.RIGHT
    )


def is_intersection(point: GridPosition) -> bool:
    """Return whether the cell joins two perpendicular walkable neighbours."""
    if not is_walkable_for_pacman(point) or _cell_at(point) in (
        Cell.LEFT_PORTAL,
        Cell.RIGHT_PORTAL,
    ):
        return False

    x, y = point
    right = is_walkable_for_pacman(GridPosition(x + 1, y))
    left = is_walkable_for_pacman(GridPosition(x - 1, y))
    top = is_walkable_for_pacman(GridPosition(x, y - 1))
    bottom = is_walkable_for_pacman(GridPosition(x, y + 1))

    return (
        (top and right)
        or (right and bottom)
        or (bottom and left)
        or (left and top)
    )


def teleport(point: GridPosition) -> GridPosition:
    """Return the cell on the other side of the maze for an edge column."""
    left, right = 0, COLUMNS - 1
    if point.x == left:
        return GridPosition(right, point.y)
    if point.x == right:
        return GridPosition(left, point.y)
    return point


def _positions_of(kind: Cell) -> list[GridPosition]:
    return [
        GridPosition(column, row)
        for row, cells in enumerate(_BOARD)
        for column, cell in enumerate(cells)
        if cell is kind
    ]


def initial_pellet_positions() -> list[GridPosition]:
    """Return every normal pellet cell, row by row."""
    return _positions_of(Cell.PELLET)


def initial_super_pellet_positions() -> list[GridPosition]:
    """Return every power pellet cell, row by row."""
    return _positions_of(Cell.POWER_PELLET)


def pen_door_position() -> Position:
    """Return the position just outside the pen door."""
    return Position(13, 11)


def initial_pacman_position() -> Position:
    """Return Pac-Man's starting position."""
    return Position(13.5, 23)