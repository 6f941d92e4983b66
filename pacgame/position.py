"""Continuous and grid positions on the maze."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterator, Protocol


@dataclass(eq=False)
class Position:
    """A point in maze coordinates, in units of cells."""

    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        epsilon = sys.float_info.epsilon
        return abs(self.x - other.x) <= epsilon and abs(self.y - other.y) <= epsilon


@dataclass(frozen=True)
class GridPosition:
    """The column and row of a maze cell."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


class _Point(Protocol):
    x: float
    y: float


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    magnitude = abs(value)
    floor = math.floor(magnitude)
    rounded = floor + 1 if magnitude - floor >= 0.5 else floor
    return int(rounded) if value >= 0 else -int(rounded)


def position_to_grid_position(pos: Position) -> GridPosition:
    """Return the cell nearest to a position; coordinates must not be negative."""
    if pos.x < 0 or pos.y < 0:
        raise ValueError(f"position must have non-negative coordinates: {pos}")
    return GridPosition(round_half_away(pos.x), round_half_away(pos.y))


def grid_position_to_position(pos: GridPosition) -> Position:
    """Return the position at the origin of a cell."""
    return Position(float(pos.x), float(pos.y))


def position_distance(a: _Point, b: _Point) -> float:
    """Return the straight-line distance between two points of the same kind."""
    return math.hypot(float(a.x) - float(b.x), float(a.y) - float(b.y))