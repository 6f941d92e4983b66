"""The pellets and power pellets left in the maze."""

from __future__ import annotations

from pacgame.board import initial_pellet_positions, initial_super_pellet_positions
from pacgame.position import GridPosition


class _PelletField:
    def __init__(self, positions: list[GridPosition]) -> None:
        self._positions = positions

    def _remaining(self) -> list[GridPosition]:
        return list(self._positions)

    def _contains(self, p: GridPosition) -> bool:
        return p in self._positions

    def _eat(self, p: GridPosition) -> bool:
        try:
            self._positions.remove(p)
        except ValueError:
            return False
        return True


class Pellets(_PelletField):
    """The normal pellets."""

    _SPRITE = GridPosition(1, 9)

    def __init__(self) -> None:
        super().__init__(initial_pellet_positions())

    def current_sprite(self) -> GridPosition:
        return self._SPRITE

    def all_pellets(self) -> list[GridPosition]:
        """Return the cells that still hold a pellet, in board order."""
        return self._remaining()

    def is_pellet(self, p: GridPosition) -> bool:
        return self._contains(p)

    def eat_pellet_at_position(self, p: GridPosition) -> bool:
        """Remove the pellet at a cell; return whether there was one."""
        return self._eat(p)


class SuperPellets(_PelletField):
    """The power pellets that frighten the ghosts."""

    _SPRITE = GridPosition(0, 9)

    def __init__(self) -> None:
        super().__init__(initial_super_pellet_positions())

    def current_sprite(self) -> GridPosition:
        return self._SPRITE

    def all_pellets(self) -> list[GridPosition]:
        """Return the cells that still hold a power pellet, in board order."""
        return self._remaining()

    def is_pellet(self, p: GridPosition) -> bool:
        return self._contains(p)

    def eat_pellet_at_position(self, p: GridPosition) -> bool:
        """Remove the power pellet at a cell; return whether there was one."""
        return self._eat(p)