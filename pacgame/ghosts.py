"""The individual ghosts and the way each picks its target."""

from __future__ import annotations

import math
from dataclasses import replace

from pacgame.atlas import GhostSprite
from pacgame.board import pen_door_position
from pacgame.direction import Direction
from pacgame.ghost import Ghost, GhostState
from pacgame.position import GridPosition, Position


def _standard_speed(state: GhostState) -> float:
    """Return the speed every ghost moves at in the given state."""
    if state is GhostState.EYES:
        return 2
    if state is GhostState.FRIGHTENED:
        return 0.5
    return 0.75


class _TargetingGhost(Ghost):
    def _target_forced(self) -> bool:
        """Aim eyes at home and pen-bound ghosts at the door; report whether done."""
        if self.state is GhostState.EYES:
            self.target = self.initial_position()
            return True
        if self.is_in_pen():
            self.target = pen_door_position()
            return True
        return False


def _ahead_of(pos: GridPosition, direction: Direction, cells: int) -> tuple[int, int]:
    """Return the cell some distance ahead of a moving Pac-Man.

    Facing up also shifts the cell to the left, as in the arcade original.
    """
    x, y = pos.x, pos.y
    if direction is Direction.LEFT:
        return x - cells, y
    if direction is Direction.RIGHT:
        return x + cells, y
    if direction is Direction.UP:
        return x - cells, y - cells
    if direction is Direction.DOWN:
        return x, y + cells
    raise ValueError("Pac-Man should be moving")


class Blinky(_TargetingGhost):
    """The red ghost, which chases Pac-Man directly."""

    def __init__(self) -> None:
        super().__init__(GhostSprite.BLINKY)

    def speed(self) -> float:
        return _standard_speed(self.state)

    def set_target(self, pacman_pos: Position) -> None:
        if self._target_forced():
            return
        if self.state is GhostState.CHASE:
            self.target = replace(pacman_pos)
        else:
            self.target = self.scatter_target()

    def initial_position(self) -> Position:
        return Position(13.5, 11)

    def scatter_target(self) -> Position:
        return Position(25, -3)


class Pinky(_TargetingGhost):
    """The pink ghost, which aims four cells ahead of Pac-Man."""

    def __init__(self) -> None:
        super().__init__(GhostSprite.PINKY)

    def speed(self) -> float:
        return _standard_speed(self.state)

    def set_target(self, pacman_pos: GridPosition, pacman_dir: Direction) -> None:
        if self._target_forced():
            return
        if self.state is GhostState.SCATTER:
            self.target = self.scatter_target()
            return
        x, y = _ahead_of(pacman_pos, pacman_dir, 4)
        self.target = Position(float(x), float(y))

    def initial_position(self) -> Position:
        return Position(11.5, 14)

    def scatter_target(self) -> Position:
        return Position(3, -2)


class Inky(_TargetingGhost):
    """The cyan ghost, which aims past Pac-Man on the line from Blinky."""

    def __init__(self) -> None:
        super().__init__(GhostSprite.INKY)

    def speed(self) -> float:
        return _standard_speed(self.state)

    def set_target(
        self, pacman_pos: GridPosition, pacman_dir: Direction, blinky_pos: GridPosition
    ) -> None:
        if self._target_forced():
            return
        if self.state is GhostState.SCATTER:
            self.target = self.scatter_target()
            return

        x, y = _ahead_of(pacman_pos, pacman_dir, 2)
        distance = math.hypot(blinky_pos.x - x, blinky_pos.y - y)
        if distance:
            dx = int((x - blinky_pos.x) / distance) * 2
            dy = int((y - blinky_pos.y) / distance) * 2
            x, y = x + dx, y + dy
        self.target = Position(float(x), float(y))

    def initial_position(self) -> Position:
        return Position(13.5, 14)

    def scatter_target(self) -> Position:
        return Position(27, 30)


class Clyde(_TargetingGhost):
    """The orange ghost, which chases Pac-Man only from more than 8 cells away."""

    def __init__(self) -> None:
        super().__init__(GhostSprite.CLYDE)

    def speed(self) -> float:
        return _standard_speed(self.state)

    def set_target(self, pacman_pos: Position) -> None:
        if self._target_forced():
            return
        self.target = self.scatter_target()
        if self.state is GhostState.SCATTER:
            return
        distance = math.hypot(self.pos.x - pacman_pos.x, self.pos.y - pacman_pos.y)
        if distance > 8:
            self.target = replace(pacman_pos)

    def initial_position(self) -> Position:
        return Position(15.5, 14)

    def scatter_target(self) -> Position:
        return Position(0, 30)