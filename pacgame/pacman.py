"""Pac-Man himself: movement through the maze, death and reset."""

from __future__ import annotations

import math
from dataclasses import replace

from pacgame import board
from pacgame.direction import Direction
from pacgame.pacman_animation import PacManAnimation
from pacgame.position import (
    GridPosition,
    Position,
    grid_position_to_position,
    position_to_grid_position,
)

_CELLS_PER_MS = 0.004
_PACMAN_SIZE = 1


class PacMan:
    """The player's character; time deltas are in milliseconds."""

    def __init__(self) -> None:
        self.direction = Direction.NONE
        self.desired_direction = Direction.NONE
        self.pos = board.initial_pacman_position()
        self.animation = PacManAnimation()
        self.dead = False

    def current_sprite(self) -> GridPosition:
        if self.dead:
            return self.animation.death_animation_frame()
        return self.animation.animation_frame(self.direction)

    def position(self) -> Position:
        return replace(self.pos)

    def position_in_grid(self) -> GridPosition:
        return position_to_grid_position(self.pos)

    def has_direction(self) -> bool:
        return self.direction is not Direction.NONE

    def current_direction(self) -> Direction:
        return self.direction

    def die(self) -> None:
        self.dead = True

    def reset(self) -> None:
        """Bring Pac-Man back to life at his starting position."""
        self.dead = False
        self.direction = Direction.NONE
        self.desired_direction = Direction.NONE
        self.pos = board.initial_pacman_position()

    def update(self, time_delta: float, input_direction: Direction) -> None:
        """Move and animate Pac-Man by some milliseconds, steering towards the input."""
        if self.dead:
            self._update_animation(time_delta, False)
            return

        if input_direction is not Direction.NONE:
            self.desired_direction = input_direction

        old = replace(self.pos)
        self._update_maze_position(time_delta)
        self._update_animation(time_delta, self.pos == old)

    def _update_animation(self, time_delta: float, paused: bool) -> None:
        if paused:
            self.animation.pause()
        else:
            self.animation.update_animation_position(time_delta, self.dead)

    def _cell_ahead(self, direction: Direction, delta: float) -> GridPosition:
        x, y = self.pos.x, self.pos.y
        if direction is Direction.LEFT:
            return GridPosition(int(x - delta), int(y))
        if direction is Direction.RIGHT:
            return GridPosition(int(x + _PACMAN_SIZE), int(y))
        if direction is Direction.UP:
            return GridPosition(int(x), int(y - delta))
        if direction is Direction.DOWN:
            return GridPosition(int(x), int(y + _PACMAN_SIZE))
        return position_to_grid_position(self.pos)

    def _update_maze_position(self, time_delta: float) -> None:
        grid = self.position_in_grid()
        if board.is_portal(grid, self.direction):
            self.pos = grid_position_to_position(board.teleport(grid))
            return

        delta = _CELLS_PER_MS * time_delta

        def can_go(direction: Direction) -> bool:
            return board.is_walkable_for_pacman(self._cell_ahead(direction, delta))

        if self.desired_direction is not self.direction and can_go(self.desired_direction):
            self.direction = self.desired_direction

        if not can_go(self.direction):
            return

        x, y = self.pos.x, self.pos.y
        if self.direction is Direction.LEFT:
            self.pos = Position(x - delta, float(math.floor(y)))
        elif self.direction is Direction.RIGHT:
            self.pos = Position(x + delta, float(math.floor(y)))
        elif self.direction is Direction.UP:
            self.pos = Position(float(math.floor(x)), y - delta)
        elif self.direction is Direction.DOWN:
            self.pos = Position(float(math.floor(x)), y + delta)