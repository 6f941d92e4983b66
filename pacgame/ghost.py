"""Behaviour shared by every ghost: states, steering, movement and animation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from bisect import bisect_right
from dataclasses import replace
from enum import Enum
from itertools import accumulate

from pacgame import atlas, board
from pacgame.atlas import GhostSprite
from pacgame.direction import Direction, opposite_direction
from pacgame.position import (
    GridPosition,
    Position,
    grid_position_to_position,
    position_to_grid_position,
    round_half_away,
)

# Seconds spent in each default state, alternating scatter and chase.
_STATE_DURATIONS = (7, 20, 7, 20, 5, 20, 5)
_STATE_CHANGES = tuple(accumulate(_STATE_DURATIONS))

_FRIGHTENED_MS = 6000
_FRIGHTENED_BLINK_MS = 3500
_ANIMATION_FRAME_MS = 250
_CELLS_PER_MS = 0.004


class GhostState(Enum):
    """What a ghost is doing; later members take precedence over earlier ones."""

    CHASE = 0
    SCATTER = 1
    FRIGHTENED = 2
    EYES = 3


class Ghost(ABC):
    """A ghost moving through the maze towards a target cell.

    Time deltas are given in milliseconds.
    """

    def __init__(self, sprite_set: GhostSprite) -> None:
        self.sprite_set = GhostSprite(sprite_set)
        self.direction = Direction.NONE
        self.time_for_animation = 0.0
        self.animation_index = 0
        self.state = GhostState.CHASE
        self.time_frighten = 0
        self.time_chase = 0
        self.pos = self.initial_position()
        self.target = Position()
        self.last_grid_position = GridPosition(0, 0)

    @abstractmethod
    def speed(self) -> float:
        """Return the speed factor for the current state."""

    @abstractmethod
    def initial_position(self) -> Position:
        """Return the position the ghost starts from."""

    def current_sprite(self) -> GridPosition:
        """Return the sprite sheet cell to draw for the ghost."""
        if self.state is GhostState.EYES:
            return atlas.eye_sprite(self.direction)
        if self.state is GhostState.FRIGHTENED:
            if self.time_frighten < _FRIGHTENED_BLINK_MS:
                return atlas.initial_frightened(self.animation_index)
            return atlas.ending_frightened(self.animation_index)
        return atlas.ghost_sprite(
            self.sprite_set, self.direction, self.animation_index % 2 == 0
        )

    def position(self) -> Position:
        return replace(self.pos)

    def position_in_grid(self) -> GridPosition:
        return position_to_grid_position(self.pos)

    def current_direction(self) -> Direction:
        return self.direction

    def is_frightened(self) -> bool:
        return self.state is GhostState.FRIGHTENED

    def is_eyes(self) -> bool:
        return self.state is GhostState.EYES

    def is_in_pen(self) -> bool:
        return board.is_in_pen(self.position_in_grid())

    def frighten(self) -> None:
        """Turn the ghost around and make it frightened, unless it is already so or eyes."""
        if self.state.value > GhostState.SCATTER.value:
            return
        self.direction = opposite_direction(self.direction)
        self.state = GhostState.FRIGHTENED
        self.time_frighten = 0

    def die(self) -> None:
        """Turn the ghost into eyes heading back to the pen."""
        if self.state is GhostState.EYES:
            return
        self.direction = opposite_direction(self.direction)
        self.state = GhostState.EYES
        self.time_frighten = 0
        self.time_chase = 0

    def reset(self) -> None:
        """Put the ghost back at its start in scatter state."""
        self.pos = self.initial_position()
        self.state = GhostState.SCATTER
        self.time_frighten = 0
        self.time_chase = 0

    def default_state_at_duration(self, seconds: int) -> GhostState:
        """Return scatter or chase for the time spent in those states."""
        index = bisect_right(_STATE_CHANGES, seconds)
        return GhostState.SCATTER if index % 2 == 0 else GhostState.CHASE

    def update(self, time_delta: float) -> None:
        """Advance the ghost's state, animation and position by some milliseconds."""
        if self.state is GhostState.EYES and self.is_in_pen():
            self.state = GhostState.SCATTER

        if self.state is GhostState.FRIGHTENED:
            self.time_frighten += time_delta
            if self.time_frighten > _FRIGHTENED_MS:
                self.state = GhostState.SCATTER

        if self.state in (GhostState.SCATTER, GhostState.CHASE):
            self.time_chase += time_delta
            new_state = self.default_state_at_duration(int(self.time_chase // 1000))
            if new_state is not self.state:
                self.direction = opposite_direction(self.direction)
                self.state = new_state

        self._update_animation(time_delta)
        self._update_position(time_delta)

    def _update_animation(self, time_delta: float) -> None:
        self.time_for_animation += time_delta
        if self.time_for_animation >= _ANIMATION_FRAME_MS:
            self.time_for_animation = 0.0
            self.animation_index = (self.animation_index + 1) % 4

    def _update_position(self, time_delta: float) -> None:
        self._update_direction()

        delta = _CELLS_PER_MS * time_delta * self.speed()
        old_position = replace(self.pos)
        old_grid_position = position_to_grid_position(old_position)

        if self.direction in (Direction.LEFT, Direction.RIGHT):
            self.pos.x += -delta if self.direction is Direction.LEFT else delta
            self.pos.y = float(round_half_away(self.pos.y))
        elif self.direction in (Direction.UP, Direction.DOWN):
            self.pos.x = float(round_half_away(self.pos.x))
            self.pos.y += -delta if self.direction is Direction.UP else delta

        grid = self.position_in_grid()
        if board.is_portal(grid, self.direction):
            self.pos = grid_position_to_position(board.teleport(grid))
        elif not board.is_walkable_for_ghost(grid, old_grid_position, self.is_eyes()):
            self.pos = old_position
            self.direction = opposite_direction(self.direction)

    def _update_direction(self) -> None:
        """Pick the neighbouring cell closest in a straight line to the target.

        Walls and turning back are never chosen; among equal distances the
        order up, left, down, right decides.
        """
        current = self.position_in_grid()
        if current == self.last_grid_position:
            return

        x, y = float(current.x), float(current.y)
        candidates = [
            (Direction.UP, Position(x, y - 1)),
            (Direction.LEFT, Position(x - 1, y)),
            (Direction.DOWN, Position(x, y + 1)),
            (Direction.RIGHT, Position(x + 1, y)),
        ]
        reverse = opposite_direction(self.direction)

        def distance(move: tuple[Direction, Position]) -> float:
            direction, position = move
            if board.is_portal(current, direction):
                position = grid_position_to_position(board.teleport(current))
            if position.x < 0 or position.y < 0 or direction is reverse:
                return math.inf
            cell = GridPosition(int(position.x), int(position.y))
            if not board.is_walkable_for_ghost(cell, current, self.is_eyes()):
                return math.inf
            return math.hypot(position.x - self.target.x, position.y - self.target.y)

        self.direction = min(candidates, key=distance)[0]
        self.last_grid_position = current