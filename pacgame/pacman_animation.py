"""Mouth and death animation frames for Pac-Man."""

from __future__ import annotations

from pacgame import atlas
from pacgame.direction import Direction
from pacgame.position import GridPosition

_FRAMES_PER_MS = 0.02
_LAST_DEATH_FRAME = 11

_ANIMATIONS = {
    Direction.DOWN: (
        atlas.PACMAN_DOWN_WIDE,
        atlas.PACMAN_DOWN_NARROW,
        atlas.PACMAN_CLOSED,
        atlas.PACMAN_DOWN_NARROW,
    ),
    Direction.LEFT: (
        atlas.PACMAN_LEFT_WIDE,
        atlas.PACMAN_LEFT_NARROW,
        atlas.PACMAN_CLOSED,
        atlas.PACMAN_LEFT_NARROW,
    ),
    Direction.RIGHT: (
        atlas.PACMAN_RIGHT_WIDE,
        atlas.PACMAN_RIGHT_NARROW,
        atlas.PACMAN_CLOSED,
        atlas.PACMAN_RIGHT_NARROW,
    ),
    Direction.UP: (
        atlas.PACMAN_UP_WIDE,
        atlas.PACMAN_UP_NARROW,
        atlas.PACMAN_CLOSED,
        atlas.PACMAN_UP_NARROW,
    ),
}


class PacManAnimation:
    """Tracks which animation frame Pac-Man shows; time deltas are in milliseconds."""

    def __init__(self) -> None:
        self.animation_position = 0
        self.animation_position_delta = 0.0

    def animation_frame(self, direction: Direction) -> GridPosition:
        """Return the sprite for Pac-Man moving in a direction."""
        frames = _ANIMATIONS.get(direction)
        if frames is None:
            return atlas.PACMAN_CLOSED
        return frames[self.animation_position]

    def death_animation_frame(self) -> GridPosition:
        """Return the sprite of the current death animation frame."""
        return GridPosition(self.animation_position, 1)

    def update_animation_position(self, time_delta: float, dead: bool) -> None:
        """Advance the animation by some milliseconds."""
        if dead and self.animation_position >= _LAST_DEATH_FRAME:
            return

        self.animation_position_delta += _FRAMES_PER_MS * time_delta
        self.animation_position += int(self.animation_position_delta)

        if not dead:
            self.animation_position %= 4

        if self.animation_position_delta > 1:
            self.animation_position_delta -= 1

    def pause(self) -> None:
        """Hold the mouth wide open, as when Pac-Man hits a wall."""
        self.animation_position = 0
        self.animation_position_delta = 0.0