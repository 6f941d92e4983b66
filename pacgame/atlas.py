"""Sprite sheet coordinates for Pac-Man and the ghosts."""

from __future__ import annotations

from enum import IntEnum

from pacgame.direction import Direction
from pacgame.position import GridPosition


class GhostSprite(IntEnum):
    """The sprite sheet row of each ghost."""

    BLINKY = 2
    PINKY = 3
    INKY = 4
    CLYDE = 5


PACMAN_RIGHT_WIDE = GridPosition(0, 0)
PACMAN_RIGHT_NARROW = GridPosition(1, 0)
PACMAN_CLOSED = GridPosition(2, 0)
PACMAN_LEFT_NARROW = GridPosition(3, 0)
PACMAN_LEFT_WIDE = GridPosition(4, 0)
PACMAN_UP_WIDE = GridPosition(5, 0)
PACMAN_UP_NARROW = GridPosition(6, 0)
PACMAN_DOWN_WIDE = GridPosition(7, 0)
PACMAN_DOWN_NARROW = GridPosition(8, 0)

GHOST_BLUE_FRIGHTENED = GridPosition(0, 7)
GHOST_BLUE_FRIGHTENED2 = GridPosition(1, 7)
GHOST_WHITE_FRIGHTENED = GridPosition(2, 7)
GHOST_WHITE_FRIGHTENED2 = GridPosition(3, 7)

_DIRECTION_COLUMN = {
    Direction.RIGHT: 0,
    Direction.DOWN: 2,
    Direction.LEFT: 4,
    Direction.UP: 6,
}

_ENDING_FRIGHTENED = (
    GHOST_BLUE_FRIGHTENED,
    GHOST_BLUE_FRIGHTENED2,
    GHOST_WHITE_FRIGHTENED,
    GHOST_WHITE_FRIGHTENED2,
)


def eye_sprite(direction: Direction) -> GridPosition:
    """Return the sprite of a dead ghost's eyes looking in a direction."""
    return GridPosition(_DIRECTION_COLUMN.get(direction, 0), 6)


def ghost_sprite(ghost: GhostSprite, direction: Direction, alternative: bool) -> GridPosition:
    """Return a ghost's sprite for a direction and animation phase."""
    row = GhostSprite(ghost).value
    column = _DIRECTION_COLUMN.get(direction, 0)
    if alternative:
        column += 1
    return GridPosition(column, row)


def initial_frightened(animation_index: int) -> GridPosition:
    """Return the blue frightened sprite for an animation frame."""
    return GHOST_BLUE_FRIGHTENED2 if animation_index % 2 == 0 else GHOST_BLUE_FRIGHTENED


def ending_frightened(animation_index: int) -> GridPosition:
    """Return the blinking frightened sprite for an animation frame (0 to 3)."""
    if not 0 <= animation_index < len(_ENDING_FRIGHTENED):
        raise IndexError(f"animation index out of range: {animation_index}")
    return _ENDING_FRIGHTENED[animation_index]