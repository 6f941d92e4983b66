"""The bonus fruit shown under the pen."""

from __future__ import annotations

from pacgame.position import GridPosition, Position

_VISIBLE_MS = 9000
_PELLET_THRESHOLDS = (70, 170)


class Fruits:
    """A fruit that appears twice per level; time deltas are in milliseconds."""

    def __init__(self) -> None:
        self.visible = False
        self.index = 0
        self.time_visible = 0

    def update(self, time_delta: float, eaten_pellets: int) -> None:
        """Show the fruit after enough pellets and hide it after nine seconds."""
        if self.visible:
            self.time_visible += time_delta

        if self.time_visible > _VISIBLE_MS:
            self._hide()
        elif (
            self.index < len(_PELLET_THRESHOLDS)
            and eaten_pellets >= _PELLET_THRESHOLDS[self.index]
        ):
            self.visible = True

    def current_sprite(self) -> GridPosition:
        """Return the cherry sprite."""
        return GridPosition(3, 8)

    def position(self) -> Position:
        """Return the spot under the pen where the fruit appears."""
        return Position(13.5, 17)

    def is_visible(self) -> bool:
        return self.visible

    def value(self) -> int:
        return 100

    def eat(self) -> int:
        """Eat the fruit if shown and return its points, else 0."""
        if not self.is_visible():
            return 0
        self._hide()
        return self.value()

    def _hide(self) -> None:
        self.index += 1
        self.time_visible = 0
        self.visible = False