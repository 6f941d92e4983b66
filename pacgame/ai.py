"""A simple autopilot that steers Pac-Man towards the nearest pellet."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from pacgame import board
from pacgame.direction import Direction, opposite_direction
from pacgame.pacman import PacMan
from pacgame.pellets import Pellets
from pacgame.position import (
    GridPosition,
    Position,
    position_distance,
    position_to_grid_position,
)


@dataclass
class Move:
    """A candidate step for Pac-Man and its distance to the target."""

    direction: Direction = Direction.NONE
    position: GridPosition = GridPosition(0, 0)
    distance_to_target: float = math.inf


class PacManAI:
    """Suggests a direction at each intersection."""

    def __init__(self) -> None:
        self.pos = Position()
        self.direction = Direction.RIGHT

    def reset(self) -> None:
        self.pos = Position()
        self.direction = Direction.RIGHT

    def suggested_direction(self) -> Direction:
        return self.direction

    def pellet_closest_to_pacman(
        self, pacman_grid_position: GridPosition, pellets: list[GridPosition]
    ) -> GridPosition:
        """Sort the pellets by distance to Pac-Man, in place, and return the nearest."""
        if not pellets:
            raise ValueError("no pellets to choose from")
        pellets.sort(key=lambda pellet: position_distance(pacman_grid_position, pellet))
        return pellets[0]

    def is_valid_move(self, move: Move) -> bool:
        """A move is valid if it does not turn back and lands on a walkable cell."""
        if move.direction is opposite_direction(self.direction):
            return False
        return board.is_walkable_for_pacman(move.position)

    def optimal_direction(self, moves: Sequence[Move]) -> Direction:
        """Return the direction of the shortest move; the first wins a tie."""
        return min(moves, key=lambda move: move.distance_to_target).direction

    def update(self, pacman: PacMan, pellets: Pellets) -> None:
        """Choose a new direction when Pac-Man stands on an intersection."""
        pacman_grid = pacman.position_in_grid()
        current_grid = position_to_grid_position(self.pos)

        if not board.is_intersection(pacman_grid) or current_grid == pacman_grid:
            return

        positions = pellets.all_pellets()
        if not positions:
            return

        target = self.pellet_closest_to_pacman(pacman_grid, positions)

        x, y = pacman_grid
        moves = [
            Move(Direction.UP, GridPosition(x, y - 1)),
            Move(Direction.LEFT, GridPosition(x - 1, y)),
            Move(Direction.DOWN, GridPosition(x, y + 1)),
            Move(Direction.RIGHT, GridPosition(x + 1, y)),
        ]
        for move in moves:
            if self.is_valid_move(move):
                move.distance_to_target = position_distance(move.position, target)

        self.direction = self.optimal_direction(moves)