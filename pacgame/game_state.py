"""The whole state of a game in progress and how it advances each tick."""

from __future__ import annotations

from dataclasses import dataclass, field

from pacgame.ai import PacManAI
from pacgame.direction import Direction
from pacgame.fruits import Fruits
from pacgame.ghost import Ghost
from pacgame.ghosts import Blinky, Inky, Pinky
from pacgame.pacman import PacMan
from pacgame.pellets import Pellets, SuperPellets
from pacgame.position import position_to_grid_position

DEFAULT_LIVES = 3

GHOST_POINTS = 200
NORMAL_PELLET_POINTS = 10
POWER_PELLET_POINTS = 50

_DEATH_ANIMATION_MS = 1000


@dataclass
class Score:
    """Lives left and what has been earned so far."""

    lives: int = DEFAULT_LIVES
    points: int = 0
    eaten_pellets: int = 0
    eaten_fruits: int = 0


@dataclass
class InputState:
    """The player's current requests."""

    close: bool = False
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    enable_ai: bool = False

    def direction(self) -> Direction:
        """Return the requested direction; up, down, left, right in that priority."""
        if self.up:
            return Direction.UP
        if self.down:
            return Direction.DOWN
        if self.left:
            return Direction.LEFT
        if self.right:
            return Direction.RIGHT
        return Direction.NONE


@dataclass
class GameState:
    """Everything on the board; time deltas are in milliseconds."""

    blinky: Blinky = field(default_factory=Blinky)
    pinky: Pinky = field(default_factory=Pinky)
    inky: Inky = field(default_factory=Inky)
    pacman: PacMan = field(default_factory=PacMan)
    pacman_ai: PacManAI = field(default_factory=PacManAI)
    input_state: InputState = field(default_factory=InputState)
    pellets: Pellets = field(default_factory=Pellets)
    super_pellets: SuperPellets = field(default_factory=SuperPellets)
    fruit: Fruits = field(default_factory=Fruits)
    score: Score = field(default_factory=Score)
    time_since_death: float = 0

    def step(self, delta: float) -> None:
        """Advance the game by some milliseconds."""
        self.pacman_ai.update(self.pacman, self.pellets)
        if self.input_state.enable_ai:
            wanted = self.pacman_ai.suggested_direction()
        else:
            wanted = self.input_state.direction()
        self.pacman.update(delta, wanted)

        if self.is_pacman_dying():
            self.handle_death_animation(delta)
            return

        if not self.pacman.has_direction():
            return

        pacman_grid = self.pacman.position_in_grid()
        pacman_dir = self.pacman.current_direction()

        self.blinky.set_target(self.pacman.position())
        self.blinky.update(delta)
        self.pinky.set_target(pacman_grid, pacman_dir)
        self.pinky.update(delta)
        self.inky.set_target(pacman_grid, pacman_dir, self.blinky.position_in_grid())
        self.inky.update(delta)

        self.fruit.update(delta, self.score.eaten_pellets)

        for ghost in (self.blinky, self.pinky, self.inky):
            self.check_collision(ghost)

        self.eat_pellets()
        self.eat_fruit()

    def check_collision(self, ghost: Ghost) -> None:
        """Resolve Pac-Man and a ghost sharing a cell."""
        if self.is_pacman_dying() or ghost.is_eyes():
            return
        if ghost.position_in_grid() != self.pacman.position_in_grid():
            return
        if ghost.is_frightened():
            ghost.die()
            self.score.points += GHOST_POINTS
        else:
            self.kill_pacman()

    def handle_death_animation(self, delta: float) -> None:
        """Let the death animation run, then put everyone back at the start."""
        self.time_since_death += delta
        if self.time_since_death > _DEATH_ANIMATION_MS:
            self.blinky.reset()
            self.pinky.reset()
            self.inky.reset()
            self.pacman.reset()
            self.pacman_ai.reset()
            self.time_since_death = 0

    def eat_pellets(self) -> None:
        """Eat any pellet under Pac-Man; a power pellet frightens the ghosts."""
        pos = self.pacman.position_in_grid()
        if self.pellets.eat_pellet_at_position(pos):
            self.score.eaten_pellets += 1
            self.score.points += NORMAL_PELLET_POINTS

        if self.super_pellets.eat_pellet_at_position(pos):
            self.score.eaten_pellets += 1
            self.score.points += POWER_PELLET_POINTS
            for ghost in (self.blinky, self.pinky, self.inky):
                ghost.frighten()

    def eat_fruit(self) -> None:
        """Eat the fruit if it is shown and Pac-Man stands on it."""
        pos = self.pacman.position_in_grid()
        fruit_pos = position_to_grid_position(self.fruit.position())
        if self.fruit.is_visible() and pos == fruit_pos:
            self.score.points += self.fruit.eat()
            self.score.eaten_fruits += 1

    def kill_pacman(self) -> None:
        """Start Pac-Man's death and take a life."""
        self.pacman.die()
        self.score.lives -= 1
        self.time_since_death = 1

    def is_pacman_dying(self) -> bool:
        return self.time_since_death != 0