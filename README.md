# pacgame

This package holds the game logic of a Pac-Man style arcade game. It has no display.

It models:

- the 28 × 31 maze,
- Pac-Man's movement and animation,
- four ghosts, each with its own way of choosing a target,
- pellets, power pellets and a bonus cherry,
- scoring and lives,
- a simple AI that seeks pellets.

Each piece reports its position and the sprite-sheet cell to draw. Sprite-sheet cells are `GridPosition` values.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Driving a game

`pacgame.game_state.GameState` holds everything in play. Set the input, then advance the simulation with a time step given in milliseconds:

```python
from pacgame.game_state import GameState

state = GameState()
state.input_state.left = True     # or enable_ai = True to let the AI steer

for _ in range(600):              # about ten seconds at 16 ms per step
    state.step(16)

print(state.score.points, state.score.lives, state.score.eaten_pellets)
print(state.pacman.position(), state.blinky.position())
```

### What a step does

On each `step`, the game does the following, in order:

1. The AI updates its suggestion.
2. Pac-Man moves. He follows the AI's suggestion when `input_state.enable_ai` is set. Otherwise he follows `input_state.direction()`, where the priority is up, then down, then left, then right.
3. If Pac-Man is dying, the death animation advances and the step ends there.
4. If Pac-Man has no direction yet, the step ends there.
5. Blinky, Pinky and Inky get new targets and move.
6. The fruit updates.
7. Collisions with each ghost are checked.
8. Pellets, power pellets and the fruit under Pac-Man are eaten.

### Scoring

| Item | Points |
|---|---|
| Pellet | 10 |
| Power pellet | 50 |
| Frightened ghost | 200 |
| Cherry | 100 |

A power pellet frightens the ghosts. A frightened ghost stays frightened for six seconds.

When a ghost that is not frightened catches Pac-Man, he loses a life. After a death animation of a little over one second, Pac-Man, the ghosts and the AI return to their starting state.

## The modules

### `pacgame.board`

The fixed maze, and questions about it:

- `is_walkable_for_pacman`
- `is_walkable_for_ghost`
- `is_in_pen`
- `is_portal`
- `is_intersection`
- `teleport`

It also has:

- `initial_pellet_positions` and `initial_super_pellet_positions`, which return 240 pellets and 4 power pellets;
- `pen_door_position`;
- `initial_pacman_position`.

### `pacgame.position`

- `Position` is a continuous point. Two positions compare equal when they are within machine epsilon of each other.
- `GridPosition` is a maze cell.
- `position_to_grid_position` and `grid_position_to_position` convert between the two. `position_to_grid_position` rounds halves away from zero and raises `ValueError` for negative coordinates.
- `position_distance` gives the distance between two points.

### `pacgame.direction`

The `Direction` enum and `opposite_direction`.

### `pacgame.ghost`

`Ghost` is the abstract base class for the ghosts. A ghost:

- alternates between scatter and chase on a fixed timetable;
- can be frightened with `frighten()`;
- turns into eyes with `die()`;
- returns to its start with `reset()`;
- at each new cell, picks the neighbouring cell that is closest in a straight line to its target.

`GhostState` lists its states.

### `pacgame.ghosts`

`Blinky`, `Pinky`, `Inky` and `Clyde`, each with its own `set_target`:

- **Blinky** chases Pac-Man directly.
- **Pinky** aims four cells ahead of him.
- **Inky** aims past Pac-Man along the line from Blinky.
- **Clyde** chases only when more than eight cells away.

`GameState` uses Blinky, Pinky and Inky. Clyde is available but not part of a game.

### `pacgame.pacman` and `pacgame.pacman_animation`

- `PacMan` handles Pac-Man's movement, his death and his reset.
- `PacManAnimation` handles the mouth and death animation frames.

### `pacgame.pellets`

`Pellets` and `SuperPellets`. Each has `all_pellets`, `is_pellet` and `eat_pellet_at_position`.

### `pacgame.fruits`

`Fruits` is the cherry. It appears after 70 eaten pellets and again after 170. Each time it stays for nine seconds, or until it is eaten.

### `pacgame.ai`

`PacManAI` steers towards the nearest pellet whenever Pac-Man reaches an intersection. `Move` is a candidate step with its distance to the target.

### `pacgame.atlas`

Sprite-sheet cells:

- constants for Pac-Man's frames;
- `GhostSprite`;
- `eye_sprite`, `ghost_sprite`, `initial_frightened` and `ending_frightened`.

## What this package does not do

There is no window, no drawing, no keyboard handling and no command to start a game. To play, you need your own front end. It should:

- fill in `GameState.input_state`;
- call `step` in a loop;
- draw the sprite cells that the pieces report.