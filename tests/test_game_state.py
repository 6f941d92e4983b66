import pytest

from pacgame.board import initial_pacman_position
from pacgame.direction import Direction
from pacgame.game_state import (
    DEFAULT_LIVES,
    GHOST_POINTS,
    NORMAL_PELLET_POINTS,
    POWER_PELLET_POINTS,
    GameState,
    InputState,
    Score,
)
from pacgame.position import GridPosition, Position


@pytest.fixture
def state():
    return GameState()


def test_score_defaults():
    score = Score()
    assert score.lives == DEFAULT_LIVES
    assert score.points == 0
    assert score.eaten_pellets == 0
    assert score.eaten_fruits == 0


@pytest.mark.parametrize(
    "flags, expected",
    [
        ({}, Direction.NONE),
        ({"up": True, "down": True, "left": True, "right": True}, Direction.UP),
        ({"down": True, "left": True, "right": True}, Direction.DOWN),
        ({"left": True, "right": True}, Direction.LEFT),
        ({"right": True}, Direction.RIGHT),
    ],
)
def test_input_direction_priority(flags, expected):
    assert InputState(**flags).direction() is expected


def test_step_without_input_keeps_everything_still(state):
    blinky_before = state.blinky.position()
    state.step(16)
    assert not state.pacman.has_direction()
    assert state.pacman.position() == initial_pacman_position()
    assert state.blinky.position() == blinky_before


def test_step_with_input_moves_pacman_right(state):
    state.input_state.right = True
    state.step(16)
    assert state.pacman.current_direction() is Direction.RIGHT
    assert state.pacman.position().x > initial_pacman_position().x


def test_step_with_ai_follows_suggestion(state):
    state.input_state.enable_ai = True
    state.step(16)
    assert state.pacman.current_direction() is state.pacman_ai.suggested_direction()
    assert state.pacman.has_direction()


def test_kill_pacman_takes_a_life(state):
    state.kill_pacman()
    assert state.score.lives == DEFAULT_LIVES - 1
    assert state.is_pacman_dying()
    assert state.pacman.dead


def test_death_animation_resets_after_a_second(state):
    state.pacman.pos = Position(14, 23)
    state.kill_pacman()
    state.handle_death_animation(500)
    assert state.is_pacman_dying()
    state.handle_death_animation(500)
    assert not state.is_pacman_dying()
    assert not state.pacman.dead
    assert state.pacman.position() == initial_pacman_position()
    assert state.blinky.position() == state.blinky.initial_position()


def test_step_while_dying_does_not_eat(state):
    state.pacman.pos = Position(1, 1)
    state.kill_pacman()
    state.step(16)
    assert state.score.points == 0
    assert state.pellets.is_pellet(GridPosition(1, 1))


def test_collision_with_frightened_ghost_scores(state):
    state.blinky.pos = state.pacman.position()
    state.blinky.frighten()
    state.check_collision(state.blinky)
    assert state.blinky.is_eyes()
    assert state.score.points == GHOST_POINTS
    assert state.score.lives == DEFAULT_LIVES


def test_collision_with_normal_ghost_kills_pacman(state):
    state.pinky.pos = state.pacman.position()
    state.check_collision(state.pinky)
    assert state.score.lives == DEFAULT_LIVES - 1
    assert state.is_pacman_dying()


def test_collision_ignored_for_eyes(state):
    state.inky.pos = state.pacman.position()
    state.inky.die()
    state.check_collision(state.inky)
    assert state.score.lives == DEFAULT_LIVES
    assert not state.is_pacman_dying()


def test_no_collision_on_different_cells(state):
    state.check_collision(state.blinky)
    assert state.score.lives == DEFAULT_LIVES
    assert state.score.points == 0


def test_eat_normal_pellet(state):
    count = len(state.pellets.all_pellets())
    state.pacman.pos = Position(1, 1)
    state.eat_pellets()
    assert state.score.points == NORMAL_PELLET_POINTS
    assert state.score.eaten_pellets == 1
    assert len(state.pellets.all_pellets()) == count - 1
    state.eat_pellets()
    assert state.score.points == NORMAL_PELLET_POINTS


def test_eat_power_pellet_frightens_ghosts(state):
    state.pacman.pos = Position(1, 3)
    state.eat_pellets()
    assert state.score.points == POWER_PELLET_POINTS
    assert state.score.eaten_pellets == 1
    assert all(g.is_frightened() for g in (state.blinky, state.pinky, state.inky))


def test_eat_visible_fruit(state):
    state.fruit.update(1, 70)
    state.pacman.pos = state.fruit.position()
    state.eat_fruit()
    assert state.score.points == state.fruit.value()
    assert state.score.eaten_fruits == 1
    assert not state.fruit.is_visible()


def test_hidden_fruit_not_eaten(state):
    state.pacman.pos = state.fruit.position()
    state.eat_fruit()
    assert state.score.points == 0
    assert state.score.eaten_fruits == 0