import pytest

from pacgame.board import pen_door_position
from pacgame.direction import Direction
from pacgame.ghost import GhostState
from pacgame.ghosts import Blinky, Clyde, Inky, Pinky
from pacgame.position import GridPosition, Position, position_to_grid_position


@pytest.mark.parametrize(
    "factory, x, y",
    [(Blinky, 13.5, 11), (Inky, 13.5, 14), (Pinky, 11.5, 14), (Clyde, 15.5, 14)],
)
def test_ghosts_start_in_correct_position(factory, x, y):
    ghost = factory()
    pos = Position(x, y)
    assert ghost.position() == pos
    assert ghost.positionInGrid() if False else ghost.position_in_grid() == position_to_grid_position(pos)
    assert not ghost.is_eyes()
    assert not ghost.is_frightened()


@pytest.mark.parametrize("factory", [Blinky, Inky, Pinky, Clyde])
def test_ghosts_are_frightened(factory):
    ghost = factory()
    assert not ghost.is_frightened()
    ghost.frighten()
    assert ghost.is_frightened()
    ghost.reset()
    assert not ghost.is_frightened()


@pytest.mark.parametrize("factory", [Blinky, Inky, Pinky, Clyde])
def test_ghosts_can_die(factory):
    ghost = factory()
    assert not ghost.is_eyes()
    ghost.die()
    assert ghost.is_eyes()
    ghost.reset()
    assert not ghost.is_eyes()


@pytest.mark.parametrize("factory", [Blinky, Inky, Pinky, Clyde])
def test_speed_by_state(factory):
    ghost = factory()
    assert ghost.speed() == 0.75
    ghost.frighten()
    assert ghost.speed() == 0.5
    ghost.die()
    assert ghost.speed() == 2


def _outside(ghost, state):
    ghost.pos = Position(1, 5)
    ghost.state = state
    return ghost


def test_blinky_targets():
    blinky = Blinky()
    blinky.set_target(Position(1, 1))
    assert blinky.target == Position(1, 1)

    blinky.state = GhostState.SCATTER
    blinky.set_target(Position(1, 1))
    assert blinky.target == Position(25, -3)

    blinky.die()
    blinky.set_target(Position(1, 1))
    assert blinky.target == blinky.initial_position()


@pytest.mark.parametrize("factory", [Pinky, Inky, Clyde])
def test_ghosts_in_pen_head_for_door(factory):
    ghost = factory()
    assert ghost.is_in_pen()
    if factory is Clyde:
        ghost.set_target(Position(1, 1))
    elif factory is Pinky:
        ghost.set_target(GridPosition(1, 1), Direction.RIGHT)
    else:
        ghost.set_target(GridPosition(1, 1), Direction.RIGHT, GridPosition(1, 1))
    assert ghost.target == pen_door_position()


def test_pinky_targets():
    pinky = _outside(Pinky(), GhostState.CHASE)
    pinky.set_target(GridPosition(10, 5), Direction.RIGHT)
    assert pinky.target == Position(14, 5)
    pinky.set_target(GridPosition(10, 5), Direction.DOWN)
    assert pinky.target == Position(10, 9)
    pinky.set_target(GridPosition(10, 5), Direction.UP)
    assert pinky.target == Position(6, 1)

    pinky.state = GhostState.SCATTER
    pinky.set_target(GridPosition(10, 5), Direction.RIGHT)
    assert pinky.target == Position(3, -2)


def test_pinky_requires_moving_pacman():
    pinky = _outside(Pinky(), GhostState.CHASE)
    with pytest.raises(ValueError):
        pinky.set_target(GridPosition(10, 5), Direction.NONE)


def test_inky_targets():
    inky = _outside(Inky(), GhostState.CHASE)
    inky.set_target(GridPosition(10, 5), Direction.RIGHT, GridPosition(8, 5))
    assert inky.target == Position(14, 5)

    inky.set_target(GridPosition(10, 5), Direction.RIGHT, GridPosition(12, 5))
    assert inky.target == Position(12, 5)

    inky.state = GhostState.SCATTER
    inky.set_target(GridPosition(10, 5), Direction.RIGHT, GridPosition(8, 5))
    assert inky.target == Position(27, 30)


def test_inky_requires_moving_pacman():
    inky = _outside(Inky(), GhostState.CHASE)
    with pytest.raises(ValueError):
        inky.set_target(GridPosition(10, 5), Direction.NONE, GridPosition(8, 5))


def test_clyde_targets():
    clyde = _outside(Clyde(), GhostState.CHASE)
    clyde.set_target(Position(20, 5))
    assert clyde.target == Position(20, 5)

    clyde.set_target(Position(3, 5))
    assert clyde.target == Position(0, 30)

    clyde.state = GhostState.SCATTER
    clyde.set_target(Position(20, 5))
    assert clyde.target == Position(0, 30)

    clyde.die()
    clyde.set_target(Position(20, 5))
    assert clyde.target == clyde.initial_position()