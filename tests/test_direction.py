import pytest

from pacgame.direction import Direction, opposite_direction


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_an_involution(direction):
    assert opposite_direction(opposite_direction(direction)) == direction


def test_none_has_no_opposite():
    assert opposite_direction(Direction.NONE) is Direction.NONE


def test_horizontal_pair():
    assert opposite_direction(Direction.LEFT) is Direction.RIGHT
    assert opposite_direction(Direction.RIGHT) is Direction.LEFT


def test_vertical_pair():
    assert opposite_direction(Direction.UP) is Direction.DOWN
    assert opposite_direction(Direction.DOWN) is Direction.UP


@pytest.mark.parametrize(
    "direction", [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]
)
def test_moving_directions_never_map_to_themselves_or_none(direction):
    result = opposite_direction(direction)
    assert result not in (direction, Direction.NONE)