import pytest

from mission.entities.grid import Grid
from mission.utils.errors import InvalidGrid
from mission.utils.types import Position


@pytest.mark.parametrize("width,height", [(0, 4), (5, 0), (-1, 3), (0, 0)])
def test_grid_rejects_non_positive_size(width, height):
    with pytest.raises(InvalidGrid):
        Grid(width, height)


@pytest.mark.parametrize("width,height", [(1, 1), (5, 4), (3, 7)])
def test_wrap_lands_inside_grid_and_is_idempotent(width, height):
    grid = Grid(width, height)
    for x in range(-2 * width - 1, 2 * width + 2):
        for y in range(-2 * height - 1, 2 * height + 2):
            wrapped = grid.wrap(Position(x, y))
            assert 0 <= wrapped.x < width
            assert 0 <= wrapped.y < height
            assert grid.wrap(wrapped) == wrapped


def test_wrap_negative_coordinates_use_floored_modulo():
    grid = Grid(5, 4)
    assert grid.wrap(Position(-1, -1)) == Position(4, 3)
    assert grid.wrap(Position(5, 4)) == Position(0, 0)
    assert grid.wrap(Position(-6, 9)) == Position(4, 1)


def test_is_blocked(grid):
    assert grid.is_blocked(Position(2, 0))
    assert grid.is_blocked(Position(3, 2))
    assert not grid.is_blocked(Position(1, 0))


def test_grid_is_immutable(grid):
    with pytest.raises(AttributeError):
        grid.width = 10
    assert isinstance(grid.obstacles, frozenset)


def test_grid_equality():
    a = Grid(5, 4, [Position(2, 0)])
    b = Grid(5, 4, (Position(2, 0),))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Grid(5, 4)
