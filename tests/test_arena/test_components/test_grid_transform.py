import pytest

from arena.components.transform import Direction, GridPosition


def test_direction_vectors():
    assert Direction.NORTH.vector == (0, -1)
    assert Direction.SOUTH.vector == (0, 1)
    assert Direction.EAST.vector == (1, 0)
    assert Direction.WEST.vector == (-1, 0)


def test_direction_parse():
    assert Direction.parse("N") is Direction.NORTH
    assert Direction.parse("w") is Direction.WEST
    assert Direction.parse("east") is Direction.EAST
    assert Direction.parse(Direction.SOUTH) is Direction.SOUTH

    with pytest.raises(ValueError):
        Direction.parse("NE")


def test_step_does_not_move():
    p = GridPosition(x=2, y=3)
    assert p.step(Direction.NORTH) == (2, 2)
    assert p.position == (2, 3)

    p.move_to(4, 4)
    assert p.position == (4, 4)


def test_distance():
    a = GridPosition(x=0, y=0)
    b = GridPosition(x=3, y=4)
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0
