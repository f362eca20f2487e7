"""
Grid transform components - cardinal directions, positions, movement capabilities.
"""

from __future__ import annotations

from enum import Enum

from arena_engine.core.component import Component, register_component


class Direction(Enum):
    """Cardinal directions, valued by their compass letter."""
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def vector(self) -> tuple[int, int]:
        """Grid step for this direction (y grows southwards)."""
        return _VECTORS[self]

    @staticmethod
    def parse(value: Direction | str) -> Direction:
        """
        Accept a Direction, a compass letter or a direction name.

        Raises:
            ValueError: If the value names no direction
        """
        if isinstance(value, Direction):
            return value
        key = value.strip().upper()
        try:
            return Direction(key)
        except ValueError:
            pass
        try:
            return Direction[key]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


_VECTORS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


@register_component
class GridPosition(Component):
    """
    Tile coordinates of an entity.

    Attributes:
        x: Column, 0 on the west edge
        y: Row, 0 on the north edge
    """
    x: int = 0
    y: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def step(self, direction: Direction) -> tuple[int, int]:
        """Coordinates one step away in a direction (not applied)."""
        dx, dy = direction.vector
        return (self.x + dx, self.y + dy)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def distance_to(self, other: GridPosition) -> float:
        """Euclidean distance to another position."""
        dx = other.x - self.x
        dy = other.y - self.y
        return (dx * dx + dy * dy) ** 0.5


@register_component
class Movable(Component):
    """Marker: the arena may change this entity's position."""


@register_component
class Flying(Component):
    """Marker: the entity can cross water."""
