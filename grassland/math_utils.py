"""Integer grid geometry for the simulation.

This module provides the immutable Vector2d position type and the
MapDirection compass used for animal orientation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Vector2d:
    """An immutable integer 2D vector, used both as position and offset."""

    x: int
    y: int

    def __add__(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(self.x - other.x, self.y - other.y)

    def add(self, other: "Vector2d") -> "Vector2d":
        """Return this position offset by ``other`` (no bounds checking)."""
        return self + other

    def precedes(self, other: "Vector2d") -> bool:
        """Componentwise ``<=``."""
        return self.x <= other.x and self.y <= other.y

    def follows(self, other: "Vector2d") -> bool:
        """Componentwise ``>=``."""
        return self.x >= other.x and self.y >= other.y

    def upper_right(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(max(self.x, other.x), max(self.y, other.y))

    def lower_left(self, other: "Vector2d") -> "Vector2d":
        return Vector2d(min(self.x, other.x), min(self.y, other.y))

    def opposite(self) -> "Vector2d":
        return Vector2d(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class MapDirection(Enum):
    """The eight compass orientations, clockwise from north."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    def rotate(self, steps: int) -> "MapDirection":
        """Turn clockwise by ``steps`` eighths of a full turn."""
        return MapDirection((self.value + steps) % 8)

    def opposite(self) -> "MapDirection":
        return self.rotate(4)

    def to_unit_vector(self) -> Vector2d:
        return _UNIT_VECTORS[self]

    def __str__(self) -> str:
        return _ARROWS[self]


_UNIT_VECTORS = {
    MapDirection.NORTH: Vector2d(0, 1),
    MapDirection.NORTH_EAST: Vector2d(1, 1),
    MapDirection.EAST: Vector2d(1, 0),
    MapDirection.SOUTH_EAST: Vector2d(1, -1),
    MapDirection.SOUTH: Vector2d(0, -1),
    MapDirection.SOUTH_WEST: Vector2d(-1, -1),
    MapDirection.WEST: Vector2d(-1, 0),
    MapDirection.NORTH_WEST: Vector2d(-1, 1),
}

_ARROWS = {
    MapDirection.NORTH: "N",
    MapDirection.NORTH_EAST: "NE",
    MapDirection.EAST: "E",
    MapDirection.SOUTH_EAST: "SE",
    MapDirection.SOUTH: "S",
    MapDirection.SOUTH_WEST: "SW",
    MapDirection.WEST: "W",
    MapDirection.NORTH_WEST: "NW",
}


__all__ = ["MapDirection", "Vector2d"]
