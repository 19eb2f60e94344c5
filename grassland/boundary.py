"""Axis-aligned rectangular regions on the grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from grassland.math_utils import Vector2d


@dataclass(frozen=True)
class Boundary:
    """An inclusive rectangle spanned by two corners.

    Attributes:
        lower_left: Corner with the smallest x and y
        upper_right: Corner with the largest x and y
    """

    lower_left: Vector2d
    upper_right: Vector2d

    def __post_init__(self) -> None:
        if not self.lower_left.precedes(self.upper_right):
            raise ValueError(
                f"lower_left {self.lower_left} must precede upper_right {self.upper_right}"
            )

    @classmethod
    def of_size(cls, width: int, height: int) -> "Boundary":
        """Boundary anchored at (0, 0) covering ``width`` x ``height`` cells."""
        return cls(Vector2d(0, 0), Vector2d(width - 1, height - 1))

    @property
    def width(self) -> int:
        return self.upper_right.x - self.lower_left.x + 1

    @property
    def height(self) -> int:
        return self.upper_right.y - self.lower_left.y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, position: Vector2d) -> bool:
        return position.follows(self.lower_left) and position.precedes(self.upper_right)

    def __contains__(self, position: object) -> bool:
        return isinstance(position, Vector2d) and self.contains(position)

    def iter_positions(self) -> Iterator[Vector2d]:
        """Yield contained positions row by row (y ascending, then x)."""
        for y in range(self.lower_left.y, self.upper_right.y + 1):
            for x in range(self.lower_left.x, self.upper_right.x + 1):
                yield Vector2d(x, y)

    def all_positions(self) -> List[Vector2d]:
        """All contained positions in row-major scan order."""
        return list(self.iter_positions())

    def __str__(self) -> str:
        return f"{self.lower_left}-{self.upper_right}"
