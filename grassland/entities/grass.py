"""Grass: the renewable food resource."""

from __future__ import annotations

from dataclasses import dataclass

from grassland.boundary import Boundary
from grassland.math_utils import Vector2d


@dataclass(frozen=True, eq=False)
class Grass:
    """A grass tuft at a fixed position.

    Identity matters: the world stores one specific Grass per cell, so two
    tufts at the same position are distinct objects.

    Attributes:
        position: Cell the grass grows on
        energy: Nutritional marker value (0 means a plain food marker)
    """

    position: Vector2d
    energy: int = 0

    def is_on(self, region: Boundary) -> bool:
        return region.contains(self.position)

    def is_at(self, position: Vector2d) -> bool:
        return self.position == position

    def __str__(self) -> str:
        return "*"
