"""Protocol interfaces shared between the world, entities and observers.

Using protocols keeps entities independent of the concrete world class: an
animal only needs something that can resolve its next move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, Tuple, runtime_checkable

from grassland.math_utils import MapDirection, Vector2d

if TYPE_CHECKING:
    from grassland.entities.animal import Animal
    from grassland.world.grid_world import GridWorld


@runtime_checkable
class MoveValidator(Protocol):
    """Anything that decides whether and where an animal may step."""

    def can_move(self, animal: "Animal") -> bool:
        """Whether the forward step along the animal's orientation is valid."""
        ...

    def next_position(self, animal: "Animal") -> Tuple[Vector2d, MapDirection]:
        """Resolve the animal's next position and orientation."""
        ...


# Observers receive the world and a day marker once per tick.
MapChangeListener = Callable[["GridWorld", str], None]
