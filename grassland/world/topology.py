"""Map topologies: how an animal's step is resolved at the map edge.

The world only answers whether a forward step stays in bounds; the topology
decides what happens otherwise. Topologies are injected into the GridWorld.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Tuple, Type

from grassland.exceptions import ConfigurationError
from grassland.math_utils import MapDirection, Vector2d

if TYPE_CHECKING:
    from grassland.entities.animal import Animal
    from grassland.world.grid_world import GridWorld


class MapTopology(ABC):
    """Strategy resolving an animal's next (position, orientation)."""

    name: str = ""

    @abstractmethod
    def next_position(self, animal: "Animal", world: "GridWorld") -> Tuple[Vector2d, MapDirection]:
        """Resolve the step the animal attempts along its current orientation."""


class BoundedTopology(MapTopology):
    """All four edges are walls: a blocked animal stays put and turns around."""

    name = "bounded"

    def next_position(self, animal: "Animal", world: "GridWorld") -> Tuple[Vector2d, MapDirection]:
        if world.can_move(animal):
            return animal.position + animal.orientation.to_unit_vector(), animal.orientation
        return animal.position, animal.orientation.opposite()


class GlobeTopology(MapTopology):
    """East and west edges wrap around; the poles turn animals back."""

    name = "globe"

    def next_position(self, animal: "Animal", world: "GridWorld") -> Tuple[Vector2d, MapDirection]:
        if world.can_move(animal):
            return animal.position + animal.orientation.to_unit_vector(), animal.orientation

        bounds = world.boundary
        forward = animal.position + animal.orientation.to_unit_vector()
        if not bounds.lower_left.y <= forward.y <= bounds.upper_right.y:
            return animal.position, animal.orientation.opposite()

        wrapped_x = bounds.lower_left.x + (forward.x - bounds.lower_left.x) % bounds.width
        return Vector2d(wrapped_x, forward.y), animal.orientation


_TOPOLOGIES: Dict[str, Type[MapTopology]] = {
    BoundedTopology.name: BoundedTopology,
    GlobeTopology.name: GlobeTopology,
}


def create_topology(name: str) -> MapTopology:
    """Build the topology registered under ``name``."""
    try:
        return _TOPOLOGIES[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown topology {name!r}, expected one of {sorted(_TOPOLOGIES)}"
        ) from None
