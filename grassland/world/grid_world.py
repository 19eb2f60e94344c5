"""Grid world: the single source of truth for spatial occupancy.

The GridWorld tracks which animals stand on every cell, which cells carry
grass, and which grass-free cells lie on or off the equator band. All other
components mutate spatial state only through the operations below.

Invariants maintained by every operation:
- Every map cell has an occupant list (possibly empty) from construction on.
- A cell holds grass iff it is in neither empty set; the two empty sets are
  disjoint and their union is exactly the grass-free cells.
- An animal id is listed on exactly one cell while the animal is placed.

Calling an operation with an animal or grass that is not where the caller
claims is a programming error and raises OccupancyError. Nothing in the core
catches it: the bookkeeping would be corrupted past repair.
"""

from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional, Tuple, Union

from grassland.boundary import Boundary
from grassland.config import EnergyParameters
from grassland.entities.animal import Animal
from grassland.entities.grass import Grass
from grassland.entities.registry import AnimalRegistry
from grassland.exceptions import OccupancyError
from grassland.math_utils import MapDirection, Vector2d
from grassland.random_positions import RandomPositionSampler
from grassland.world.topology import BoundedTopology, MapTopology

logger = logging.getLogger(__name__)


def compute_equator(boundary: Boundary) -> Optional[Boundary]:
    """Return the central horizontal band favoured by grass growth.

    With ``h`` the map height, the band spans rows
    ``h//2 - h//5 - 1`` (one lower for even ``h``) to ``h//2 + h//5 - 1``,
    relative to the bottom row and clamped to the map. Returns None when
    the map is too short for a band.
    """
    height = boundary.height
    low = height // 2 - height // 5 - 1
    if height % 2 == 0:
        low -= 1
    high = height // 2 + height // 5 - 1

    low = max(low, 0)
    high = min(high, height - 1)
    if low > high:
        return None

    bottom = boundary.lower_left.y
    return Boundary(
        Vector2d(boundary.lower_left.x, bottom + low),
        Vector2d(boundary.upper_right.x, bottom + high),
    )


class GridWorld:
    """Bounded 2D grid of cells holding animals and grass.

    Attributes:
        boundary: Map bounds (inclusive)
        energy_parameters: Energy economy used for moving, eating, mating
        topology: Edge behaviour for moves
        sampler: Random position source for grass growth
        registry: Arena resolving animal ids
        equator: Equator band, or None on maps too short to have one
        map_id: Identifier shown by observers
    """

    def __init__(
        self,
        boundary: Boundary,
        energy_parameters: Optional[EnergyParameters] = None,
        *,
        topology: Optional[MapTopology] = None,
        sampler: Optional[RandomPositionSampler] = None,
        registry: Optional[AnimalRegistry] = None,
        map_id: Optional[str] = None,
    ) -> None:
        self.boundary = boundary
        self.energy_parameters = energy_parameters or EnergyParameters()
        self.topology = topology or BoundedTopology()
        self.sampler = sampler or RandomPositionSampler()
        self.registry = registry or AnimalRegistry()
        self.map_id = map_id or uuid.uuid4().hex[:8]
        self.equator = compute_equator(boundary)

        self._occupants: Dict[Vector2d, List[int]] = {
            position: [] for position in boundary.iter_positions()
        }
        self._grasses: Dict[Vector2d, Grass] = {}

        # dicts used as insertion-ordered sets so sampling stays reproducible
        self._empty_on_equator: Dict[Vector2d, None] = {}
        self._empty_off_equator: Dict[Vector2d, None] = {}
        for position in self._occupants:
            self._empty_set_for(position)[position] = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_on_equator(self, position: Vector2d) -> bool:
        return self.equator is not None and self.equator.contains(position)

    def animals_at(self, position: Vector2d) -> List[Animal]:
        """Live occupants of a cell (empty list for empty or off-map cells)."""
        return self.registry.resolve(self._occupants.get(position, ()))

    def k_winners(self, position: Vector2d, k: int) -> List[Animal]:
        """Up to ``k`` occupants of a cell, strongest first.

        Ranking is Animal.rank_key: energy, age, children, then id.
        """
        if k <= 0:
            return []
        return sorted(self.animals_at(position), key=Animal.rank_key)[:k]

    def grass_at(self, position: Vector2d) -> Optional[Grass]:
        return self._grasses.get(position)

    @property
    def grasses(self) -> List[Grass]:
        """Snapshot of all grass currently on the map."""
        return list(self._grasses.values())

    def animals(self) -> List[Animal]:
        """All placed animals in row-major cell order."""
        return [
            animal
            for animal_ids in self._occupants.values()
            for animal in self.registry.resolve(animal_ids)
        ]

    def elements(self) -> List[Union[Grass, Animal]]:
        """Grass followed by animals, for renderers."""
        return [*self.grasses, *self.animals()]

    def count_grass(self) -> int:
        return len(self._grasses)

    def empty_positions(self) -> List[Vector2d]:
        """Grass-free cells, equator cells first."""
        return [*self._empty_on_equator, *self._empty_off_equator]

    def empty_equator_positions(self) -> List[Vector2d]:
        return list(self._empty_on_equator)

    def empty_non_equator_positions(self) -> List[Vector2d]:
        return list(self._empty_off_equator)

    # ------------------------------------------------------------------
    # Move validation
    # ------------------------------------------------------------------

    def can_move(self, animal: Animal) -> bool:
        """Whether the forward step stays inside the map (no wraparound)."""
        return self.boundary.contains(animal.position + animal.orientation.to_unit_vector())

    def next_position(self, animal: Animal) -> Tuple[Vector2d, MapDirection]:
        return self.topology.next_position(animal, self)

    # ------------------------------------------------------------------
    # Grass
    # ------------------------------------------------------------------

    def place_grass(self, grass: Grass) -> None:
        position = grass.position
        if position not in self._occupants:
            raise OccupancyError(f"Cannot place grass outside the map at {position}")
        if position in self._grasses:
            raise OccupancyError(f"Cell {position} already has grass")
        self._grasses[position] = grass
        del self._empty_set_for(position)[position]

    def remove_grass(self, grass: Grass) -> None:
        position = grass.position
        if self._grasses.get(position) is not grass:
            raise OccupancyError(f"Grass {grass!r} is not on the map at {position}")
        del self._grasses[position]
        self._empty_set_for(position)[position] = None

    def eat_grass(self, grass: Grass) -> Optional[Animal]:
        """Feed ``grass`` to the strongest occupant of its cell.

        Returns:
            The animal that ate, or None when the cell is unoccupied
        """
        if self._grasses.get(grass.position) is not grass:
            raise OccupancyError(f"Grass {grass!r} is not on the map at {grass.position}")
        winners = self.k_winners(grass.position, 1)
        if not winners:
            return None
        eater = winners[0]
        eater.change_energy(self.energy_parameters.energy_from_eating)
        self.remove_grass(grass)
        return eater

    def grow_grass(self, amount: int) -> List[Grass]:
        """Grow up to ``amount`` grass tufts, filling equator cells first.

        As many distinct equator cells as possible are drawn; any shortfall
        comes from the rest of the map. Fewer tufts grow when the map is
        full.
        """
        on_equator = self.sampler.sample_without_repetition(self._empty_on_equator, amount)
        off_equator = self.sampler.sample_without_repetition(
            self._empty_off_equator, amount - len(on_equator)
        )

        grown = []
        for position in on_equator + off_equator:
            grass = Grass(position)
            self.place_grass(grass)
            grown.append(grass)

        if len(grown) < amount:
            logger.debug("Grew %d of %d requested grass, map is full", len(grown), amount)
        return grown

    # ------------------------------------------------------------------
    # Animals
    # ------------------------------------------------------------------

    def place_animal(self, animal: Animal) -> None:
        """List ``animal`` on its current cell, registering it if needed."""
        cell = self._occupants.get(animal.position)
        if cell is None:
            raise OccupancyError(f"Cannot place animal outside the map at {animal.position}")
        animal_id = self.registry.register(animal)
        if animal_id in cell:
            raise OccupancyError(f"Animal #{animal_id} is already placed at {animal.position}")
        cell.append(animal_id)

    def remove_animal(self, animal: Animal) -> None:
        self._cell_of(animal).remove(animal.animal_id)

    def move(self, animal: Animal) -> None:
        """Move ``animal`` one step and charge the move cost.

        The id is relocated from the old cell to the new one in a single
        step, so the animal is never listed on zero or two cells. A topology
        that resolves the step off the map leaves the animal untouched and
        raises OccupancyError.
        """
        old_cell = self._cell_of(animal)
        before = (animal.position, animal.orientation, animal.gene_index)
        animal.move(self)
        new_cell = self._occupants.get(animal.position)
        if new_cell is None:
            target = animal.position
            animal.position, animal.orientation, animal.gene_index = before
            raise OccupancyError(
                f"Topology {self.topology.name!r} moved animal #{animal.animal_id} "
                f"off the map to {target}"
            )
        old_cell.remove(animal.animal_id)
        new_cell.append(animal.animal_id)
        animal.change_energy(-self.energy_parameters.energy_to_move)

    def reproduce(self, position: Vector2d) -> Optional[Tuple[Animal, Animal]]:
        """Charge the two strongest occupants of a cell for mating.

        Mating happens when at least two animals share the cell and the
        weaker of the top two has at least ``energy_to_full``. Both pay
        ``energy_to_reproduce``. Building the child is up to the caller.

        Returns:
            The (stronger, weaker) parent pair, or None when nobody mates
        """
        parents = self.k_winners(position, 2)
        if len(parents) < 2:
            return None
        if parents[1].energy < self.energy_parameters.energy_to_full:
            return None
        cost = self.energy_parameters.energy_to_reproduce
        parents[0].change_energy(-cost)
        parents[1].change_energy(-cost)
        return parents[0], parents[1]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cell_of(self, animal: Animal) -> List[int]:
        cell = self._occupants.get(animal.position)
        if cell is None or animal.animal_id is None or animal.animal_id not in cell:
            raise OccupancyError(
                f"Animal #{animal.animal_id} is not placed at {animal.position}"
            )
        return cell

    def _empty_set_for(self, position: Vector2d) -> Dict[Vector2d, None]:
        if self.is_on_equator(position):
            return self._empty_on_equator
        return self._empty_off_equator
