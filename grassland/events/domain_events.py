"""Domain event definitions.

Events are frozen dataclasses describing something that already happened
during a day. They carry plain values so handlers never need to reach back
into the simulation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from grassland.genetics import Genome
from grassland.math_utils import Vector2d


@dataclass(frozen=True)
class AnimalDiedEvent:
    """An animal was found without energy during the death sweep.

    Attributes:
        animal_id: ID of the dead animal
        position: Cell it died on
        lifespan: Days between birth and death
        children: Number of children it produced
        day: Simulation day of death
    """

    animal_id: int
    position: Vector2d
    lifespan: int
    children: int
    day: int


@dataclass(frozen=True)
class AnimalBornEvent:
    """Two parents produced a child.

    Attributes:
        animal_id: ID of the child
        parent_ids: IDs of the (stronger, weaker) parents
        position: Cell the child was born on
        genome: The child's genome
        energy: The child's starting energy
        day: Simulation day of birth
    """

    animal_id: int
    parent_ids: Tuple[int, int]
    position: Vector2d
    genome: Genome
    energy: int
    day: int


@dataclass(frozen=True)
class GrassGrownEvent:
    """Daily growth finished.

    Attributes:
        requested: Tufts asked for
        grown: Tufts actually placed (lower when the map is full)
        on_equator: How many of them landed on the equator band
        day: Simulation day
    """

    requested: int
    grown: int
    on_equator: int
    day: int


@dataclass(frozen=True)
class MapChangedEvent:
    """A day finished and the map is ready to be observed.

    Attributes:
        message: Day marker, e.g. ``"Day 3"``
        day: The day that was just simulated
    """

    message: str
    day: int
