"""Animal entity.

Animals carry a movement genome, spend energy to move and reproduce, gain
energy by eating grass, and die when their energy runs out. They do not know
about the map they live on: every move is resolved through a MoveValidator
supplied by the world.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional, Tuple

from grassland.genetics import Genome
from grassland.math_utils import MapDirection, Vector2d

if TYPE_CHECKING:
    from grassland.config import SimulationParameters
    from grassland.interfaces import MoveValidator


class Animal:
    """A genome-driven grazer.

    Attributes:
        animal_id: Stable id issued by the AnimalRegistry (None until registered)
        position: Current cell
        orientation: Facing direction
        energy: Current energy; the animal dies once it is <= 0
        genome: Inherited turn genes, read cyclically
        gene_index: Index of the gene used for the next move
        age: Days survived so far
        birth_day: Simulation day the animal was created on
        death_day: Day the animal was found dead (None while alive)
        children: Offspring produced by this animal
    """

    def __init__(
        self,
        genome: Genome,
        position: Vector2d,
        energy: int,
        *,
        orientation: MapDirection = MapDirection.NORTH,
        gene_index: int = 0,
        birth_day: int = 1,
    ) -> None:
        self.animal_id: Optional[int] = None
        self.genome = genome
        self.position = position
        self.orientation = orientation
        self.energy = energy
        self.gene_index = gene_index % len(genome)
        self.age: int = 0
        self.birth_day = birth_day
        self.death_day: Optional[int] = None
        self.children: List["Animal"] = []

    @property
    def is_alive(self) -> bool:
        return self.death_day is None

    @property
    def lifespan(self) -> int:
        """Days between birth and death, or the current age while alive."""
        if self.death_day is None:
            return self.age
        return self.death_day - self.birth_day

    def change_energy(self, delta: int) -> None:
        self.energy += delta

    def get_older(self) -> None:
        self.age += 1

    def set_death_day(self, day: int) -> None:
        self.death_day = day

    def rank_key(self) -> Tuple[int, int, int, float]:
        """Sort key for contests: energy, then age, then children, then id."""
        tie_break = self.animal_id if self.animal_id is not None else float("inf")
        return (-self.energy, -self.age, -len(self.children), tie_break)

    def move(self, validator: "MoveValidator") -> None:
        """Apply one genome-driven step.

        The animal turns by its active gene, then the validator resolves
        where that leaves it. A blocked step keeps the position but the
        validator may still change the orientation.
        """
        self.orientation = self.orientation.rotate(self.genome[self.gene_index])
        self.position, self.orientation = validator.next_position(self)
        self.gene_index = (self.gene_index + 1) % len(self.genome)

    @classmethod
    def combine(
        cls,
        parent_a: "Animal",
        parent_b: "Animal",
        parameters: "SimulationParameters",
        rng: random.Random,
        birth_day: int = 1,
    ) -> "Animal":
        """Create the child of two parents standing on the same cell.

        The child's energy equals what both parents paid to reproduce. The
        genome share of each parent is proportional to its current energy.
        The child is recorded in both parents' ``children``.
        """
        total_energy = parent_a.energy + parent_b.energy
        share_a = parent_a.energy / total_energy if total_energy > 0 else 0.5
        if share_a >= 0.5:
            dominant, recessive, share = parent_a, parent_b, share_a
        else:
            dominant, recessive, share = parent_b, parent_a, 1.0 - share_a

        genome = Genome.from_parents(
            dominant.genome,
            recessive.genome,
            share,
            rng,
            parameters.min_mutations,
            parameters.max_mutations,
        )
        child = cls(
            genome,
            parent_a.position,
            2 * parameters.energy.energy_to_reproduce,
            orientation=MapDirection(rng.randrange(8)),
            gene_index=rng.randrange(len(genome)),
            birth_day=birth_day,
        )
        parent_a.children.append(child)
        parent_b.children.append(child)
        return child

    def __repr__(self) -> str:
        return (
            f"Animal(id={self.animal_id}, position={self.position}, "
            f"energy={self.energy}, genome={self.genome})"
        )

    def __str__(self) -> str:
        return str(self.orientation)
