"""Population statistics.

Statistics are recomputed from scratch every day rather than updated
incrementally, so they cannot drift from the rosters they describe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from grassland.entities.animal import Animal
from grassland.genetics import Genome


@dataclass(frozen=True)
class SimulationStats:
    """Snapshot of population statistics after a day.

    Attributes:
        day: Day counter at the time of computation
        alive_count: Animals alive
        dead_count: Animals that have died so far
        grass_count: Grass tufts on the map
        empty_positions: Grass-free cells
        average_energy: Mean energy of live animals (0 if none)
        average_lifespan: Mean lifespan of dead animals (0 if none)
        average_children: Mean children count of live animals (0 if none)
        most_popular_genome: Genome carried by the most animals ever (None if no animals)
        most_popular_genome_count: How many animals ever carried it
    """

    day: int = 1
    alive_count: int = 0
    dead_count: int = 0
    grass_count: int = 0
    empty_positions: int = 0
    average_energy: float = 0.0
    average_lifespan: float = 0.0
    average_children: float = 0.0
    most_popular_genome: Optional[Genome] = None
    most_popular_genome_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "alive_count": self.alive_count,
            "dead_count": self.dead_count,
            "grass_count": self.grass_count,
            "empty_positions": self.empty_positions,
            "average_energy": self.average_energy,
            "average_lifespan": self.average_lifespan,
            "average_children": self.average_children,
            "most_popular_genome": str(self.most_popular_genome) if self.most_popular_genome else None,
            "most_popular_genome_count": self.most_popular_genome_count,
        }


def find_most_popular_genome(
    genome_index: Mapping[Genome, Sequence[int]],
) -> Optional[Tuple[Genome, int]]:
    """Genome with the most associated animals; ties go to the first seen."""
    best: Optional[Tuple[Genome, int]] = None
    for genome, animal_ids in genome_index.items():
        if best is None or len(animal_ids) > best[1]:
            best = (genome, len(animal_ids))
    return best


def _mean(values: List[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_stats(
    day: int,
    alive: Sequence[Animal],
    dead: Sequence[Animal],
    genome_index: Mapping[Genome, Sequence[int]],
    grass_count: int,
    empty_positions: int,
) -> SimulationStats:
    """Compute a full statistics snapshot."""
    popular = find_most_popular_genome(genome_index)
    return SimulationStats(
        day=day,
        alive_count=len(alive),
        dead_count=len(dead),
        grass_count=grass_count,
        empty_positions=empty_positions,
        average_energy=_mean([animal.energy for animal in alive]),
        average_lifespan=_mean([animal.lifespan for animal in dead]),
        average_children=_mean([len(animal.children) for animal in alive]),
        most_popular_genome=popular[0] if popular else None,
        most_popular_genome_count=popular[1] if popular else 0,
    )
