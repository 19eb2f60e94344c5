"""Grassland: a grid-world grazing simulation.

Animals with movement genomes roam a bounded grid, eat grass that grows
preferentially around the equator, reproduce when well fed and die when
their energy runs out. Key modules:

- math_utils / boundary: integer positions, directions and regions
- world: GridWorld occupancy engine and map topologies
- entities: Animal, Grass and the AnimalRegistry arena
- genetics: movement genomes and crossover
- simulation: daily pipeline, statistics and real-time runner
- events: EventBus and domain events
- observers / rendering: console and pygame views

This module exposes a small public API via ``__all__``.
"""

from grassland.boundary import Boundary
from grassland.config import EnergyParameters, SimulationParameters
from grassland.math_utils import MapDirection, Vector2d
from grassland.simulation import Simulation, SimulationRunner
from grassland.world import GridWorld

__version__ = "0.1.0"

__all__ = [
    "Boundary",
    "EnergyParameters",
    "GridWorld",
    "MapDirection",
    "Simulation",
    "SimulationParameters",
    "SimulationRunner",
    "Vector2d",
]
