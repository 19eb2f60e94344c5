"""The spatial side of the simulation: grid world and map topologies."""

from grassland.world.grid_world import GridWorld, compute_equator
from grassland.world.topology import (
    BoundedTopology,
    GlobeTopology,
    MapTopology,
    create_topology,
)

__all__ = [
    "BoundedTopology",
    "GlobeTopology",
    "GridWorld",
    "MapTopology",
    "compute_equator",
    "create_topology",
]
