"""DayContext - explicit per-day state for pipeline steps.

A DayContext is created at the start of each day and passed through all
pipeline steps, so what one step produced is visible to later steps (and to
the caller of ``Simulation.tick``) without hidden attributes on the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from grassland.entities.animal import Animal
from grassland.entities.grass import Grass


@dataclass
class DayContext:
    """What happened during one simulated day.

    Attributes:
        day: The day being simulated
        died: Animals removed by the death sweep
        born: Children created during reproduction
        grass_eaten: Number of grass tufts eaten
        grown: Grass tufts grown at the end of the day
    """

    day: int
    died: List[Animal] = field(default_factory=list)
    born: List[Animal] = field(default_factory=list)
    grass_eaten: int = 0
    grown: List[Grass] = field(default_factory=list)
