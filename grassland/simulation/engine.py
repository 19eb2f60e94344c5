"""Simulation engine - the daily tick orchestrator.

The Simulation owns the day counter, the alive/dead rosters, the genome
index and the statistics. It is the only caller of the GridWorld's mutating
operations and never keeps spatial state itself.

Design notes:
- Rosters and the genome index hold animal ids; the GridWorld's registry
  resolves them.
- ``tick()`` runs exactly one day. Real-time pacing is the job of
  SimulationRunner, so tests and renderers can drive days directly.
- Reproduction has a single path: GridWorld.reproduce() checks and charges
  the parents, the Simulation builds and places the child.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, List, Optional

from grassland.config import SimulationParameters
from grassland.entities.animal import Animal
from grassland.entities.grass import Grass
from grassland.exceptions import ConfigurationError
from grassland.events import (
    AnimalBornEvent,
    AnimalDiedEvent,
    EventBus,
    GrassGrownEvent,
    MapChangedEvent,
)
from grassland.genetics import Genome
from grassland.interfaces import MapChangeListener
from grassland.math_utils import MapDirection, Vector2d
from grassland.random_positions import RandomPositionSampler
from grassland.simulation.day_context import DayContext
from grassland.simulation.pipeline import DayPipeline, default_pipeline
from grassland.simulation.statistics import SimulationStats, compute_stats
from grassland.world import GridWorld, create_topology

logger = logging.getLogger(__name__)


class Simulation:
    """A population of animals grazing on a GridWorld, one day at a time.

    Attributes:
        parameters: Simulation parameters
        world: The grid world
        event_bus: Synchronous bus for domain events
        pipeline: Ordered daily steps
        day_counter: The next day to simulate (starts at 1)
        stats: Statistics after the last completed day
    """

    def __init__(
        self,
        parameters: Optional[SimulationParameters] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        world: Optional[GridWorld] = None,
        pipeline: Optional[DayPipeline] = None,
    ) -> None:
        """Build the world and seed the initial population and grass.

        Args:
            parameters: Simulation parameters (defaults if None)
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided)
            world: Prebuilt world matching the parameters; it is switched to
                the simulation's sampler so growth follows ``rng``/``seed``
            pipeline: Custom daily pipeline (default order if None)
        """
        self.parameters = parameters or SimulationParameters()
        self.parameters.validate()

        if rng is not None:
            self.rng = rng
        else:
            self.rng = random.Random(seed)
        self.sampler = RandomPositionSampler(self.rng)

        if world is None:
            world = GridWorld(
                self.parameters.boundary,
                self.parameters.energy,
                topology=create_topology(self.parameters.topology),
                sampler=self.sampler,
            )
        else:
            self._check_world(world)
            world.sampler = self.sampler
        self.world = world
        self.registry = self.world.registry
        self.event_bus = EventBus()
        self.pipeline = pipeline or default_pipeline()

        self.day_counter: int = 1
        self._alive: Dict[int, None] = {}
        self._dead: List[int] = []
        self._genome_index: Dict[Genome, List[int]] = {}
        self._observers: List[MapChangeListener] = []
        self._running = False
        self.stats = SimulationStats()

        self._place_initial_animals()
        self._place_initial_grass()
        self.update_stats()
        logger.info(
            "Simulation initialized on map %s (%dx%d) with %d animals and %d grass",
            self.world.map_id,
            self.world.boundary.width,
            self.world.boundary.height,
            self.alive_count,
            self.world.count_grass(),
        )

    # =========================================================================
    # Setup
    # =========================================================================

    def _check_world(self, world: GridWorld) -> None:
        """Reject a prebuilt world that disagrees with the parameters."""
        if world.boundary != self.parameters.boundary:
            raise ConfigurationError(
                f"World bounds {world.boundary} do not match a "
                f"{self.parameters.map_width}x{self.parameters.map_height} map"
            )
        if world.energy_parameters != self.parameters.energy:
            raise ConfigurationError(
                "World energy parameters differ from the simulation's: "
                f"{world.energy_parameters} != {self.parameters.energy}"
            )

    def _place_initial_animals(self) -> None:
        positions = self.sampler.sample_with_repetition(
            self.world.boundary.iter_positions(), self.parameters.starting_animal_amount
        )
        for position in positions:
            genome = Genome.random(self.parameters.genome_length, self.rng)
            self.add_animal(
                Animal(
                    genome,
                    position,
                    self.parameters.energy.starting_energy,
                    orientation=MapDirection(self.rng.randrange(8)),
                    gene_index=self.rng.randrange(len(genome)),
                    birth_day=self.day_counter,
                )
            )

    def _place_initial_grass(self) -> None:
        positions = self.sampler.sample_without_repetition(
            self.world.boundary.iter_positions(), self.parameters.starting_grass_amount
        )
        for position in positions:
            self.world.place_grass(Grass(position))

    def add_animal(self, animal: Animal) -> None:
        """Place an animal on the world and track it as alive."""
        self.world.place_animal(animal)
        self._alive[animal.animal_id] = None
        self._index_genome(animal)

    def _index_genome(self, animal: Animal) -> None:
        self._genome_index.setdefault(animal.genome, []).append(animal.animal_id)

    # =========================================================================
    # Observers
    # =========================================================================

    def add_observer(self, observer: MapChangeListener) -> None:
        """Register a callback invoked as ``observer(world, message)`` each day."""
        self._observers.append(observer)

    def remove_observer(self, observer: MapChangeListener) -> bool:
        if observer in self._observers:
            self._observers.remove(observer)
            return True
        return False

    def _map_changed(self, message: str, day: int) -> None:
        self.event_bus.emit(MapChangedEvent(message=message, day=day))
        for observer in list(self._observers):
            observer(self.world, message)

    # =========================================================================
    # Run state
    # =========================================================================

    @property
    def is_running(self) -> bool:
        return self._running

    def start_running(self) -> None:
        self._running = True

    def stop_running(self) -> None:
        self._running = False

    # =========================================================================
    # Core Update Loop
    # =========================================================================

    def tick(self) -> DayContext:
        """Simulate one day and notify observers.

        Returns:
            What happened during the day
        """
        ctx = self.pipeline.run(self)
        logger.debug(
            "Day %d: %d died, %d born, %d grass eaten, %d grown, %d alive",
            ctx.day,
            len(ctx.died),
            len(ctx.born),
            ctx.grass_eaten,
            len(ctx.grown),
            self.alive_count,
        )
        self._map_changed(f"Day {ctx.day}", ctx.day)
        return ctx

    def run_days(self, days: int) -> None:
        """Simulate ``days`` consecutive days without pausing."""
        for _ in range(days):
            self.tick()

    # -------------------------------------------------------------------------
    # Phase Implementations
    # -------------------------------------------------------------------------

    def _phase_death_sweep(self, ctx: DayContext) -> None:
        for animal in self.alive_animals:
            if animal.energy <= 0:
                self._bury(animal, ctx)

    def _bury(self, animal: Animal, ctx: DayContext) -> None:
        self.world.remove_animal(animal)
        del self._alive[animal.animal_id]
        self._dead.append(animal.animal_id)
        animal.set_death_day(self.day_counter)
        ctx.died.append(animal)

        logger.debug(
            "Animal #%d died at %s after %d days", animal.animal_id, animal.position, animal.lifespan
        )
        self.event_bus.emit(
            AnimalDiedEvent(
                animal_id=animal.animal_id,
                position=animal.position,
                lifespan=animal.lifespan,
                children=len(animal.children),
                day=self.day_counter,
            )
        )

    def _phase_movement(self, ctx: DayContext) -> None:
        for animal in self.alive_animals:
            self.world.move(animal)

    def _phase_eating(self, ctx: DayContext) -> None:
        for grass in self.world.grasses:
            if self.world.eat_grass(grass) is not None:
                ctx.grass_eaten += 1

    def _phase_reproduction(self, ctx: DayContext) -> None:
        for position in self.world.boundary.iter_positions():
            self._reproduce_at(position, ctx)

    def _reproduce_at(self, position: Vector2d, ctx: DayContext) -> Optional[Animal]:
        parents = self.world.reproduce(position)
        if parents is None:
            return None

        stronger, weaker = parents
        child = Animal.combine(stronger, weaker, self.parameters, self.rng, birth_day=self.day_counter)
        self.add_animal(child)
        ctx.born.append(child)

        logger.debug("Animal #%d born at %s with genome %s", child.animal_id, position, child.genome)
        self.event_bus.emit(
            AnimalBornEvent(
                animal_id=child.animal_id,
                parent_ids=(stronger.animal_id, weaker.animal_id),
                position=position,
                genome=child.genome,
                energy=child.energy,
                day=self.day_counter,
            )
        )
        return child

    def _phase_growth(self, ctx: DayContext) -> None:
        requested = self.parameters.daily_grass_growth
        ctx.grown = self.world.grow_grass(requested)
        self.event_bus.emit(
            GrassGrownEvent(
                requested=requested,
                grown=len(ctx.grown),
                on_equator=sum(1 for grass in ctx.grown if self.world.is_on_equator(grass.position)),
                day=self.day_counter,
            )
        )

    def _phase_aging(self, ctx: DayContext) -> None:
        for animal in self.alive_animals:
            animal.get_older()
        self.day_counter += 1

    # =========================================================================
    # Statistics
    # =========================================================================

    def update_stats(self) -> SimulationStats:
        """Recompute statistics from the rosters and the world."""
        self.stats = compute_stats(
            day=self.day_counter,
            alive=self.alive_animals,
            dead=self.dead_animals,
            genome_index=self._genome_index,
            grass_count=self.world.count_grass(),
            empty_positions=len(self.world.empty_positions()),
        )
        return self.stats

    def get_stats(self) -> Dict[str, Any]:
        return self.stats.to_dict()

    @property
    def average_energy(self) -> float:
        return self.stats.average_energy

    @property
    def average_lifespan(self) -> float:
        return self.stats.average_lifespan

    @property
    def average_children_count(self) -> float:
        return self.stats.average_children

    @property
    def dead_animals_count(self) -> int:
        return self.stats.dead_count

    @property
    def most_popular_genome(self) -> Optional[Genome]:
        return self.stats.most_popular_genome

    def animals_with_genome(self, genome: Genome) -> List[Animal]:
        """Every animal, alive or dead, that ever carried ``genome``."""
        return self.registry.resolve(self._genome_index.get(genome, ()))

    def animals_with_most_popular_genome(self) -> List[Animal]:
        """Live animals carrying the most popular genome."""
        genome = self.stats.most_popular_genome
        if genome is None:
            return []
        return [animal for animal in self.animals_with_genome(genome) if animal.is_alive]

    # =========================================================================
    # Rosters
    # =========================================================================

    @property
    def alive_animals(self) -> List[Animal]:
        """Snapshot of the alive roster in insertion order."""
        return self.registry.resolve(self._alive)

    @property
    def dead_animals(self) -> List[Animal]:
        return self.registry.resolve(self._dead)

    @property
    def alive_count(self) -> int:
        return len(self._alive)

    @property
    def dead_count(self) -> int:
        return len(self._dead)
