"""Simulation parameter objects.

Parameters are plain dataclasses read by the world and the simulation as
opaque values. ``validate()`` is the only place that rejects bad input.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict

from grassland.boundary import Boundary
from grassland.config.defaults import (
    DAILY_GRASS_GROWTH,
    DAY_INTERVAL,
    ENERGY_FROM_EATING,
    ENERGY_TO_FULL,
    ENERGY_TO_MOVE,
    ENERGY_TO_REPRODUCE,
    GENOME_LENGTH,
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_MUTATIONS,
    MIN_MUTATIONS,
    STARTING_ANIMAL_AMOUNT,
    STARTING_ENERGY,
    STARTING_GRASS_AMOUNT,
    TOPOLOGY,
)
from grassland.exceptions import ConfigurationError

TOPOLOGIES = ("bounded", "globe")


@dataclass(frozen=True)
class EnergyParameters:
    """Energy economy of animals.

    Attributes:
        starting_energy: Energy of every initially seeded animal
        energy_to_move: Cost of one daily move
        energy_from_eating: Energy gained by the animal that eats a grass
        energy_to_reproduce: Cost charged to each parent
        energy_to_full: Minimum energy both parents need to reproduce
    """

    starting_energy: int = STARTING_ENERGY
    energy_to_move: int = ENERGY_TO_MOVE
    energy_from_eating: int = ENERGY_FROM_EATING
    energy_to_reproduce: int = ENERGY_TO_REPRODUCE
    energy_to_full: int = ENERGY_TO_FULL

    def validate(self) -> None:
        """Validate energy parameters.

        Raises:
            ConfigurationError: If any parameter is invalid
        """
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ConfigurationError(f"{f.name} must be non-negative, got {getattr(self, f.name)}")
        if self.starting_energy == 0:
            raise ConfigurationError("starting_energy must be positive")
        if self.energy_to_reproduce > self.energy_to_full:
            raise ConfigurationError(
                "energy_to_reproduce must not exceed energy_to_full "
                f"({self.energy_to_reproduce} > {self.energy_to_full})"
            )


@dataclass(frozen=True)
class SimulationParameters:
    """Everything a Simulation needs to build its world and population."""

    map_width: int = MAP_WIDTH
    map_height: int = MAP_HEIGHT
    starting_animal_amount: int = STARTING_ANIMAL_AMOUNT
    starting_grass_amount: int = STARTING_GRASS_AMOUNT
    daily_grass_growth: int = DAILY_GRASS_GROWTH
    genome_length: int = GENOME_LENGTH
    min_mutations: int = MIN_MUTATIONS
    max_mutations: int = MAX_MUTATIONS
    topology: str = TOPOLOGY
    day_interval: float = DAY_INTERVAL
    energy: EnergyParameters = field(default_factory=EnergyParameters)

    @property
    def boundary(self) -> Boundary:
        return Boundary.of_size(self.map_width, self.map_height)

    def validate(self) -> None:
        """Validate simulation parameters.

        Raises:
            ConfigurationError: If any parameter is invalid
        """
        if self.map_width < 1 or self.map_height < 1:
            raise ConfigurationError(
                f"Map dimensions must be positive, got {self.map_width}x{self.map_height}"
            )
        if self.starting_animal_amount < 0:
            raise ConfigurationError("starting_animal_amount must be non-negative")
        if self.starting_grass_amount < 0:
            raise ConfigurationError("starting_grass_amount must be non-negative")
        if self.daily_grass_growth < 0:
            raise ConfigurationError("daily_grass_growth must be non-negative")
        if self.genome_length < 1:
            raise ConfigurationError("genome_length must be at least 1")
        if not 0 <= self.min_mutations <= self.max_mutations <= self.genome_length:
            raise ConfigurationError(
                "Mutations must satisfy 0 <= min_mutations <= max_mutations <= genome_length, "
                f"got {self.min_mutations}..{self.max_mutations} for length {self.genome_length}"
            )
        if self.topology not in TOPOLOGIES:
            raise ConfigurationError(f"topology must be one of {TOPOLOGIES}, got {self.topology!r}")
        if self.day_interval < 0:
            raise ConfigurationError("day_interval must be non-negative")
        self.energy.validate()

    def with_overrides(self, **overrides: Any) -> "SimulationParameters":
        """Return a copy with the given fields replaced.

        Energy fields may be passed flat (``energy_to_move=2``) and are routed
        into the nested ``EnergyParameters``.
        """
        energy_names = {f.name for f in fields(EnergyParameters)}
        energy_overrides = {k: overrides.pop(k) for k in list(overrides) if k in energy_names}
        energy = replace(self.energy, **energy_overrides) if energy_overrides else self.energy
        return replace(self, energy=energy, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to a flat-with-nested-energy dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationParameters":
        """Create parameters from a dictionary, ignoring unknown keys."""
        energy_data = data.get("energy") or {}
        energy_names = {f.name for f in fields(EnergyParameters)}
        energy = EnergyParameters(**{k: v for k, v in energy_data.items() if k in energy_names})
        known = {f.name for f in fields(cls)} - {"energy"}
        return cls(energy=energy, **{k: v for k, v in data.items() if k in known})
