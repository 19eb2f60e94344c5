"""Pytest configuration and fixtures for grassland tests."""

import random

import pytest

from grassland.boundary import Boundary
from grassland.config import EnergyParameters, SimulationParameters
from grassland.entities import Animal
from grassland.genetics import Genome
from grassland.math_utils import MapDirection, Vector2d
from grassland.random_positions import RandomPositionSampler
from grassland.world import GridWorld


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def energy_parameters():
    return EnergyParameters(
        starting_energy=20,
        energy_to_move=1,
        energy_from_eating=5,
        energy_to_reproduce=10,
        energy_to_full=30,
    )


@pytest.fixture
def world(seeded_rng, energy_parameters):
    """A 10x10 world anchored at the origin."""
    return GridWorld(
        Boundary.of_size(10, 10),
        energy_parameters,
        sampler=RandomPositionSampler(seeded_rng),
    )


@pytest.fixture
def empty_parameters(energy_parameters):
    """Parameters for a 5x5 map with nothing seeded and no daily growth."""
    return SimulationParameters(
        map_width=5,
        map_height=5,
        starting_animal_amount=0,
        starting_grass_amount=0,
        daily_grass_growth=0,
        genome_length=1,
        min_mutations=0,
        max_mutations=0,
        day_interval=0.0,
        energy=energy_parameters,
    )


@pytest.fixture
def make_animal():
    """Factory for animals with a fixed genome and orientation."""

    def _make(position=Vector2d(0, 0), energy=20, genes=(0,), orientation=MapDirection.NORTH, birth_day=1):
        return Animal(Genome(tuple(genes)), position, energy, orientation=orientation, birth_day=birth_day)

    return _make
