"""Entities living on the grid: animals, grass and the animal arena."""

from grassland.entities.animal import Animal
from grassland.entities.grass import Grass
from grassland.entities.registry import AnimalRegistry

__all__ = ["Animal", "AnimalRegistry", "Grass"]
