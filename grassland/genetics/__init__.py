"""Genetics for grassland animals."""

from grassland.genetics.genome import Genome

__all__ = ["Genome"]
