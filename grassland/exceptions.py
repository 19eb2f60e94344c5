"""Grassland exception hierarchy.

Centralised base classes so callers can catch domain failures narrowly.
Occupancy errors signal corrupted bookkeeping and are never recovered from
inside the core.
"""


class GrasslandError(Exception):
    """Root of all Grassland domain exceptions."""


class SimulationError(GrasslandError):
    """Errors during simulation execution (world, entities, pipeline)."""


class OccupancyError(SimulationError):
    """An animal or grass item is not where the caller claims it is."""


class UnknownAnimalError(SimulationError):
    """An animal id that the registry never issued."""


class ConfigurationError(GrasslandError):
    """Invalid or missing configuration."""
