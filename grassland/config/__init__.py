"""Configuration for the grassland simulation."""

from grassland.config.simulation_config import (
    TOPOLOGIES,
    EnergyParameters,
    SimulationParameters,
)

__all__ = ["TOPOLOGIES", "EnergyParameters", "SimulationParameters"]
