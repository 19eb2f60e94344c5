"""Daily tick orchestration: engine, pipeline, statistics and pacing."""

from grassland.simulation.day_context import DayContext
from grassland.simulation.engine import Simulation
from grassland.simulation.pipeline import DayPipeline, PipelineStep, default_pipeline
from grassland.simulation.runner import SimulationRunner
from grassland.simulation.statistics import SimulationStats, compute_stats

__all__ = [
    "DayContext",
    "DayPipeline",
    "PipelineStep",
    "Simulation",
    "SimulationRunner",
    "SimulationStats",
    "compute_stats",
    "default_pipeline",
]
