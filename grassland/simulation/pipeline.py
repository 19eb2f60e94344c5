"""Daily pipeline of the simulation.

The pipeline is the ordered list of steps one day consists of. The order is
part of the simulation's semantics: eating after movement means animals eat
where they arrive, reproduction after eating lets a meal push a parent over
the threshold, and growth last means new grass is only eaten the next day.

Steps receive the Simulation and the DayContext for the day being run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List

from grassland.simulation.day_context import DayContext

if TYPE_CHECKING:
    from grassland.simulation.engine import Simulation


@dataclass
class PipelineStep:
    """A single step of the daily pipeline.

    Attributes:
        name: Identifier of the step (e.g., "death_sweep")
        fn: Function executing the step
    """

    name: str
    fn: Callable[["Simulation", DayContext], None]


class DayPipeline:
    """Ordered sequence of steps executed once per day."""

    def __init__(self, steps: List[PipelineStep]) -> None:
        self._steps = steps

    @property
    def steps(self) -> List[PipelineStep]:
        return self._steps

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self._steps]

    def run(self, simulation: "Simulation") -> DayContext:
        """Execute all steps in order for the simulation's current day."""
        ctx = DayContext(day=simulation.day_counter)
        for step in self._steps:
            step.fn(simulation, ctx)
        return ctx


def _step_death_sweep(simulation: "Simulation", ctx: DayContext) -> None:
    """DEATH_SWEEP: Remove animals without energy."""
    simulation._phase_death_sweep(ctx)


def _step_movement(simulation: "Simulation", ctx: DayContext) -> None:
    """MOVEMENT: Every live animal takes one genome-driven step."""
    simulation._phase_movement(ctx)


def _step_eating(simulation: "Simulation", ctx: DayContext) -> None:
    """EATING: Each grass tuft is offered to its cell's strongest animal."""
    simulation._phase_eating(ctx)


def _step_reproduction(simulation: "Simulation", ctx: DayContext) -> None:
    """REPRODUCTION: Scan cells row by row and let well-fed pairs mate."""
    simulation._phase_reproduction(ctx)


def _step_growth(simulation: "Simulation", ctx: DayContext) -> None:
    """GROWTH: Grow the daily grass, equator first."""
    simulation._phase_growth(ctx)


def _step_aging(simulation: "Simulation", ctx: DayContext) -> None:
    """AGING: Live animals age one day and the day counter advances."""
    simulation._phase_aging(ctx)


def _step_statistics(simulation: "Simulation", ctx: DayContext) -> None:
    """STATISTICS: Recompute all population statistics."""
    simulation.update_stats()


def default_pipeline() -> DayPipeline:
    """Build the canonical daily pipeline.

    Phase Order:
        1. death_sweep: Remove animals with energy <= 0
        2. movement: Move every live animal
        3. eating: Feed grass to the strongest occupant of each cell
        4. reproduction: Mate well-fed pairs, cell by cell
        5. growth: Grow new grass
        6. aging: Age animals and advance the day counter
        7. statistics: Refresh statistics
    """
    return DayPipeline(
        [
            PipelineStep("death_sweep", _step_death_sweep),
            PipelineStep("movement", _step_movement),
            PipelineStep("eating", _step_eating),
            PipelineStep("reproduction", _step_reproduction),
            PipelineStep("growth", _step_growth),
            PipelineStep("aging", _step_aging),
            PipelineStep("statistics", _step_statistics),
        ]
    )
