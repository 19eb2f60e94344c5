"""Real-time pacing for a Simulation.

The runner repeatedly calls ``Simulation.tick()`` while the simulation's run
flag is set, pausing ``day_interval`` seconds between days. The pause waits
on an Event, so ``stop()`` takes effect without waiting out the interval.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from grassland.simulation.engine import Simulation

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Drives a Simulation day by day, in the caller's thread or a daemon thread.

    Attributes:
        simulation: The simulation being driven
        day_interval: Seconds to pause between days
        days_run: Days simulated by this runner so far
        error: Exception that stopped the background thread, if any
    """

    def __init__(self, simulation: Simulation, day_interval: Optional[float] = None) -> None:
        self.simulation = simulation
        self.day_interval = (
            simulation.parameters.day_interval if day_interval is None else day_interval
        )
        self.days_run: int = 0
        self.error: Optional[BaseException] = None
        self.thread: Optional[threading.Thread] = None
        self._wake = threading.Event()

    @property
    def is_alive(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def run(self, max_days: Optional[int] = None) -> int:
        """Run in the calling thread until stopped or ``max_days`` are done.

        Returns:
            Number of days simulated by this call
        """
        self._wake.clear()
        self.simulation.start_running()
        try:
            return self._run_loop(max_days)
        except Exception as e:
            logger.error("Simulation loop: Fatal error, loop exiting: %s", e, exc_info=True)
            raise
        finally:
            self.simulation.stop_running()

    def start(self, max_days: Optional[int] = None) -> None:
        """Run in a background daemon thread."""
        if self.is_alive:
            return
        self.error = None
        self._wake.clear()
        self.simulation.start_running()
        self.thread = threading.Thread(
            target=self._run_in_thread, args=(max_days,), name="grassland-simulation", daemon=True
        )
        self.thread.start()

    def stop(self, timeout: float = 2.0) -> None:
        """Clear the run flag and cut the current pause short."""
        self.simulation.stop_running()
        self._wake.set()
        # observers run on the loop thread and may call stop() from there
        if self.thread is not None and self.thread is not threading.current_thread():
            self.thread.join(timeout=timeout)

    def _run_in_thread(self, max_days: Optional[int]) -> None:
        try:
            self._run_loop(max_days)
        except Exception as e:
            self.error = e
            logger.error("Simulation loop: Fatal error, loop exiting: %s", e, exc_info=True)
        finally:
            self.simulation.stop_running()

    def _run_loop(self, max_days: Optional[int]) -> int:
        logger.info("Simulation loop: Starting at day %d", self.simulation.day_counter)
        days = 0
        try:
            while self.simulation.is_running and (max_days is None or days < max_days):
                self.simulation.tick()
                days += 1
                self.days_run += 1

                finished = max_days is not None and days >= max_days
                if self.simulation.is_running and not finished and self.day_interval > 0:
                    self._wake.wait(self.day_interval)
        finally:
            logger.info("Simulation loop: Ended after %d days", days)
        return days
