"""Console observer that logs a text picture of the map every day."""

from __future__ import annotations

import logging
import threading
from typing import List

from grassland.math_utils import Vector2d
from grassland.world import GridWorld

logger = logging.getLogger(__name__)

GRASS_CHAR = "*"
EMPTY_CHAR = "."
CROWD_CHAR = "#"  # More than nine animals on a cell


def render_world(world: GridWorld) -> str:
    """Draw the world as text, top row first.

    Cells show the number of animals standing there, ``*`` for grass
    without animals, and ``.`` for empty ground.
    """
    bounds = world.boundary
    rows: List[str] = []
    for y in range(bounds.upper_right.y, bounds.lower_left.y - 1, -1):
        cells = []
        for x in range(bounds.lower_left.x, bounds.upper_right.x + 1):
            cells.append(_cell_char(world, x, y))
        rows.append("".join(cells))
    return "\n".join(rows)


def _cell_char(world: GridWorld, x: int, y: int) -> str:
    position = Vector2d(x, y)
    count = len(world.animals_at(position))
    if count > 9:
        return CROWD_CHAR
    if count > 0:
        return str(count)
    if world.grass_at(position) is not None:
        return GRASS_CHAR
    return EMPTY_CHAR


class ConsoleMapDisplay:
    """Logs the map id, the day message and the map after every update.

    Register with ``simulation.add_observer(display.on_map_changed)``.

    Attributes:
        update_count: Number of updates received so far
    """

    def __init__(self, log_level: int = logging.INFO) -> None:
        self.update_count: int = 0
        self.log_level = log_level
        self._lock = threading.Lock()

    def on_map_changed(self, world: GridWorld, message: str) -> None:
        with self._lock:
            self.update_count += 1
            logger.log(
                self.log_level,
                "Map %s | %s | updates: %d\n%s",
                world.map_id,
                message,
                self.update_count,
                render_world(world),
            )
