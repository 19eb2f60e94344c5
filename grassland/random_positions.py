"""Random selection of grid positions.

Used for seeding the initial population and grass, and for daily growth.
Asking for more positions than there are candidates is not an error: the
sampler simply returns what it can.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from grassland.math_utils import Vector2d

logger = logging.getLogger(__name__)


class RandomPositionSampler:
    """Draws positions from a candidate pool.

    Attributes:
        rng: Random number generator (fresh unseeded one if None)
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def sample_without_repetition(self, candidates: Iterable[Vector2d], k: int) -> List[Vector2d]:
        """Return ``k`` distinct positions drawn uniformly from ``candidates``.

        When ``k`` exceeds the number of candidates, every candidate is
        returned in random order.
        """
        pool = list(candidates)
        if k <= 0 or not pool:
            return []
        if k >= len(pool):
            if k > len(pool):
                logger.debug("Requested %d positions, only %d available", k, len(pool))
            self.rng.shuffle(pool)
            return pool
        return self.rng.sample(pool, k)

    def sample_with_repetition(self, candidates: Iterable[Vector2d], k: int) -> List[Vector2d]:
        """Return ``k`` independent uniform draws from ``candidates``."""
        pool = list(candidates)
        if k <= 0 or not pool:
            return []
        return self.rng.choices(pool, k=k)
