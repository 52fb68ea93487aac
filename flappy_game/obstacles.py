"""Procedural obstacle generation, scrolling and recycling."""

from __future__ import annotations

import logging
import random
from typing import Deque, Optional

from .config import GameConfig
from .world import ObstaclePair

logger = logging.getLogger(__name__)


class ObstacleStream:
    """Keeps a fixed-length, evenly spaced queue of obstacle pairs scrolling left."""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.cfg = config.obstacles
        self.rng = rng or random.Random()

    def sample_gap(self) -> int:
        """Pick a gap offset uniformly in ``[min_top, max_top)``."""
        min_top, max_top = self.config.gap_range
        return min_top + self.rng.randrange(max(1, max_top - min_top))

    def spawn(self, pairs: Deque[ObstaclePair], x: float) -> ObstaclePair:
        pair = ObstaclePair(x=x, gap_y=self.sample_gap())
        pairs.append(pair)
        return pair

    def populate(self, pairs: Deque[ObstaclePair]) -> None:
        """Fill the initial lookahead just beyond the right edge of the screen."""
        pairs.clear()
        start_x = self.config.world.width + self.cfg.spawn_offset
        for i in range(self.cfg.lookahead):
            self.spawn(pairs, start_x + i * self.cfg.spacing)

    def advance(self, pairs: Deque[ObstaclePair]) -> int:
        """Scroll every pair and recycle the ones that left the screen.

        Returns the number of pairs recycled this tick.
        """
        for pair in pairs:
            pair.x -= self.cfg.speed

        recycled = 0
        while pairs and pairs[0].right(self.cfg.width) < 0:
            pairs.popleft()
            tail_x = pairs[-1].x if pairs else self.config.world.width + self.cfg.spawn_offset - self.cfg.spacing
            fresh = self.spawn(pairs, tail_x + self.cfg.spacing)
            recycled += 1
            logger.debug("Recycled obstacle pair to x=%s gap_y=%s", fresh.x, fresh.gap_y)
        return recycled
