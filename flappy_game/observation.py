"""Compact numeric view of a snapshot for scripted or learning agents."""

from __future__ import annotations

import numpy as np

from .config import GameConfig
from .world import ObstacleView, Snapshot

PAIRS_AHEAD = 2
OBSERVATION_SIZE = 3 + 2 * PAIRS_AHEAD


def pairs_ahead(snapshot: Snapshot, obstacle_width: int) -> list[ObstacleView]:
    """Pairs whose right edge has not yet passed the body's left edge, nearest first."""
    x = snapshot.body.x
    return [pair for pair in snapshot.obstacles if pair.x + obstacle_width >= x]


def build_observation(snapshot: Snapshot, config: GameConfig) -> np.ndarray:
    """
    Returns: [y_norm, vy_norm, alive, dx_1, gap_centre_1, dx_2, gap_centre_2]

    ``dx`` is the horizontal distance from the body to a pair's left edge over
    the world width; ``gap_centre`` is the gap midpoint over the playable
    height. Missing pairs report 1.0 distance and a centred gap.
    """
    floor = config.world.playable_height
    body = snapshot.body
    span = max(1.0, floor - body.size)
    vmax = max(abs(config.physics.jump_velocity), 1.0) * 2.0

    obs = np.empty(OBSERVATION_SIZE, dtype=np.float32)
    obs[0] = np.clip(body.y / span, 0.0, 1.0)
    obs[1] = np.clip(body.velocity / vmax, -1.0, 1.0)
    obs[2] = 0.0 if snapshot.game_over else 1.0

    ahead = pairs_ahead(snapshot, config.obstacles.width)
    for i in range(PAIRS_AHEAD):
        base = 3 + 2 * i
        if i < len(ahead):
            pair = ahead[i]
            dx = (pair.x - body.x) / config.world.width
            centre = (pair.gap_y + config.obstacles.gap / 2.0) / floor
            obs[base] = np.clip(dx, -1.0, 1.0)
            obs[base + 1] = np.clip(centre, 0.0, 1.0)
        else:
            obs[base] = 1.0
            obs[base + 1] = 0.5
    return obs
