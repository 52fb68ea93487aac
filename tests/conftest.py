from __future__ import annotations

import random
from dataclasses import replace

import pytest

from flappy_game.config import GameConfig
from flappy_game.simulation import Simulation


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def wide_gap_config(config: GameConfig) -> GameConfig:
    # Gap spans at least [80, 460), so a body hovering near y=300 never hits an obstacle.
    return replace(config, obstacles=replace(config.obstacles, gap=400))


@pytest.fixture
def sim(config: GameConfig) -> Simulation:
    return Simulation(config, rng=random.Random(1234))
