import random
from dataclasses import replace

import pytest

from flappy_game.simulation import Command, Simulation, SimulationDriver


@pytest.fixture
def driver(config):
    slow = replace(config, tick_rate=10, max_steps_per_tick=5)
    return SimulationDriver(Simulation(slow, rng=random.Random(0)))


def test_whole_steps_only(driver):
    assert driver.tick(0.25) == 2
    assert driver.snapshot().ticks == 2


def test_zero_and_negative_dt_do_nothing(driver):
    assert driver.tick(0.0) == 0
    assert driver.tick(-1.0) == 0
    assert driver.snapshot().ticks == 0


def test_backlog_is_capped_and_dropped(driver):
    assert driver.tick(3.0) == 5
    assert driver.tick(0.0) == 0
    assert driver.snapshot().ticks == 5


def test_snapshots_are_produced_while_paused(driver):
    driver.simulation.submit(Command.TOGGLE_PAUSE)
    assert driver.tick(0.25) == 2
    snap = driver.snapshot()
    assert snap.paused
    assert snap.ticks == 0


def test_default_rate_runs_one_step_per_frame(config):
    driver = SimulationDriver(Simulation(config, seed=1))
    for _ in range(10):
        assert driver.tick(1.0 / 60) == 1
    assert driver.snapshot().ticks == 10
