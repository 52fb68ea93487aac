"""Game-mode state machine and the fixed-timestep driver around it."""

from __future__ import annotations

import logging
import random
import threading
from collections import deque
from enum import Enum
from typing import Deque, Optional

from . import collision, physics
from .config import GameConfig
from .obstacles import ObstacleStream
from .world import Mode, Snapshot, WorldState

logger = logging.getLogger(__name__)


class Command(Enum):
    FLAP = "flap"
    TOGGLE_PAUSE = "pause"
    RESTART = "restart"


class Simulation:
    """Owns the world and advances it one logical tick at a time.

    Commands can be applied directly from the thread that calls ``step`` or
    submitted from any thread; submitted commands are drained at the start of
    the next step so a tick never observes a half-applied command.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self.stream = ObstacleStream(self.config, rng)
        self._pending: Deque[Command] = deque()
        self._pending_lock = threading.Lock()
        self.state = WorldState(body=physics.spawn_body(self.config))
        self.reset()

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def reset(self) -> None:
        """Reinitialise the world for a new life, keeping the best score."""
        state = self.state
        state.body = physics.spawn_body(self.config)
        self.stream.populate(state.obstacles)
        state.score = 0
        state.mode = Mode.RUNNING
        state.ticks = 0

    def submit(self, command: Command) -> None:
        """Queue a command from any thread."""
        with self._pending_lock:
            self._pending.append(command)

    def drain(self) -> int:
        with self._pending_lock:
            commands = list(self._pending)
            self._pending.clear()
        for command in commands:
            self.apply(command)
        return len(commands)

    def apply(self, command: Command) -> None:
        """Apply a command immediately. Commands that make no sense in the current mode are ignored."""
        state = self.state
        if command is Command.RESTART:
            logger.info("Restart (score=%d best=%d)", state.score, state.best_score)
            self.reset()
        elif command is Command.TOGGLE_PAUSE:
            if state.mode is Mode.RUNNING:
                state.mode = Mode.PAUSED
            elif state.mode is Mode.PAUSED:
                state.mode = Mode.RUNNING
        elif command is Command.FLAP:
            if state.mode is Mode.RUNNING:
                physics.flap(state.body, self.config.physics)

    def step(self) -> Optional[collision.CollisionReport]:
        """Advance exactly one logical tick.

        Returns the collision report, or ``None`` when the world is frozen.
        """
        self.drain()
        state = self.state
        if state.mode is not Mode.RUNNING:
            return None

        physics.integrate(state.body, self.config.physics)
        self.stream.advance(state.obstacles)
        report = collision.evaluate(state, self.config)
        state.ticks += 1

        if report.fatal:
            state.mode = Mode.GAME_OVER
            cause = "ground" if report.hit_ground else "obstacle"
            logger.info("Game over: hit %s (score=%d best=%d)", cause, state.score, state.best_score)
        return report

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.state)


class SimulationDriver:
    """Converts wall-clock time into whole fixed-rate simulation ticks."""

    def __init__(self, simulation: Simulation) -> None:
        self.simulation = simulation
        self.step_seconds = 1.0 / simulation.config.tick_rate
        self.max_steps = simulation.config.max_steps_per_tick
        self._accumulator = 0.0

    def tick(self, dt: float) -> int:
        """Run as many ticks as ``dt`` seconds cover; returns how many ran.

        Backlog beyond ``max_steps`` is dropped so a stalled frame cannot
        snowball into an ever-growing catch-up.
        """
        if dt > 0:
            self._accumulator += dt
        steps = 0
        while self._accumulator >= self.step_seconds and steps < self.max_steps:
            self.simulation.step()
            self._accumulator -= self.step_seconds
            steps += 1
        if steps == self.max_steps and self._accumulator >= self.step_seconds:
            logger.debug("Dropping %.3fs of simulation backlog", self._accumulator)
            self._accumulator = 0.0
        return steps

    def snapshot(self) -> Snapshot:
        return self.simulation.snapshot()
