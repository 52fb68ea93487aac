"""World state shared by the simulation step functions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque


class Mode(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class Body:
    """The player-controlled square. Only ``y`` and ``velocity`` change while playing."""

    x: float
    y: float
    velocity: float
    size: int

    @property
    def bottom(self) -> float:
        return self.y + self.size


@dataclass
class ObstaclePair:
    """A top and bottom segment sharing one horizontal position."""

    x: float
    gap_y: int
    scored: bool = False

    def right(self, width: int) -> float:
        return self.x + width


@dataclass
class WorldState:
    """Everything a tick mutates, owned by a single ``Simulation``."""

    body: Body
    obstacles: Deque[ObstaclePair] = field(default_factory=deque)
    score: int = 0
    best_score: int = 0
    mode: Mode = Mode.RUNNING
    ticks: int = 0

    def award_point(self) -> None:
        self.score += 1
        self.best_score = max(self.best_score, self.score)


@dataclass(frozen=True)
class BodyView:
    x: float
    y: float
    velocity: float
    size: int


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_y: int
    scored: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of the world handed to renderers and agents."""

    body: BodyView
    obstacles: tuple[ObstacleView, ...]
    mode: Mode
    score: int
    best_score: int
    ticks: int

    @classmethod
    def capture(cls, state: WorldState) -> "Snapshot":
        body = state.body
        return cls(
            body=BodyView(x=body.x, y=body.y, velocity=body.velocity, size=body.size),
            obstacles=tuple(
                ObstacleView(x=pair.x, gap_y=pair.gap_y, scored=pair.scored)
                for pair in state.obstacles
            ),
            mode=state.mode,
            score=state.score,
            best_score=state.best_score,
            ticks=state.ticks,
        )

    @property
    def running(self) -> bool:
        return self.mode is Mode.RUNNING

    @property
    def paused(self) -> bool:
        return self.mode is Mode.PAUSED

    @property
    def game_over(self) -> bool:
        return self.mode is Mode.GAME_OVER

    def visible_obstacles(self, world_width: int, obstacle_width: int) -> tuple[ObstacleView, ...]:
        """Pairs that overlap the screen horizontally."""
        return tuple(
            pair for pair in self.obstacles
            if pair.x < world_width and pair.x + obstacle_width > 0
        )
