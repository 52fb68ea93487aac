"""Configuration data structures for the flappy game."""

from __future__ import annotations

from dataclasses import dataclass, field


class ConfigurationError(ValueError):
    """Raised when a configuration cannot produce a playable world."""


@dataclass(frozen=True)
class WorldConfig:
    """Screen-space bounds of the world."""

    width: int = 420
    height: int = 640
    ground_height: int = 100

    @property
    def playable_height(self) -> int:
        return self.height - self.ground_height


@dataclass(frozen=True)
class PhysicsConfig:
    """Per-tick physics constants, tuned for the default tick rate."""

    gravity: float = 0.55  # added to velocity every tick
    jump_velocity: float = -8.5  # velocity assigned on flap
    body_size: int = 24
    body_x_ratio: float = 0.28  # fixed x as a fraction of world width


@dataclass(frozen=True)
class ObstacleConfig:
    """Parameters governing the obstacle stream."""

    width: int = 60
    gap: int = 170  # vertical opening between top and bottom segments
    spacing: int = 220  # horizontal distance between consecutive pairs
    speed: int = 3  # scroll per tick
    lookahead: int = 4
    margin: int = 60  # minimum height of either segment
    spawn_offset: int = 100  # first pair spawns this far past the right edge


@dataclass(frozen=True)
class RenderingConfig:
    """Flat colours used by the pygame renderer."""

    sky_color: tuple[int, int, int] = (135, 206, 235)
    obstacle_color: tuple[int, int, int] = (34, 139, 34)
    obstacle_border_color: tuple[int, int, int] = (0, 100, 0)
    body_color: tuple[int, int, int] = (255, 215, 0)
    body_outline_color: tuple[int, int, int] = (0, 0, 0)
    ground_color: tuple[int, int, int] = (222, 184, 135)
    ground_edge_color: tuple[int, int, int] = (160, 82, 45)
    ui_color: tuple[int, int, int] = (0, 0, 0)
    banner_color: tuple[int, int, int] = (255, 255, 255)


@dataclass(frozen=True)
class SocketInputConfig:
    """JSON-over-TCP command interface for external controllers."""

    host: str = "127.0.0.1"
    port: int = 4790
    backlog: int = 1
    read_timeout: float = 1.0


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    tick_rate: int = 60  # logical simulation ticks per second
    max_steps_per_tick: int = 5
    target_fps: int = 60
    world: WorldConfig = field(default_factory=WorldConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    obstacles: ObstacleConfig = field(default_factory=ObstacleConfig)
    render: RenderingConfig = field(default_factory=RenderingConfig)
    socket_input: SocketInputConfig = field(default_factory=SocketInputConfig)

    @property
    def gap_range(self) -> tuple[int, int]:
        """Half-open ``[min_top, max_top)`` range for a pair's gap offset."""
        min_top = self.obstacles.margin
        max_top = self.world.playable_height - self.obstacles.gap - self.obstacles.margin
        return min_top, max_top

    def validate(self) -> "GameConfig":
        """Fail fast on configurations that cannot place a valid gap."""
        positive = {
            "world.width": self.world.width,
            "world.height": self.world.height,
            "world.ground_height": self.world.ground_height,
            "physics.gravity": self.physics.gravity,
            "physics.body_size": self.physics.body_size,
            "obstacles.width": self.obstacles.width,
            "obstacles.gap": self.obstacles.gap,
            "obstacles.spacing": self.obstacles.spacing,
            "obstacles.speed": self.obstacles.speed,
            "obstacles.lookahead": self.obstacles.lookahead,
            "obstacles.margin": self.obstacles.margin,
            "tick_rate": self.tick_rate,
            "max_steps_per_tick": self.max_steps_per_tick,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value!r}")

        if self.physics.jump_velocity >= 0:
            raise ConfigurationError(
                f"physics.jump_velocity must be negative, got {self.physics.jump_velocity!r}"
            )
        if self.world.playable_height <= self.physics.body_size:
            raise ConfigurationError("body does not fit above the ground")
        if not 0.0 <= self.physics.body_x_ratio < 1.0:
            raise ConfigurationError("physics.body_x_ratio must lie in [0, 1)")
        if self.obstacles.spacing < self.obstacles.width:
            raise ConfigurationError(
                f"obstacles.spacing ({self.obstacles.spacing}) is narrower than "
                f"obstacles.width ({self.obstacles.width}); pairs would overlap"
            )

        min_top, max_top = self.gap_range
        if max_top <= min_top:
            raise ConfigurationError(
                f"gap {self.obstacles.gap} plus 2 x margin {self.obstacles.margin} "
                f"leaves no room in playable height {self.world.playable_height}"
            )
        return self
