"""Vertical integration of the body under gravity and flap impulses."""

from __future__ import annotations

from .config import GameConfig, PhysicsConfig
from .world import Body


def spawn_body(config: GameConfig) -> Body:
    """Body at its starting position: fixed x, vertically centred, at rest."""
    size = config.physics.body_size
    return Body(
        x=config.world.width * config.physics.body_x_ratio,
        y=config.world.height / 2.0 - size / 2.0,
        velocity=0.0,
        size=size,
    )


def integrate(body: Body, physics: PhysicsConfig) -> None:
    """Advance one tick: gravity into velocity, velocity into position."""
    body.velocity += physics.gravity
    body.y += body.velocity


def flap(body: Body, physics: PhysicsConfig) -> None:
    # Assignment, not an increment: a flap fully replaces the current fall speed.
    body.velocity = physics.jump_velocity
