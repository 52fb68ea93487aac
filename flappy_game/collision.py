"""Collision detection against the ceiling, ground and obstacles, plus scoring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import pygame

from .config import GameConfig
from .world import Body, ObstaclePair, WorldState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionReport:
    """Outcome of evaluating one tick."""

    ceiling_clamped: bool = False
    hit_ground: bool = False
    hit_obstacle: Optional[ObstaclePair] = None
    points: int = 0

    @property
    def fatal(self) -> bool:
        return self.hit_ground or self.hit_obstacle is not None


def body_rect(body: Body) -> pygame.Rect:
    return pygame.Rect(int(body.x), int(body.y), body.size, body.size)


def obstacle_rects(pair: ObstaclePair, config: GameConfig) -> tuple[pygame.Rect, pygame.Rect]:
    """Top and bottom segment rectangles of a pair.

    A segment with zero height yields a zero-area rect, which pygame never
    reports as colliding.
    """
    width = config.obstacles.width
    floor = config.world.playable_height
    bottom_top = pair.gap_y + config.obstacles.gap
    top = pygame.Rect(int(pair.x), 0, width, pair.gap_y)
    bottom = pygame.Rect(int(pair.x), bottom_top, width, floor - bottom_top)
    return top, bottom


def clamp_to_ceiling(body: Body) -> bool:
    if body.y < 0:
        body.y = 0.0
        body.velocity = 0.0
        return True
    return False


def clamp_to_ground(body: Body, config: GameConfig) -> bool:
    floor = config.world.playable_height
    if body.bottom > floor:
        body.y = float(floor - body.size)
        return True
    return False


def first_obstacle_hit(body: Body, pairs: Iterable[ObstaclePair], config: GameConfig) -> Optional[ObstaclePair]:
    me = body_rect(body)
    for pair in pairs:
        top, bottom = obstacle_rects(pair, config)
        if me.colliderect(top) or me.colliderect(bottom):
            return pair
    return None


def award_passed_pairs(state: WorldState, config: GameConfig) -> int:
    """Score every unscored pair whose right edge is strictly left of the body."""
    width = config.obstacles.width
    points = 0
    for pair in state.obstacles:
        if not pair.scored and pair.right(width) < state.body.x:
            pair.scored = True
            state.award_point()
            points += 1
    if points:
        logger.debug("Scored %d (score=%d best=%d)", points, state.score, state.best_score)
    return points


def evaluate(state: WorldState, config: GameConfig) -> CollisionReport:
    """Resolve boundaries and obstacle hits for the current positions.

    Does not change ``state.mode``; the caller decides what a fatal report means.
    """
    body = state.body
    ceiling = clamp_to_ceiling(body)
    ground = clamp_to_ground(body, config)
    hit = None if ground else first_obstacle_hit(body, state.obstacles, config)
    points = award_passed_pairs(state, config)
    return CollisionReport(
        ceiling_clamped=ceiling,
        hit_ground=ground,
        hit_obstacle=hit,
        points=points,
    )
