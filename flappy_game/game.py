"""Pygame front end: window, event pump and flat-shape rendering."""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from .config import GameConfig, RenderingConfig
from .input import CommandSource, KeyboardInput
from .simulation import Simulation, SimulationDriver
from .world import Snapshot

logger = logging.getLogger(__name__)


class Renderer:
    """Draws a snapshot; never touches simulation state."""

    def __init__(self, surface: pygame.Surface, config: GameConfig) -> None:
        self.surface = surface
        self.config = config
        self.cfg: RenderingConfig = config.render
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)
        self.large_font = pygame.font.Font(None, 64)

    def draw(self, snapshot: Snapshot) -> None:
        self.surface.fill(self.cfg.sky_color)
        self._draw_obstacles(snapshot)
        self._draw_body(snapshot)
        self._draw_ground()
        self._draw_ui(snapshot)

    def _draw_obstacles(self, snapshot: Snapshot) -> None:
        world = self.config.world
        obstacles = self.config.obstacles
        floor = world.playable_height
        for pair in snapshot.visible_obstacles(world.width, obstacles.width):
            x = int(pair.x)
            bottom_top = pair.gap_y + obstacles.gap
            top = pygame.Rect(x, 0, obstacles.width, pair.gap_y)
            bottom = pygame.Rect(x, bottom_top, obstacles.width, floor - bottom_top)
            for rect in (top, bottom):
                pygame.draw.rect(self.surface, self.cfg.obstacle_color, rect)
                pygame.draw.rect(self.surface, self.cfg.obstacle_border_color, rect, width=1)

    def _draw_body(self, snapshot: Snapshot) -> None:
        body = snapshot.body
        rect = pygame.Rect(int(body.x), int(body.y), body.size, body.size)
        pygame.draw.ellipse(self.surface, self.cfg.body_color, rect)
        pygame.draw.ellipse(self.surface, self.cfg.body_outline_color, rect, width=1)

    def _draw_ground(self) -> None:
        world = self.config.world
        floor = world.playable_height
        pygame.draw.rect(self.surface, self.cfg.ground_color, pygame.Rect(0, floor, world.width, world.ground_height))
        pygame.draw.rect(self.surface, self.cfg.ground_edge_color, pygame.Rect(0, floor, world.width, 8))

    def _draw_ui(self, snapshot: Snapshot) -> None:
        world = self.config.world
        text = self.font.render(f"Score: {snapshot.score}   Best: {snapshot.best_score}", True, self.cfg.ui_color)
        self.surface.blit(text, (12, 16))

        centre = (world.width // 2, world.height // 2)
        if snapshot.game_over:
            self._draw_banner("GAME OVER", self.large_font, centre)
            self._draw_banner("Press R to restart", self.small_font, (centre[0], centre[1] + 48))
        elif snapshot.paused:
            self._draw_banner("PAUSED (P to resume)", self.font, centre)
        else:
            hint = self.small_font.render("SPACE/UP: Flap   P: Pause   R: Restart", True, self.cfg.ui_color)
            self.surface.blit(hint, (12, world.playable_height + 20))

    def _draw_banner(self, message: str, font: pygame.font.Font, centre: tuple[int, int]) -> None:
        shadow = font.render(message, True, (0, 0, 0))
        self.surface.blit(shadow, shadow.get_rect(center=(centre[0] + 2, centre[1] + 2)))
        text = font.render(message, True, self.cfg.banner_color)
        self.surface.blit(text, text.get_rect(center=centre))


class FlappyGame:
    """High-level game orchestration."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_provider: Optional[CommandSource] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.simulation = Simulation(self.config, seed=seed)
        self.driver = SimulationDriver(self.simulation)
        self.input_provider = input_provider or KeyboardInput()

        pygame.init()
        pygame.font.init()
        world = self.config.world
        self.screen = pygame.display.set_mode((world.width, world.height))
        pygame.display.set_caption("Flappy")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, self.config)
        self.running = True

    def run(self) -> None:
        logger.info("Starting game loop at %d fps, %d ticks/s", self.config.target_fps, self.config.tick_rate)
        try:
            while self.running:
                dt = self.clock.tick(self.config.target_fps) / 1000.0
                events = pygame.event.get()
                self._handle_events(events)
                for command in self.input_provider.poll(events):
                    self.simulation.submit(command)

                self.driver.tick(dt)
                self.renderer.draw(self.driver.snapshot())
                pygame.display.flip()
        finally:
            if hasattr(self.input_provider, "shutdown"):
                self.input_provider.shutdown()  # type: ignore[attr-defined]
            pygame.quit()

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
