#!/usr/bin/env python3
"""
flappy_client.py

Single-player client: pygame window, fixed-timestep simulation and rendering.
Wires together SimulationEngine, TickDriver, InputAdapter and Renderer.
"""

import argparse
import logging
from typing import Optional, Sequence

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, TICK_TIME, WINDOW_CAPTION, DEFAULT_LOCALE
)
from .data_models import Viewport
from .input_adapter import InputAdapter
from .localization import supported_locales
from .physics_engine import SimulationEngine
from .random_source import SystemRandomSource
from .renderer import Renderer
from .tick_driver import TickDriver

logger = logging.getLogger(__name__)


class FlappyCatClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 seed: Optional[int] = None, locale: str = DEFAULT_LOCALE):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_CAPTION)

        # --- Game Logic ---
        self.engine = SimulationEngine(viewport=Viewport(width, height),
                                       rng=SystemRandomSource(seed))
        self.input = InputAdapter(self.engine)
        self.renderer = Renderer(locale)

        # Time Management
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        logger.info("Starting %dx%d window, tick %.0f ms, render %d FPS",
                    self.screen.get_width(), self.screen.get_height(), TICK_TIME * 1000, RENDER_FPS)
        try:
            with TickDriver(self.engine) as driver:
                running = True
                while running:
                    frame_time = self.clock.tick(RENDER_FPS) / 1000.0

                    running = self.input.handle_events(pygame.event.get())

                    # --- Simulation (Fixed Timestep) ---
                    driver.advance(frame_time)

                    # --- Render ---
                    self._sync_screen()
                    self.renderer.draw(self.screen, self.engine.snapshot(), pygame.mouse.get_pos())
                    pygame.display.flip()
        finally:
            logger.info("Exiting with score %d", self.engine.score)
            pygame.quit()

    def _sync_screen(self):
        """Picks up the resized display surface after a window resize."""
        surface = pygame.display.get_surface()
        if surface is not None:
            self.screen = surface


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(prog="flappy-cat", description="Guide the cat through the pipes.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe gap heights")
    parser.add_argument("--locale", default=DEFAULT_LOCALE, choices=supported_locales())
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    client = FlappyCatClient(args.width, args.height, seed=args.seed, locale=args.locale)
    client.run()


if __name__ == "__main__":
    main()
