"""
input_adapter.py: Translates pygame events into engine commands.
"""

import pygame

from .data_models import GamePhase
from .physics_engine import SimulationEngine
from .renderer import Renderer

IMPULSE_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_r,)
QUIT_KEYS = (pygame.K_ESCAPE,)
PRIMARY_BUTTON = 1


class InputAdapter:
    """Space, tap and click flap; the restart button and R reset a finished game."""

    def __init__(self, engine: SimulationEngine):
        self.engine = engine

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Applies one event. Returns False when the player asked to quit."""
        engine = self.engine

        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                return False
            if event.key in IMPULSE_KEYS:
                engine.trigger_impulse()
            elif event.key in RESTART_KEYS and engine.phase is GamePhase.OVER:
                engine.reset()

        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Taps also arrive as FINGERDOWN; the synthesized click is ignored
            if event.button == PRIMARY_BUTTON and not getattr(event, "touch", False):
                self._press(event.pos)

        elif event.type == pygame.FINGERDOWN:
            # Finger coordinates are normalized to [0, 1]
            viewport = engine.viewport
            self._press((int(event.x * viewport.width), int(event.y * viewport.height)))

        elif event.type == pygame.VIDEORESIZE:
            engine.on_viewport_resize(event.w, event.h)

        return True

    def _press(self, pos):
        """A click or tap: restart on the game-over button, flap anywhere else."""
        engine = self.engine
        button = Renderer.restart_button_rect(engine.viewport)
        if engine.phase is GamePhase.OVER and button.collidepoint(pos):
            engine.reset()
        else:
            engine.trigger_impulse()

    def handle_events(self, events) -> bool:
        """Applies a batch of events; False if any of them was a quit request."""
        keep_running = True
        for event in events:
            if not self.handle_event(event):
                keep_running = False
        return keep_running
