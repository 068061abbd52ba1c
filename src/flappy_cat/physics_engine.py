"""
physics_engine.py: The authoritative single-player world simulation.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .constants import MIN_PIPES, SCREEN_WIDTH, SCREEN_HEIGHT
from .data_models import Character, GamePhase, GameSnapshot, Obstacle, Viewport
from .errors import ObstacleStreamError
from .physics_core import PhysicsCore
from .random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine(PhysicsCore):
    """
    The engine owning the entire game state.
    Inherits the physics and collision rules from PhysicsCore.

    Collaborators drive it through four calls: trigger_impulse(), tick(),
    reset() and on_viewport_resize(). Everything else is read-only.
    """
    viewport: Viewport = field(default_factory=lambda: Viewport(SCREEN_WIDTH, SCREEN_HEIGHT))
    rng: RandomSource = field(default_factory=SystemRandomSource)
    # Raise on a broken obstacle stream instead of repairing it (off under python -O)
    strict_invariants: bool = __debug__

    character: Character = field(init=False)
    obstacles: List[Obstacle] = field(init=False, default_factory=list)
    phase: GamePhase = field(init=False, default=GamePhase.NOT_STARTED)
    score: int = field(init=False, default=0)
    tick_count: int = field(init=False, default=0)

    def __post_init__(self):
        self.character = self._rest_character()

    def _rest_character(self) -> Character:
        return Character(vertical_position=self.viewport.height / 2)

    def _set_phase(self, phase: GamePhase, reason: str = ""):
        if phase is self.phase:
            return
        logger.info("Phase %s -> %s %s(score=%d, tick=%d)", self.phase.value, phase.value,
                    f"[{reason}] " if reason else "", self.score, self.tick_count)
        self.phase = phase

    # ----------------- Commands -----------------

    def trigger_impulse(self):
        """Starts the game if needed and kicks the character upward."""
        if self.phase is GamePhase.NOT_STARTED:
            self.obstacles = [
                self.spawn_pipe(self.viewport.width + i * self.pipe_spacing, self.viewport, self.rng)
                for i in range(MIN_PIPES)
            ]
            self._set_phase(GamePhase.RUNNING, "impulse")

        if self.phase is not GamePhase.OVER:
            self.character.vertical_velocity, self.character.rotation_angle = self.flap()

    def tick(self):
        """
        Advances the simulation by one fixed step. No-op unless running.

        Scoring and pipe collision are judged on the state as it stood at the
        start of the tick; the movement below only affects the next one.
        A tick that ends the game still completes as a whole.
        """
        if self.phase is not GamePhase.RUNNING:
            return

        self.tick_count += 1
        character = self.character

        passed = self.count_passed(self.obstacles, self.viewport)
        hit = self.check_collision(character.vertical_position, self.obstacles, self.viewport)

        # 1. Position (boundary death freezes the character)
        character.vertical_position, out_of_bounds = self.integrate_position(
            character.vertical_position, character.vertical_velocity, self.viewport)

        # 2. Gravity
        character.vertical_velocity = self.apply_gravity(character.vertical_velocity)

        # 3. Cosmetic rotation
        character.rotation_angle = self.step_rotation(character.rotation_angle)

        # 4. Scroll and recycle pipes
        self._step_pipes()

        # 5. Score
        self.score += passed

        # 6. Death
        if out_of_bounds:
            self._set_phase(GamePhase.OVER, "boundary")
        elif hit:
            self._set_phase(GamePhase.OVER, "pipe")

    def reset(self):
        """Returns to the pre-game rest state."""
        self.character = self._rest_character()
        self.obstacles = []
        self.score = 0
        self.tick_count = 0
        self._set_phase(GamePhase.NOT_STARTED, "reset")

    def on_viewport_resize(self, width: float, height: float):
        """Existing pipes and the character keep their coordinates."""
        self.viewport = Viewport(width, height)
        logger.debug("Viewport resized to %sx%s", width, height)

    # ----------------- Queries -----------------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.capture(self.viewport, self.character, self.obstacles,
                                    self.phase, self.score)

    # ----------------- Internals -----------------

    def _step_pipes(self):
        for pipe in self.obstacles:
            pipe.horizontal_position -= self.pipe_speed

        self.obstacles = [p for p in self.obstacles if not self.is_off_screen(p)]

        while len(self.obstacles) < MIN_PIPES:
            x = self._tail_position() + self.pipe_spacing
            self.obstacles.append(self.spawn_pipe(x, self.viewport, self.rng))

    def _tail_position(self) -> float:
        """Horizontal position of the last pipe, which new pipes are spaced from."""
        if self.obstacles:
            return self.obstacles[-1].horizontal_position

        if self.strict_invariants:
            raise ObstacleStreamError("Obstacle stream is empty while the game is running")

        logger.warning("Obstacle stream was empty on tick %d; re-seeding at the right edge",
                       self.tick_count)
        # Spaced so the re-seeded pipe lands exactly on the right edge
        return self.viewport.width - self.pipe_spacing
