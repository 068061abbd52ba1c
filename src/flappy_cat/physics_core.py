"""
physics_core.py: The shared, deterministic kinematic functions and collision logic.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .constants import (
    GRAVITY, JUMP_STRENGTH, ROTATION_STEP, MIN_ROTATION, MAX_ROTATION,
    PIPE_SPEED, PIPE_SPACING, MIN_PIPE_HEIGHT, PIPE_GAP, CAT_WIDTH, CAT_HEIGHT
)
from .data_models import Obstacle, Viewport
from .random_source import RandomSource


@dataclass
class PhysicsCore:
    """
    Stateless rules the simulation engine composes every tick.

    Every field defaults to its value in constants.py, so an engine can tune
    the feel of the game per instance without touching module globals.
    Geometry (pipe width/gap, character size) stays fixed.
    """

    gravity: float = GRAVITY
    jump_strength: float = JUMP_STRENGTH
    rotation_step: float = ROTATION_STEP
    min_rotation: float = MIN_ROTATION
    max_rotation: float = MAX_ROTATION
    pipe_speed: float = PIPE_SPEED
    pipe_spacing: float = PIPE_SPACING
    min_pipe_height: float = MIN_PIPE_HEIGHT

    def apply_gravity(self, velocity: float) -> float:
        """Returns the velocity after one tick. No terminal velocity."""
        return velocity + self.gravity

    def flap(self) -> Tuple[float, float]:
        """Returns the (velocity, rotation) an impulse sets."""
        return self.jump_strength, self.min_rotation

    def step_rotation(self, angle: float) -> float:
        return min(angle + self.rotation_step, self.max_rotation)

    def integrate_position(self, y: float, velocity: float, viewport: Viewport) -> Tuple[float, bool]:
        """
        Moves the character by one tick of velocity.

        Returns (position, out_of_bounds). When the move would leave the
        viewport the old position is returned unchanged.
        """
        new_y = y + velocity
        if new_y < 0 or new_y > viewport.height - CAT_HEIGHT:
            return y, True
        return new_y, False

    def random_gap_top(self, viewport: Viewport, rng: RandomSource) -> float:
        """Uniform draw from [min_pipe_height, height - PIPE_GAP - min_pipe_height)."""
        span = viewport.height - PIPE_GAP - 2 * self.min_pipe_height
        # A viewport too short for the margins pins the gap to the top margin
        return self.min_pipe_height + rng.next() * max(span, 0.0)

    def spawn_pipe(self, x: float, viewport: Viewport, rng: RandomSource) -> Obstacle:
        return Obstacle(horizontal_position=x, gap_top_height=self.random_gap_top(viewport, rng))

    def is_off_screen(self, pipe: Obstacle) -> bool:
        return pipe.right_edge <= 0

    def overlaps_character(self, pipe: Obstacle, viewport: Viewport) -> bool:
        """Does the pipe's horizontal span cover the character's footprint?"""
        mid = viewport.midpoint
        return (pipe.horizontal_position < mid + CAT_WIDTH / 2
                and pipe.right_edge > mid - CAT_WIDTH / 2)

    def check_collision(self, y: float, pipes: Iterable[Obstacle], viewport: Viewport) -> bool:
        """Checks whether a character at y hits any pipe outside its gap."""
        for pipe in pipes:
            if not self.overlaps_character(pipe, viewport):
                continue
            if y < pipe.gap_top_height or y + CAT_HEIGHT > pipe.gap_bottom_height:
                return True
        return False

    def passed_midpoint(self, pipe: Obstacle, viewport: Viewport) -> bool:
        """True for exactly one tick: the one where the trailing edge crosses the midpoint."""
        mid = viewport.midpoint
        return mid - self.pipe_speed < pipe.right_edge <= mid

    def count_passed(self, pipes: Iterable[Obstacle], viewport: Viewport) -> int:
        return sum(1 for pipe in pipes if self.passed_midpoint(pipe, viewport))
