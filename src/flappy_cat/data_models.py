"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field, replace
from typing import Tuple

from .constants import PIPE_GAP, PIPE_WIDTH


class GamePhase(enum.Enum):
    """Coarse lifecycle of one game session."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class Viewport:
    """Playable area in pixels. Replaced, never mutated, on resize."""
    width: float
    height: float

    @property
    def midpoint(self) -> float:
        """Horizontal center, where the character flies."""
        return self.width / 2


@dataclass
class Character:
    """The authoritative character state owned by the engine."""
    vertical_position: float
    vertical_velocity: float = 0.0
    rotation_angle: float = 0.0

    def to_client_state(self):
        """Prepares a minimal state dictionary for logging or display."""
        return {
            "y": round(self.vertical_position, 2),
            "v": round(self.vertical_velocity, 2),
            "rotation": round(self.rotation_angle, 2),
        }


@dataclass
class Obstacle:
    """A pipe pair with one passable gap starting at gap_top_height."""
    horizontal_position: float
    gap_top_height: float

    @property
    def right_edge(self) -> float:
        return self.horizontal_position + PIPE_WIDTH

    @property
    def gap_bottom_height(self) -> float:
        return self.gap_top_height + PIPE_GAP

    def to_client_state(self):
        return {
            "x": round(self.horizontal_position, 2),
            "gap_top": round(self.gap_top_height, 2),
        }


@dataclass(frozen=True)
class GameSnapshot:
    """
    Detached copy of the engine state, read by the presentation layer
    once per frame. Mutating it never reaches back into the engine.
    """
    viewport: Viewport
    character: Character
    obstacles: Tuple[Obstacle, ...] = field(default_factory=tuple)
    phase: GamePhase = GamePhase.NOT_STARTED
    score: int = 0

    @classmethod
    def capture(cls, viewport, character, obstacles, phase, score):
        return cls(
            viewport=viewport,
            character=replace(character),
            obstacles=tuple(replace(o) for o in obstacles),
            phase=phase,
            score=score,
        )

    def to_client_state(self):
        return {
            "phase": self.phase.value,
            "score": self.score,
            "viewport": [self.viewport.width, self.viewport.height],
            "character": self.character.to_client_state(),
            "pipes": [o.to_client_state() for o in self.obstacles],
        }
