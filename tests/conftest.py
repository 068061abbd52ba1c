"""Pytest configuration and shared fixtures."""

import os
from itertools import cycle

import pytest

# Renderer tests draw on plain surfaces; never open a real window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_cat.data_models import GamePhase, Viewport  # noqa: E402
from flappy_cat.physics_engine import SimulationEngine  # noqa: E402


class SequenceRandomSource:
    """Deterministic RandomSource cycling through scripted values."""

    def __init__(self, *values):
        self.values = values or (0.5,)
        self._it = cycle(self.values)
        self.calls = 0

    def next(self) -> float:
        self.calls += 1
        return next(self._it)


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(400, 600)


@pytest.fixture
def rng() -> SequenceRandomSource:
    """Gap tops at 200 (gap 200..400) on a 600 high viewport."""
    return SequenceRandomSource(0.5)


@pytest.fixture
def engine(viewport, rng) -> SimulationEngine:
    """Fresh engine in NOT_STARTED."""
    return SimulationEngine(viewport=viewport, rng=rng)


@pytest.fixture
def running_engine(engine) -> SimulationEngine:
    """Engine after the first impulse."""
    engine.trigger_impulse()
    assert engine.phase is GamePhase.RUNNING
    return engine


@pytest.fixture
def hovering_engine(viewport, rng) -> SimulationEngine:
    """
    Running engine without gravity, the cat parked inside every gap.
    Survives indefinitely, which makes long runs easy to observe.
    """
    eng = SimulationEngine(viewport=viewport, rng=rng, gravity=0.0)
    eng.trigger_impulse()
    eng.character.vertical_velocity = 0.0
    return eng
