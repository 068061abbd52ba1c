"""
tick_driver.py: Fixed-timestep scheduler that feeds elapsed time into engine ticks.
"""

import logging

from .constants import MAX_CATCH_UP_TICKS, TICK_TIME
from .data_models import GamePhase
from .physics_engine import SimulationEngine

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Turns wall-clock time into whole engine ticks, only while the game runs.

    The host calls advance() once per frame with the seconds elapsed. Time
    accumulated while the phase is not RUNNING is discarded, so the timer is
    effectively torn down the moment the game ends. After close() (or leaving
    a ``with`` block) the driver never ticks again.
    """

    def __init__(self, engine: SimulationEngine, interval: float = TICK_TIME,
                 max_catch_up: int = MAX_CATCH_UP_TICKS):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.engine = engine
        self.interval = interval
        self.max_catch_up = max_catch_up
        self._accumulator = 0.0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def active(self) -> bool:
        return not self._closed and self.engine.phase is GamePhase.RUNNING

    def advance(self, elapsed: float) -> int:
        """Returns the number of ticks fired for this slice of time."""
        if not self.active:
            self._accumulator = 0.0
            return 0

        self._accumulator += elapsed
        fired = 0
        while self._accumulator >= self.interval and self.engine.phase is GamePhase.RUNNING:
            if fired >= self.max_catch_up:
                # Late ticks are coalesced, not replayed
                logger.debug("Dropping %.1f late ticks", self._accumulator / self.interval)
                self._accumulator = 0.0
                break
            self._accumulator -= self.interval
            self.engine.tick()
            fired += 1

        if self.engine.phase is not GamePhase.RUNNING:
            self._accumulator = 0.0
        return fired

    def close(self):
        self._closed = True
        self._accumulator = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
