"""
Flappy Cat: a single-screen arcade game built around a fixed-tick simulation.
"""

from .data_models import Character, GamePhase, GameSnapshot, Obstacle, Viewport
from .errors import FlappyCatError, ObstacleStreamError
from .physics_core import PhysicsCore
from .physics_engine import SimulationEngine
from .random_source import RandomSource, SystemRandomSource
from .tick_driver import TickDriver

__version__ = "0.1.0"

__all__ = [
    "Character", "GamePhase", "GameSnapshot", "Obstacle", "Viewport",
    "FlappyCatError", "ObstacleStreamError", "PhysicsCore", "SimulationEngine",
    "RandomSource", "SystemRandomSource", "TickDriver",
]
