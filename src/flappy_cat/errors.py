"""
errors.py: Exceptions raised by the simulation.
"""


class FlappyCatError(Exception):
    """Base class for all package errors."""


class ObstacleStreamError(FlappyCatError):
    """The obstacle stream lost the invariant the engine relies on."""
