"""Exceptions raised by the game engine."""


class CrazyEightsError(Exception):
    """Base class for engine errors."""


class SetupError(CrazyEightsError):
    """A game could not be dealt into a valid starting position."""
