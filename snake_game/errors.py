"""
Exceptions raised by the game engine and its configuration layer.
"""


class GameError(Exception):
    """Base class for every error the game raises."""


class GameStateError(GameError):
    """An engine invariant was violated (e.g. the snake has no head)."""


class ConfigError(GameError):
    """Configuration could not be read or failed validation."""


class FoodPlacementError(GameError):
    """No free cell exists for a new piece of food."""
