"""
Player implementations for the terminal Snake game.

Players steer the snake automatically (the --autopilot and --headless
modes); the keyboard handles steering otherwise.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
