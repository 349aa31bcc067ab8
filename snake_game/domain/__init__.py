"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
terminal, configuration and logging concerns.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction
from .position import Position, translate
from .obstacle import Obstacle
from .snake import Snake
from .food import Food
from .phase import GameEndReason, GameOver, GamePhase, LevelTransition, Playing
from .snapshot import GameSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'Direction',
    'Position', 'translate',
    'Obstacle',
    'Snake',
    'Food',
    'GameEndReason', 'GameOver', 'GamePhase', 'LevelTransition', 'Playing',
    'GameSnapshot',
]
