"""
Top-level game phases.

``GameOver`` carries its reason; the other phases carry nothing, so a reason
can never be attached to a game that is still running.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class GameEndReason(str, Enum):
    COLLISION = "collision"
    VICTORY = "victory"


@dataclass(frozen=True)
class Playing:
    name = "playing"


@dataclass(frozen=True)
class LevelTransition:
    name = "level_transition"


@dataclass(frozen=True)
class GameOver:
    reason: GameEndReason
    name = "game_over"


GamePhase = Union[Playing, LevelTransition, GameOver]

PLAYING = Playing()
LEVEL_TRANSITION = LevelTransition()
