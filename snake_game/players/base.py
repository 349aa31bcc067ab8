"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.snapshot import GameSnapshot


class Player:
    """
    Base class/interface for automated steering.

    A player looks at a snapshot before each tick and may ask the snake to
    turn.
    """

    def get_move(self, game_state: GameSnapshot) -> Optional[Direction]:
        """
        Return a direction to turn to given the current game state.

        Args:
            game_state: Current snapshot of the game

        Returns:
            A Direction, or None to keep going straight
        """
        raise NotImplementedError
