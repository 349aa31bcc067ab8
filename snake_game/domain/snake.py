"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Deque, Optional

from .constants import INITIAL_SNAKE_LENGTH, RIGHT, Direction
from .position import Position, translate


class Snake:
    """
    Represents the player's snake.

    Attributes:
        body: deque of Positions from the tail at index 0 to the head at the end
        direction: the direction the head will move on the next tick

    Moving is ``move_forward`` followed by ``retract_tail``; growing is
    ``move_forward`` alone.
    """

    def __init__(self, head_x: int, head_y: int):
        # Coordinates left of the head wrap when head_x < 2.
        self.body: Deque[Position] = deque(
            _translate_back(Position(head_x, head_y), offset)
            for offset in range(INITIAL_SNAKE_LENGTH - 1, -1, -1)
        )
        self.direction: Direction = RIGHT

    @property
    def head(self) -> Optional[Position]:
        """Return the head position (last element), or None for an empty body."""
        return self.body[-1] if self.body else None

    def next_head_position(self) -> Optional[Position]:
        head = self.head
        if head is None:
            return None
        return translate(head, self.direction)

    def move_forward(self, new_head: Position) -> None:
        self.body.append(new_head)

    def retract_tail(self) -> None:
        self.body.popleft()

    def change_direction(self, new_direction: Direction) -> None:
        """Turn the snake; a 180 degree reversal is silently ignored."""
        if new_direction != self.direction.opposite:
            self.direction = new_direction

    def clear(self) -> None:
        self.body.clear()

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, position: Position) -> bool:
        return position in self.body

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.body)}, direction={self.direction.value}>"


def _translate_back(position: Position, offset: int) -> Position:
    """Return the cell ``offset`` steps to the left of ``position``."""
    for _ in range(offset):
        position = translate(position, Direction.LEFT)
    return position
