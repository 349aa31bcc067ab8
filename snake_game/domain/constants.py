"""
Game constants for the terminal Snake game.
"""

from enum import Enum


class Direction(str, Enum):
    """Facing direction of the snake. Screen coordinates: UP decreases y."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self):
        return DIR_DELTA[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Column / row deltas for each direction.
DIR_DELTA = {
    UP:    (0, -1),
    DOWN:  (0,  1),
    LEFT:  (-1, 0),
    RIGHT: (1,  0),
}

# Coordinates are unsigned 16-bit; stepping below 0 wraps to 65535.
COORD_LIMIT = 1 << 16

# Arena settings
WIDTH = 50
HEIGHT = 25
BORDER_THICKNESS = 2

# Speed settings (milliseconds)
BASE_TICK_RATE = 200
SPEED_DECREASE_PER_LEVEL = 10
MIN_SPEED = 50
BASE_SPEED_LEVEL = 1

# Level settings
STARTING_LEVEL = 1
MAX_LEVELS = 3
SCORE_PER_LEVEL = 5

# The snake's head starts at (width // START_DIVISOR, height // START_DIVISOR).
START_DIVISOR = 10
INITIAL_SNAKE_LENGTH = 3
