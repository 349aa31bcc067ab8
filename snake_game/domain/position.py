"""
Position value type and direction arithmetic.
"""

from typing import NamedTuple

from .constants import COORD_LIMIT, Direction


class Position(NamedTuple):
    """An (x, y) cell in arena coordinates, (0, 0) at the top left."""

    x: int
    y: int

    def translate(self, direction: Direction) -> "Position":
        return translate(self, direction)


def translate(position: Position, direction: Direction) -> Position:
    """
    Step one cell in ``direction``.

    Arithmetic wraps modulo 2**16, so leaving the left or top edge produces
    x or y == 65535. That cell is never inside an arena, and the wall check
    reports it as a collision.
    """
    dx, dy = direction.delta
    return Position((position.x + dx) % COORD_LIMIT, (position.y + dy) % COORD_LIMIT)
