"""
Obstacle entity - a filled rectangle of blocked cells.
"""

from dataclasses import dataclass
from typing import FrozenSet

from .position import Position


@dataclass(frozen=True)
class Obstacle:
    """
    An immutable set of blocked cells.

    Attributes:
        blocks: every Position covered by the obstacle
    """

    blocks: FrozenSet[Position]

    @classmethod
    def new_rectangle(cls, top_left: Position, width: int, height: int) -> "Obstacle":
        blocks = frozenset(
            Position(top_left.x + dx, top_left.y + dy)
            for dx in range(width)
            for dy in range(height)
        )
        return cls(blocks)

    def collides_with(self, position: Position) -> bool:
        return position in self.blocks

    def __contains__(self, position: Position) -> bool:
        return self.collides_with(position)

    def __len__(self) -> int:
        return len(self.blocks)
