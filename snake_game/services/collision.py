"""
Collision checks against the arena border, the snake itself and obstacles.
"""

from typing import Iterable, Sequence

from domain.constants import BORDER_THICKNESS
from domain.obstacle import Obstacle
from domain.position import Position


class CollisionManager:
    """
    Pure collision predicates for an arena of fixed size.

    The arena has a solid border ``border_thickness`` cells thick on every
    side; cells inside it count as walls.
    """

    def __init__(self, width: int, height: int, border_thickness: int = BORDER_THICKNESS):
        self.width = width
        self.height = height
        self.border_thickness = border_thickness

    def is_wall_collision(self, point: Position) -> bool:
        return (
            point.x < self.border_thickness
            or point.x >= self.width - self.border_thickness
            or point.y < self.border_thickness
            or point.y >= self.height - self.border_thickness
        )

    def is_self_collision(self, body: Sequence[Position]) -> bool:
        """True iff the head (last element) overlaps any other segment."""
        if len(body) <= 1:
            return False
        segments = list(body)
        return segments[-1] in segments[:-1]

    def is_obstacle_collision(self, point: Position, obstacles: Iterable[Obstacle]) -> bool:
        return any(obstacle.collides_with(point) for obstacle in obstacles)

    def check_valid_position(
        self,
        point: Position,
        body: Sequence[Position],
        obstacles: Iterable[Obstacle],
    ) -> bool:
        return (
            not self.is_wall_collision(point)
            and not self.is_self_collision(body)
            and not self.is_obstacle_collision(point, obstacles)
        )
