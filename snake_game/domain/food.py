"""
Food entity and placement.
"""

import random
from typing import Callable, Optional

from errors import FoodPlacementError

from .constants import BORDER_THICKNESS
from .position import Position

PositionPredicate = Callable[[Position], bool]


class Food:
    """A single piece of food. Eaten food is replaced, never moved."""

    def __init__(self, position: Position):
        self.position = position

    @classmethod
    def generate_new(
        cls,
        width: int,
        height: int,
        is_position_valid: PositionPredicate,
        border_thickness: int = BORDER_THICKNESS,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
    ) -> "Food":
        """
        Place food on a random cell inside the border.

        Draws uniformly from the interior until ``is_position_valid`` accepts
        a cell. With ``max_attempts`` unset the loop is unbounded, and it never
        returns if no valid cell exists. With a cap, the interior is scanned
        in row-major order once the random draws are used up.

        Raises:
            FoodPlacementError: a capped placement found no valid cell
        """
        rng = rng or random
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            position = Position(
                rng.randrange(border_thickness, width - border_thickness),
                rng.randrange(border_thickness, height - border_thickness),
            )
            if is_position_valid(position):
                return cls(position)
            attempts += 1

        for y in range(border_thickness, height - border_thickness):
            for x in range(border_thickness, width - border_thickness):
                position = Position(x, y)
                if is_position_valid(position):
                    return cls(position)

        raise FoodPlacementError(
            f"No valid food cell in a {width}x{height} arena after {max_attempts} attempts"
        )

    def __eq__(self, other):
        return isinstance(other, Food) and self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __repr__(self):
        return f"<Food at {tuple(self.position)}>"
