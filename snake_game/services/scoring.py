"""
Score and speed tracking.
"""

from domain.constants import BASE_SPEED_LEVEL, BASE_TICK_RATE, MIN_SPEED, SPEED_DECREASE_PER_LEVEL


class ScoreManager:
    """
    Tracks the cumulative score and the speed level.

    The score only ever grows. The speed level rises with every pickup and is
    reset at the start of each level.
    """

    def __init__(self) -> None:
        self.score = 0
        self.speed_level = BASE_SPEED_LEVEL

    def add_score(self, points: int) -> None:
        self.score += points
        self.speed_level += 1

    def reset_speed(self) -> None:
        self.speed_level = BASE_SPEED_LEVEL

    def __repr__(self):
        return f"<ScoreManager score={self.score}, speed_level={self.speed_level}>"


def compute_tick_rate(
    speed_level: int,
    base: int = BASE_TICK_RATE,
    decrease: int = SPEED_DECREASE_PER_LEVEL,
    minimum: int = MIN_SPEED,
) -> int:
    """Milliseconds between ticks: linear speed-up, floored at ``minimum``."""
    reduction = decrease * max(speed_level - BASE_SPEED_LEVEL, 0)
    return max(base - reduction, minimum)
