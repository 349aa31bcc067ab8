"""
Level progression tracking.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class LevelState:
    """
    Current level plus the thresholds that move the game forward.

    The score is cumulative over the whole session, so level N is complete
    once the score reaches ``score_per_level * N``.
    """

    def __init__(self, starting_level: int, max_levels: int, score_per_level: int):
        self.current_level = starting_level
        self.max_levels = max_levels
        self.score_per_level = score_per_level

    @property
    def is_final_level(self) -> bool:
        return self.current_level >= self.max_levels

    @property
    def victory_score(self) -> int:
        return self.score_per_level * self.max_levels

    def should_advance(self, score: int) -> bool:
        score_needed = self.score_per_level * self.current_level
        logger.debug(
            "Checking level advance - score=%s needed=%s level=%s max=%s",
            score, score_needed, self.current_level, self.max_levels,
        )
        return score >= score_needed and self.current_level < self.max_levels

    def advance(self) -> None:
        if self.current_level < self.max_levels:
            self.current_level += 1
            logger.debug("Advanced to level %s", self.current_level)

    def score_needed_for_next(self) -> Optional[int]:
        if self.current_level < self.max_levels:
            return self.score_per_level * self.current_level
        return None

    def __repr__(self):
        return f"<LevelState level={self.current_level}/{self.max_levels}, per_level={self.score_per_level}>"
