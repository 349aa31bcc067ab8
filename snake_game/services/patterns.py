"""
Obstacle layouts per level.

Each layout is a pure function of the arena size, so the same
(level, width, height) always yields the same obstacles. Levels past the
last defined layout reuse it.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from domain.obstacle import Obstacle
from domain.position import Position

BLOCK_SIZE = (2, 2)


@dataclass
class ObstaclePattern:
    positions: List[Tuple[int, int]] = field(default_factory=list)
    sizes: List[Tuple[int, int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.positions)


def _blocks(positions: List[Tuple[int, int]]) -> ObstaclePattern:
    return ObstaclePattern(positions=positions, sizes=[BLOCK_SIZE] * len(positions))


def cross_pattern(width: int, height: int) -> ObstaclePattern:
    """Level 1: a center block with one block above, below, left and right."""
    center_x = width // 2
    center_y = height // 2
    offset = 6

    return _blocks([
        # Center
        (center_x - 1, center_y - 1),
        # Top / bottom
        (center_x - 1, center_y - offset),
        (center_x - 1, center_y + offset - 2),
        # Left / right
        (center_x - offset, center_y - 1),
        (center_x + offset - 2, center_y - 1),
    ])


def corners_pattern(width: int, height: int) -> ObstaclePattern:
    """Level 2: blocks on the quarter lines, four corners plus four edge midpoints."""
    quarter_width = width // 4
    quarter_height = height // 4
    middle_width = width // 2 - 1
    middle_height = height // 2 - 1

    return _blocks([
        # Corners
        (quarter_width, quarter_height),
        (width - quarter_width - 2, quarter_height),
        (quarter_width, height - quarter_height - 2),
        (width - quarter_width - 2, height - quarter_height - 2),
        # Edge midpoints
        (middle_width, quarter_height),
        (middle_width, height - quarter_height - 2),
        (quarter_width, middle_height),
        (width - quarter_width - 2, middle_height),
    ])


def diamond_pattern(width: int, height: int) -> ObstaclePattern:
    """Level 3: an inner cross, an outer diamond and a pair of center blocks."""
    center_x = width // 2
    center_y = height // 2
    inner_offset = 5
    outer_offset = 8

    return _blocks([
        # Inner cross
        (center_x - inner_offset, center_y - 1),
        (center_x + inner_offset - 2, center_y - 1),
        (center_x - 1, center_y - inner_offset),
        (center_x - 1, center_y + inner_offset - 2),
        # Outer diamond
        (center_x - outer_offset, center_y),
        (center_x + outer_offset - 2, center_y),
        (center_x - 1, center_y - outer_offset),
        (center_x - 1, center_y + outer_offset - 2),
        # Center
        (center_x - 3, center_y - 1),
        (center_x + 1, center_y - 1),
    ])


LEVEL_PATTERNS: Dict[int, Callable[[int, int], ObstaclePattern]] = {
    1: cross_pattern,
    2: corners_pattern,
    3: diamond_pattern,
}

LAST_PATTERN_LEVEL = max(LEVEL_PATTERNS)


def get_level_pattern(level: int, width: int, height: int) -> ObstaclePattern:
    """
    Return the obstacle layout for ``level``.

    Levels above the last defined layout reuse it; levels below 1 use the
    first one.
    """
    level = min(max(level, 1), LAST_PATTERN_LEVEL)
    return LEVEL_PATTERNS[level](width, height)


def build_obstacles(pattern: ObstaclePattern) -> List[Obstacle]:
    return [
        Obstacle.new_rectangle(Position(x, y), w, h)
        for (x, y), (w, h) in zip(pattern.positions, pattern.sizes)
    ]
