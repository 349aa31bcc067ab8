"""
GameSnapshot - a read-only view of the game at a point in time.
"""

from typing import List, Optional

from .constants import Direction
from .phase import GameOver, GamePhase
from .position import Position


class GameSnapshot:
    """
    A snapshot of the game at a specific point in time, handed to renderers
    and players.

    Attributes:
        snake_body: list of Positions, tail first and head last
        direction: the snake's current facing
        food: position of the food
        obstacles: list of blocked-cell sets, one per obstacle
        score, speed_level, current_level, max_levels: progress counters
        score_needed: score required for the next level, None on the last level
        phase: the current GamePhase
        message: transition or game-over text (empty while playing)
        width, height, border_thickness: arena geometry
    """

    def __init__(
        self,
        snake_body: List[Position],
        direction: Direction,
        food: Position,
        obstacles: List[frozenset],
        score: int,
        speed_level: int,
        current_level: int,
        max_levels: int,
        score_needed: Optional[int],
        phase: GamePhase,
        message: str,
        width: int,
        height: int,
        border_thickness: int,
    ):
        self.snake_body = snake_body
        self.direction = direction
        self.food = food
        self.obstacles = obstacles
        self.score = score
        self.speed_level = speed_level
        self.current_level = current_level
        self.max_levels = max_levels
        self.score_needed = score_needed
        self.phase = phase
        self.message = message
        self.width = width
        self.height = height
        self.border_thickness = border_thickness

    @property
    def head(self) -> Optional[Position]:
        return self.snake_body[-1] if self.snake_body else None

    @property
    def end_reason(self):
        return self.phase.reason if isinstance(self.phase, GameOver) else None

    def obstacle_cells(self) -> set:
        cells = set()
        for blocks in self.obstacles:
            cells.update(blocks)
        return cells

    def status_line(self) -> str:
        next_score = f"/{self.score_needed}" if self.score_needed is not None else ""
        return (
            f" Level: {self.current_level}/{self.max_levels} | "
            f"Score: {self.score}{next_score} | Speed: {self.speed_level} "
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = border
        X = obstacle
        * = food
        o = snake body
        @ = snake head
        . = empty space
        Row 0 is printed first (top of the screen).
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        # Border
        for y in range(self.height):
            for x in range(self.width):
                if (x < self.border_thickness or x >= self.width - self.border_thickness or
                        y < self.border_thickness or y >= self.height - self.border_thickness):
                    board[y][x] = '#'

        for x, y in self.obstacle_cells():
            if self._on_board(x, y):
                board[y][x] = 'X'

        fx, fy = self.food
        if self._on_board(fx, fy):
            board[fy][fx] = '*'

        for idx, (x, y) in enumerate(self.snake_body):
            if self._on_board(x, y):
                board[y][x] = '@' if idx == len(self.snake_body) - 1 else 'o'

        return "\n".join("".join(row) for row in board)

    def _on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def as_dict(self) -> dict:
        return {
            "snake": [tuple(p) for p in self.snake_body],
            "direction": self.direction.value,
            "food": tuple(self.food),
            "score": self.score,
            "speed_level": self.speed_level,
            "level": self.current_level,
            "max_levels": self.max_levels,
            "phase": self.phase.name,
            "reason": self.end_reason.value if self.end_reason else None,
        }

    def __repr__(self):
        return (
            f"<GameSnapshot level={self.current_level}, score={self.score}, "
            f"phase={self.phase.name}, food={tuple(self.food)}>"
        )
