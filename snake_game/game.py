"""
GameState - the aggregate root that runs one game session.

One ``update()`` call is one tick. The driver feeds direction changes in
between ticks and calls ``start_next_level()`` when the player asks to
continue after a level is complete.
"""

import logging
import random
from typing import List, Optional

from domain.constants import Direction
from domain.food import Food
from domain.obstacle import Obstacle
from domain.phase import (
    LEVEL_TRANSITION,
    PLAYING,
    GameEndReason,
    GameOver,
    GamePhase,
    LevelTransition,
    Playing,
)
from domain.position import Position
from domain.snake import Snake
from domain.snapshot import GameSnapshot
from errors import GameStateError
from services.collision import CollisionManager
from services.levels import LevelState
from services.messages import game_over_message, level_complete_message, victory_message
from services.patterns import build_obstacles, get_level_pattern
from services.scoring import ScoreManager, compute_tick_rate
from settings import GameConfig


class GameState:
    """
    Manages:
      - Snake, food and obstacles
      - Score and speed level
      - Level progression
      - The current phase (Playing / LevelTransition / GameOver)

    Once the phase is GameOver the session is finished; build a new
    GameState to play again.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        logger: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.rng = rng or random.Random()

        self.width = self.config.width
        self.height = self.config.height
        self.collision_manager = CollisionManager(
            self.width, self.height, self.config.border_thickness
        )
        self.score_manager = ScoreManager()
        self.level_state = LevelState(
            self.config.starting_level,
            self.config.max_levels,
            self.config.score_per_level,
        )

        self.snake: Snake = Snake(*self.config.start_position())
        self.food: Food = Food(Position(0, 0))
        self.obstacles: List[Obstacle] = []
        self.phase: GamePhase = PLAYING
        self.transition_message = ""

        self.logger.debug("Initializing game with dimensions: %sx%s", self.width, self.height)
        self.logger.debug(
            "Level settings - start: %s, max: %s, score per level: %s",
            self.config.starting_level, self.config.max_levels, self.config.score_per_level,
        )
        self.reset_level()

    # ------------------------------------------------------------------
    # Level setup
    # ------------------------------------------------------------------

    def reset_level(self) -> None:
        """Rebuild snake, obstacles and food for the current level. The score is kept."""
        level = self.level_state.current_level
        self.logger.debug("Resetting level %s", level)

        self.snake = Snake(*self.config.start_position())
        self.score_manager.reset_speed()

        pattern = get_level_pattern(level, self.width, self.height)
        self.obstacles = build_obstacles(pattern)
        self.logger.debug("Generated %s obstacles for level %s", len(self.obstacles), level)

        self.generate_new_food()
        self.phase = PLAYING
        self.transition_message = ""

    def generate_new_food(self) -> None:
        def is_free(point: Position) -> bool:
            return (
                point not in self.snake
                and not self.collision_manager.is_obstacle_collision(point, self.obstacles)
            )

        self.food = Food.generate_new(
            self.width,
            self.height,
            is_free,
            border_thickness=self.config.border_thickness,
            rng=self.rng,
            max_attempts=self.config.food_max_attempts,
        )
        self.logger.debug("New food generated at position: (%s, %s)", *self.food.position)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self) -> None:
        """
        Advance the game by one tick.

        Only the Playing phase does anything; LevelTransition waits for
        ``start_next_level()`` and GameOver is final.

        Raises:
            GameStateError: if the snake has no head
        """
        if isinstance(self.phase, Playing):
            self._update_playing()

    def _is_collision(self, next_head: Position) -> bool:
        # The tail slides out of the way on a normal move, so it is not an obstacle.
        prospective_body = list(self.snake.body)[1:] + [next_head]
        return not self.collision_manager.check_valid_position(
            next_head, prospective_body, self.obstacles
        )

    def _update_playing(self) -> None:
        next_head = self.snake.next_head_position()
        if next_head is None:
            raise GameStateError("Snake has no head")

        # Collisions are checked before anything moves, and win over food.
        if self._is_collision(next_head):
            self.logger.debug("Collision at %s - Game Over", tuple(next_head))
            self._end_game(GameEndReason.COLLISION)
            return

        will_collect_food = next_head == self.food.position
        self.snake.move_forward(next_head)

        if not will_collect_food:
            self.snake.retract_tail()
            return

        self.score_manager.add_score(1)
        self.logger.debug(
            "Food collected! Score: %s, Level: %s",
            self.score_manager.score, self.level_state.current_level,
        )

        if self.level_state.should_advance(self.score_manager.score):
            self.logger.info("Level %s complete", self.level_state.current_level)
            self._prepare_next_level()
            return

        if (self.level_state.is_final_level
                and self.score_manager.score >= self.level_state.victory_score):
            self.logger.info("Final level complete! Victory with score %s", self.score_manager.score)
            self._end_game(GameEndReason.VICTORY)
            return

        self.generate_new_food()

    def _prepare_next_level(self) -> None:
        self.phase = LEVEL_TRANSITION
        self.transition_message = level_complete_message(
            self.level_state.current_level,
            self.score_manager.score,
        )

    def _end_game(self, reason: GameEndReason) -> None:
        self.phase = GameOver(reason)
        if reason == GameEndReason.VICTORY:
            self.transition_message = victory_message(
                self.score_manager.score, self.level_state.max_levels
            )
        else:
            self.transition_message = game_over_message(
                self.score_manager.score,
                self.level_state.current_level,
                self.level_state.max_levels,
            )
        self.logger.info(
            "Game over (%s): score=%s level=%s",
            reason.value, self.score_manager.score, self.level_state.current_level,
        )

    def start_next_level(self) -> bool:
        """
        Leave LevelTransition: move to the next level and reset the arena for it.

        Returns False and changes nothing in any other phase.
        """
        if not isinstance(self.phase, LevelTransition):
            self.logger.debug("Ignoring continue request in phase %s", self.phase.name)
            return False
        self.level_state.advance()
        self.logger.info("Starting level %s", self.level_state.current_level)
        self.reset_level()
        return True

    # ------------------------------------------------------------------
    # Input and read-only accessors
    # ------------------------------------------------------------------

    def change_direction(self, new_direction: Direction) -> None:
        if self.is_game_over:
            return
        self.snake.change_direction(new_direction)

    def get_tick_rate(self) -> int:
        return compute_tick_rate(
            self.score_manager.speed_level,
            base=self.config.base_tick_rate,
            decrease=self.config.speed_decrease_per_level,
            minimum=self.config.min_tick_rate,
        )

    @property
    def is_game_over(self) -> bool:
        return isinstance(self.phase, GameOver)

    @property
    def score(self) -> int:
        return self.score_manager.score

    @property
    def speed_level(self) -> int:
        return self.score_manager.speed_level

    @property
    def current_level(self) -> int:
        return self.level_state.current_level

    @property
    def max_levels(self) -> int:
        return self.level_state.max_levels

    def score_needed_for_next(self) -> Optional[int]:
        return self.level_state.score_needed_for_next()

    def get_current_state(self) -> GameSnapshot:
        """
        Return a snapshot of the current game for rendering.
        """
        return GameSnapshot(
            snake_body=list(self.snake.body),
            direction=self.snake.direction,
            food=self.food.position,
            obstacles=[obstacle.blocks for obstacle in self.obstacles],
            score=self.score,
            speed_level=self.speed_level,
            current_level=self.current_level,
            max_levels=self.max_levels,
            score_needed=self.score_needed_for_next(),
            phase=self.phase,
            message=self.transition_message,
            width=self.width,
            height=self.height,
            border_thickness=self.config.border_thickness,
        )

    def __repr__(self):
        return (
            f"<GameState level={self.current_level}/{self.max_levels}, "
            f"score={self.score}, phase={self.phase.name}>"
        )
