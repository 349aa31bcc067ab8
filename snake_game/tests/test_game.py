"""
Tests for game.py - the GameState state machine.

The end-to-end tests steer the snake by dropping food directly in front of
its head, so every pickup is deterministic.
"""

import logging
import os
import random
import sys
from collections import deque
from unittest.mock import MagicMock, patch

import pytest

# Add source root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    DOWN, LEFT, RIGHT, UP,
    Food,
    GameEndReason,
    GameOver,
    LevelTransition,
    Playing,
    Position,
)
from errors import GameStateError
from game import GameState
from services.patterns import build_obstacles, get_level_pattern
from settings import GameConfig


def make_game(**overrides) -> GameState:
    config = GameConfig(width=50, height=25, starting_level=1, max_levels=3, score_per_level=5)
    for key, value in overrides.items():
        setattr(config, key, value)
    return GameState(config.validate(), rng=random.Random(42))


def eat_food_ahead(game: GameState) -> None:
    """Place food on the next head cell and tick once."""
    game.food = Food(game.snake.next_head_position())
    game.update()


def complete_level(game: GameState) -> None:
    while isinstance(game.phase, Playing):
        eat_food_ahead(game)


class TestInitialState:
    """Scenario A: a freshly constructed game."""

    def test_initial_values(self):
        game = make_game()
        assert game.score == 0
        assert isinstance(game.phase, Playing)
        assert len(game.snake) >= 3
        assert game.current_level == 1
        assert game.max_levels == 3
        assert game.speed_level == 1
        assert game.transition_message == ""

    def test_initial_tick_rate_bounds(self):
        game = make_game()
        assert 50 <= game.get_tick_rate() <= 200
        assert game.get_tick_rate() == 200

    def test_snake_starts_at_configured_fraction(self):
        game = make_game()
        assert game.snake.head == Position(5, 2)
        assert game.snake.direction == RIGHT

    def test_start_position_is_clamped_inside_border(self):
        game = make_game(width=12, height=8, start_divisor=100, max_levels=1)
        x, y = game.snake.head
        assert x >= 2 + 2
        assert y >= 2
        for segment in game.snake.body:
            assert not game.collision_manager.is_wall_collision(segment)

    def test_level_one_obstacles_in_place(self):
        game = make_game()
        expected = build_obstacles(get_level_pattern(1, 50, 25))
        assert game.obstacles == expected

    def test_food_is_free_and_inside_border(self):
        game = make_game()
        food = game.food.position
        assert food not in game.snake
        assert not game.collision_manager.is_wall_collision(food)
        assert not game.collision_manager.is_obstacle_collision(food, game.obstacles)

    def test_score_needed_for_next(self):
        assert make_game().score_needed_for_next() == 5


class TestMovement:
    """Tests for plain movement and growth."""

    def test_move_keeps_length(self):
        game = make_game()
        game.food = Food(Position(40, 20))
        game.update()
        assert len(game.snake) == 3
        assert game.snake.head == Position(6, 2)
        assert game.score == 0

    def test_eating_grows_and_scores(self):
        game = make_game()
        eat_food_ahead(game)
        assert len(game.snake) == 4
        assert game.score == 1
        assert game.speed_level == 2
        assert game.get_tick_rate() == 190
        assert game.food.position not in game.snake

    def test_change_direction(self):
        game = make_game()
        game.change_direction(DOWN)
        game.food = Food(Position(40, 20))
        game.update()
        assert game.snake.head == Position(5, 3)

    def test_reversal_ignored(self):
        game = make_game()
        game.change_direction(LEFT)
        assert game.snake.direction == RIGHT

    def test_moving_into_vacated_tail_cell_is_allowed(self):
        """The tail leaves its cell on the same tick, so chasing it is safe."""
        game = make_game()
        game.food = Food(Position(40, 20))
        game.snake.body = deque([Position(10, 5), Position(11, 5), Position(11, 6), Position(10, 6)])
        game.snake.direction = UP
        game.update()
        assert isinstance(game.phase, Playing)
        assert game.snake.head == Position(10, 5)


class TestCollisions:
    """Scenario C and the other collision kinds."""

    def test_wall_collision_ends_game(self):
        game = make_game()
        game.change_direction(UP)
        game.update()
        assert game.phase == GameOver(GameEndReason.COLLISION)
        assert game.is_game_over
        assert "GAME OVER!" in game.transition_message

    def test_self_collision_ends_game(self):
        game = make_game()
        game.food = Food(Position(40, 20))
        game.snake.body = deque([
            Position(5, 5), Position(6, 5), Position(7, 5), Position(7, 6), Position(6, 6),
        ])
        game.snake.direction = UP
        game.update()
        assert game.phase == GameOver(GameEndReason.COLLISION)

    def test_obstacle_collision_ends_game(self):
        game = make_game()
        # Level 1 center block starts at (24, 11)
        game.snake.body = deque([Position(21, 11), Position(22, 11), Position(23, 11)])
        game.snake.direction = RIGHT
        game.food = Food(Position(40, 20))
        game.update()
        assert game.phase == GameOver(GameEndReason.COLLISION)

    def test_collision_takes_priority_over_food(self):
        game = make_game()
        game.change_direction(UP)
        game.food = Food(game.snake.next_head_position())
        game.update()
        assert game.is_game_over
        assert game.score == 0
        assert len(game.snake) == 3

    def test_wrapped_coordinate_is_a_wall_collision(self):
        """Without a border, stepping above row 0 wraps and still collides."""
        game = make_game(border_thickness=0)
        game.food = Food(Position(40, 20))
        game.change_direction(UP)
        start_y = game.snake.head.y
        for _ in range(start_y):
            game.update()
            assert isinstance(game.phase, Playing)
        assert game.snake.head.y == 0
        game.update()
        assert game.phase == GameOver(GameEndReason.COLLISION)

    def test_updates_after_game_over_are_no_ops(self):
        game = make_game()
        eat_food_ahead(game)
        game.change_direction(UP)
        game.update()
        assert game.is_game_over

        body = list(game.snake.body)
        score = game.score
        obstacles = list(game.obstacles)
        phase = game.phase
        for _ in range(5):
            game.update()
            game.change_direction(DOWN)
        assert list(game.snake.body) == body
        assert game.score == score
        assert game.obstacles == obstacles
        assert game.phase == phase
        assert game.snake.direction == UP

    def test_move_is_checked_against_prospective_body(self):
        """The collision oracle sees the body minus the sliding tail, plus the new head."""
        game = make_game()
        game.food = Food(Position(40, 20))
        with patch.object(game.collision_manager, "check_valid_position",
                          wraps=game.collision_manager.check_valid_position) as check:
            game.update()
        check.assert_called_once_with(
            Position(6, 2), [Position(4, 2), Position(5, 2), Position(6, 2)], game.obstacles
        )
        assert isinstance(game.phase, Playing)

    def test_invalid_position_from_oracle_ends_game(self):
        game = make_game()
        game.food = Food(Position(40, 20))
        with patch.object(game.collision_manager, "check_valid_position", return_value=False):
            game.update()
        assert game.phase == GameOver(GameEndReason.COLLISION)
        assert game.snake.head == Position(5, 2)


class TestLevelProgression:
    """Scenarios B and D."""

    def test_fifth_pickup_enters_transition(self):
        game = make_game()
        for _ in range(4):
            eat_food_ahead(game)
            assert isinstance(game.phase, Playing)
        eat_food_ahead(game)

        assert isinstance(game.phase, LevelTransition)
        assert game.score == 5
        assert "Level 1 Complete" in game.transition_message
        assert "Score: 5" in game.transition_message
        assert game.current_level == 1

    def test_update_during_transition_does_nothing(self):
        game = make_game()
        complete_level(game)
        body = list(game.snake.body)
        game.update()
        assert isinstance(game.phase, LevelTransition)
        assert list(game.snake.body) == body

    def test_continue_starts_next_level(self):
        game = make_game()
        complete_level(game)
        assert game.speed_level == 6

        assert game.start_next_level() is True
        assert game.current_level == 2
        assert isinstance(game.phase, Playing)
        assert game.speed_level == 1
        assert game.score == 5
        assert game.transition_message == ""
        assert game.obstacles == build_obstacles(get_level_pattern(2, 50, 25))
        assert len(game.snake) == 3
        assert game.snake.head == Position(5, 2)
        assert game.food.position not in game.snake

    def test_continue_outside_transition_is_ignored(self):
        game = make_game()
        assert game.start_next_level() is False
        assert game.current_level == 1
        assert isinstance(game.phase, Playing)

    def test_victory_on_final_level(self):
        game = make_game()
        complete_level(game)
        game.start_next_level()
        complete_level(game)
        assert isinstance(game.phase, LevelTransition)
        assert game.score == 10
        game.start_next_level()
        assert game.current_level == 3
        assert game.score_needed_for_next() is None

        complete_level(game)
        assert game.score == 15
        assert game.phase == GameOver(GameEndReason.VICTORY)
        assert "VICTORY!" in game.transition_message

    def test_single_level_game_ends_in_victory(self):
        game = make_game(max_levels=1)
        complete_level(game)
        assert game.score == 5
        assert game.phase == GameOver(GameEndReason.VICTORY)

    def test_starting_on_later_level_uses_cumulative_threshold(self):
        game = make_game(starting_level=2)
        assert game.obstacles == build_obstacles(get_level_pattern(2, 50, 25))
        for _ in range(9):
            eat_food_ahead(game)
        assert isinstance(game.phase, Playing)
        eat_food_ahead(game)
        assert isinstance(game.phase, LevelTransition)


class TestErrorsAndLogging:
    """Tests for invariant violations and the injected logger."""

    def test_update_without_head_raises(self):
        game = make_game()
        game.snake.clear()
        with pytest.raises(GameStateError, match="no head"):
            game.update()

    def test_injected_logger_receives_records(self):
        logger = MagicMock(spec=logging.Logger)
        game = GameState(GameConfig(), logger=logger, rng=random.Random(1))
        game.change_direction(UP)
        game.update()
        assert logger.debug.called
        assert logger.info.called

    def test_works_without_logging_configured(self):
        game = GameState()
        game.food = Food(Position(40, 20))
        game.update()
        assert game.score == 0


class TestSnapshot:
    """Tests for get_current_state()."""

    def test_snapshot_mirrors_game(self):
        game = make_game()
        eat_food_ahead(game)
        snapshot = game.get_current_state()
        assert snapshot.snake_body == list(game.snake.body)
        assert snapshot.head == game.snake.head
        assert snapshot.food == game.food.position
        assert snapshot.score == 1
        assert snapshot.speed_level == 2
        assert snapshot.current_level == 1
        assert snapshot.max_levels == 3
        assert snapshot.score_needed == 5
        assert isinstance(snapshot.phase, Playing)
        assert snapshot.end_reason is None
        assert len(snapshot.obstacles) == 5

    def test_snapshot_is_detached_from_game(self):
        game = make_game()
        snapshot = game.get_current_state()
        game.food = Food(Position(40, 20))
        game.update()
        assert snapshot.head == Position(5, 2)

    def test_snapshot_reports_end_reason(self):
        game = make_game()
        game.change_direction(UP)
        game.update()
        snapshot = game.get_current_state()
        assert snapshot.end_reason == GameEndReason.COLLISION
        assert snapshot.as_dict()["reason"] == "collision"
        assert snapshot.as_dict()["phase"] == "game_over"

    def test_print_board(self):
        game = make_game()
        board = game.get_current_state().print_board()
        rows = board.split("\n")
        assert len(rows) == 25
        assert all(len(row) == 50 for row in rows)
        assert rows[0] == "#" * 50
        assert rows[2][5] == "@"
        assert rows[2][3:5] == "oo"
        assert rows[11][24] == "X"
        fx, fy = game.food.position
        assert rows[fy][fx] == "*"

    def test_status_line(self):
        game = make_game()
        assert game.get_current_state().status_line() == " Level: 1/3 | Score: 0/5 | Speed: 1 "
        repr_str = repr(game.get_current_state())
        assert "level=1" in repr_str
