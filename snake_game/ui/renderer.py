"""
Curses renderer.

Draws a GameSnapshot: border, obstacles, snake, food and a status bar while
playing; a centered message box between levels and at the end.
"""

import curses
import logging

from domain.phase import GameEndReason, GameOver, LevelTransition
from domain.snapshot import GameSnapshot

logger = logging.getLogger(__name__)

COLOR_BORDER = 1
COLOR_OBSTACLE = 2
COLOR_SNAKE = 3
COLOR_FOOD = 4
COLOR_STATUS = 5
COLOR_TRANSITION = 6
COLOR_VICTORY = 7
COLOR_GAME_OVER = 8

BLOCK = ' '
SNAKE_CHAR = 'o'
HEAD_CHAR = '@'
FOOD_CHAR = '*'


class Renderer:
    def __init__(self, window, width: int, height: int):
        self.window = window
        self.width = width
        self.height = height
        self.has_colors = False

    def init(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")

        if curses.has_colors():
            self.has_colors = True
            curses.start_color()
            curses.init_pair(COLOR_BORDER, curses.COLOR_BLUE, curses.COLOR_BLUE)
            curses.init_pair(COLOR_OBSTACLE, curses.COLOR_WHITE, curses.COLOR_WHITE)
            curses.init_pair(COLOR_SNAKE, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(COLOR_FOOD, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, curses.COLOR_BLUE)
            curses.init_pair(COLOR_TRANSITION, curses.COLOR_WHITE, curses.COLOR_BLUE)
            curses.init_pair(COLOR_VICTORY, curses.COLOR_WHITE, curses.COLOR_GREEN)
            curses.init_pair(COLOR_GAME_OVER, curses.COLOR_WHITE, curses.COLOR_RED)

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self.has_colors else 0

    def _put(self, x: int, y: int, text: str, attr: int = 0) -> None:
        # Skip cells off the arena; writing the bottom-right cell raises in curses.
        if not (0 <= x < self.width and 0 <= y <= self.height):
            return
        try:
            self.window.addstr(y, x, text, attr)
        except curses.error:
            pass

    def render(self, game_state: GameSnapshot) -> None:
        self.window.erase()
        phase = game_state.phase
        if isinstance(phase, LevelTransition):
            self.draw_centered_box(game_state.message, self._attr(COLOR_TRANSITION))
        elif isinstance(phase, GameOver):
            pair = COLOR_VICTORY if phase.reason == GameEndReason.VICTORY else COLOR_GAME_OVER
            self.draw_centered_box(game_state.message, self._attr(pair))
        else:
            self.draw_borders(game_state.border_thickness)
            self.draw_obstacles(game_state)
            self.draw_snake(game_state)
            fx, fy = game_state.food
            self._put(fx, fy, FOOD_CHAR, self._attr(COLOR_FOOD) | curses.A_BOLD)
            self.draw_status(game_state)
        self.window.refresh()

    def draw_borders(self, thickness: int) -> None:
        attr = self._attr(COLOR_BORDER) if self.has_colors else curses.A_REVERSE
        for y in range(self.height):
            for x in range(self.width):
                if (x < thickness or x >= self.width - thickness or
                        y < thickness or y >= self.height - thickness):
                    self._put(x, y, BLOCK if self.has_colors else '#', attr)

    def draw_obstacles(self, game_state: GameSnapshot) -> None:
        attr = self._attr(COLOR_OBSTACLE) if self.has_colors else curses.A_REVERSE
        for x, y in game_state.obstacle_cells():
            self._put(x, y, BLOCK if self.has_colors else 'X', attr)

    def draw_snake(self, game_state: GameSnapshot) -> None:
        attr = self._attr(COLOR_SNAKE)
        head = game_state.head
        for x, y in game_state.snake_body:
            char = HEAD_CHAR if (x, y) == head else SNAKE_CHAR
            self._put(x, y, char, attr | curses.A_BOLD)

    def draw_status(self, game_state: GameSnapshot) -> None:
        self._put(0, self.height, game_state.status_line()[:self.width], self._attr(COLOR_STATUS))

    def draw_centered_box(self, text: str, attr: int) -> None:
        lines = text.split('\n')
        padding = 2
        box_width = max(len(line) for line in lines) + padding * 2
        box_height = len(lines) + padding * 2
        box_x = max((self.width - box_width) // 2, 0)
        box_y = max((self.height - box_height) // 2, 0)

        for y in range(box_height):
            self._put(box_x, box_y + y, ' ' * box_width, attr)
        for i, line in enumerate(lines):
            x = box_x + (box_width - len(line)) // 2
            self._put(x, box_y + padding + i, line, attr | curses.A_BOLD)
