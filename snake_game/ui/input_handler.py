"""
Keyboard polling for the curses front end.
"""

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from domain.constants import Direction


class InputAction(str, Enum):
    TURN = "turn"
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    action: InputAction
    direction: Optional[Direction] = None


KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord('w'): Direction.UP,
    ord('W'): Direction.UP,
    ord('s'): Direction.DOWN,
    ord('S'): Direction.DOWN,
    ord('a'): Direction.LEFT,
    ord('A'): Direction.LEFT,
    ord('d'): Direction.RIGHT,
    ord('D'): Direction.RIGHT,
}

CONTINUE_KEYS = {ord(' '), ord('\n'), curses.KEY_ENTER}
QUIT_KEYS = {ord('q'), ord('Q'), 27}  # 27 = Esc


class InputHandler:
    """
    Reads at most one key per call from a non-blocking curses window.
    """

    def __init__(self, window):
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)

    def get_input(self) -> Optional[InputEvent]:
        return self.translate_key(self.window.getch())

    def key_pressed(self) -> bool:
        """True if any key at all was waiting, mapped or not."""
        return self.window.getch() != -1

    def discard_pending(self) -> None:
        """Drop keys typed ahead, such as an arrow still held when the game ended."""
        curses.flushinp()

    @staticmethod
    def translate_key(key: int) -> Optional[InputEvent]:
        if key in KEY_DIRECTIONS:
            return InputEvent(InputAction.TURN, KEY_DIRECTIONS[key])
        if key in CONTINUE_KEYS:
            return InputEvent(InputAction.CONTINUE)
        if key in QUIT_KEYS:
            return InputEvent(InputAction.QUIT)
        return None
