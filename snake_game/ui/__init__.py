"""
Terminal front end: curses rendering and keyboard input.
"""

from .input_handler import InputAction, InputEvent, InputHandler
from .renderer import Renderer

__all__ = ['InputAction', 'InputEvent', 'InputHandler', 'Renderer']
