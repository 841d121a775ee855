"""
Input abstraction layer for the celebration games.

Provides unified input handling so games see the same events whether they
come from a pygame mouse, a touch bridge, or a test.
"""

from celebration.games.input.input_event import InputEvent
from celebration.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
