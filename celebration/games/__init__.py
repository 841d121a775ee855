"""
Celebration Game Framework.

Provides:
- game_state: Standard GameState enum shared by the page games
- input: Common input event handling
"""

from celebration.games.game_state import GameState

__all__ = [
    'GameState',
]
