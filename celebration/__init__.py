"""
Celebration page game framework.

Shared pieces used by the interactive games on the celebration page:
- logging: per-module console logging and structured record sinks
- scheduler: cooperative callback queue on a logical clock
- games: common game state and input handling
"""

from celebration.scheduler import Scheduler, TimerHandle

__all__ = ['Scheduler', 'TimerHandle']
