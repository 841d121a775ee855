"""Common GameState enum for the celebration page games.

Games report one of these states via their `state` property. The page layer
uses it to decide which buttons to enable and whether to keep rendering
targets.
"""
from enum import Enum


class GameState(Enum):
    """Lifecycle of a timed page game.

    States:
        IDLE: Created, never started; nothing scheduled
        RUNNING: Spawn tick active, targets may be live
        STOPPED: Ended by a win or a reset; nothing scheduled, last score
            and message kept for display

    Transitions:
        IDLE -> RUNNING       start()
        STOPPED -> RUNNING    start()
        any -> STOPPED        reset(), or the game's win condition
    """
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"
