"""
Input Manager - Collects input from the active source.

This is a shared module used by all games.
"""
from typing import List, Optional

from celebration.games.input.input_event import InputEvent
from celebration.games.input.sources.base import InputSource


class InputManager:
    """Manages an input source and collects its events.

    Lets the front end swap the source (mouse, scripted events in tests)
    without touching game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Set the input source."""
        self._source = source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()
