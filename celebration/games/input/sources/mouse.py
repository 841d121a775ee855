"""
Mouse Input Source - Left-click input from pygame.

This is a shared module used by all games.
"""
import time
from typing import List

import pygame

from models import Point2D
from celebration.games.input.input_event import InputEvent
from celebration.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Converts pygame left-button presses into InputEvents.

    Non-mouse events are re-posted to the pygame event queue so the main
    loop still sees keyboard and window events.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect mouse clicks."""
        passthrough = []
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left mouse button only
                    pos_x, pos_y = event.pos
                    self._event_queue.append(InputEvent(
                        position=Point2D(x=float(pos_x), y=float(pos_y)),
                        timestamp=time.monotonic(),
                    ))
            elif event.type != pygame.MOUSEMOTION:
                passthrough.append(event)

        for event in passthrough:
            pygame.event.post(event)
