"""
Score tracking for Heart Catch.

The ScoreTracker counts catches and picks an encouragement message every
few catches. The message is cosmetic: nothing in scheduling reads it.

Examples:
    >>> import random
    >>> tracker = ScoreTracker(rng=random.Random(1))
    >>> tracker.reset('Catch them all!')
    >>> for _ in range(4):
    ...     _ = tracker.increment()
    >>> tracker.value
    4
    >>> tracker.message
    'Catch them all!'
    >>> tracker.increment()
    True
    >>> tracker.message in ENCOURAGEMENTS
    True
"""

import random
from typing import Optional, Sequence

from games.HeartCatch.config import ENCOURAGEMENTS, MESSAGE_EVERY


class ScoreTracker:
    """Monotonic catch counter with an encouragement message.

    Attributes:
        _score: Catches since the last reset (never negative)
        _message: Last selected message
    """

    def __init__(
        self,
        phrases: Sequence[str] = ENCOURAGEMENTS,
        every: int = MESSAGE_EVERY,
        rng: Optional[random.Random] = None,
    ):
        """Initialize score tracker.

        Args:
            phrases: Encouragement phrases to draw from (non-empty)
            every: A new phrase is drawn each time the score hits a multiple of this
            rng: Random source for phrase selection
        """
        if not phrases:
            raise ValueError("phrases must not be empty")
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self._phrases = tuple(phrases)
        self._every = every
        self._rng = rng if rng is not None else random.Random()
        self._score = 0
        self._message = ''

    @property
    def value(self) -> int:
        return self._score

    @property
    def message(self) -> str:
        return self._message

    @property
    def phrases(self) -> Sequence[str]:
        return self._phrases

    def increment(self) -> bool:
        """Record one catch.

        Every `every` catches a phrase is drawn uniformly, with replacement,
        so the same phrase can come up twice in a row.

        Returns:
            True if the message changed selection on this catch
        """
        self._score += 1
        if self._score > 0 and self._score % self._every == 0:
            self._message = self._rng.choice(self._phrases)
            return True
        return False

    def reset(self, message: str = '') -> None:
        """Zero the score and set a fixed message."""
        self._score = 0
        self._message = message

    def set_message(self, message: str) -> None:
        """Replace the message without touching the score."""
        self._message = message
