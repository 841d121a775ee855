"""
Heart Catch - Live heart registry.

Holds every heart that is on screen together with the scheduled callback
that will expire it. Removal is idempotent: the click path and the expiry
path may both try to remove the same heart, and whichever runs first wins.
The second attempt finds nothing and does nothing.
"""
from typing import Callable, Dict, Optional, Tuple

from celebration.logging import get_logger
from celebration.scheduler import Scheduler, TimerHandle
from games.HeartCatch.heart import Heart

log = get_logger('heartcatch.registry')

ExpireCallback = Callable[[Heart], None]


class HeartRegistry:
    """Set of live hearts keyed by id, in spawn order."""

    def __init__(self, scheduler: Scheduler):
        self._scheduler = scheduler
        self._hearts: Dict[int, Heart] = {}
        self._expiries: Dict[int, TimerHandle] = {}

    def add(self, heart: Heart, on_expire: Optional[ExpireCallback] = None) -> None:
        """Register a heart and schedule its expiry at heart.expires_at.

        Args:
            heart: The new heart
            on_expire: Called with the heart if it expires before any other
                removal. Not called if the heart is removed first.

        Raises:
            ValueError: If a heart with the same id is already live
        """
        if heart.heart_id in self._hearts:
            raise ValueError(f"heart {heart.heart_id} is already registered")

        self._hearts[heart.heart_id] = heart
        self._expiries[heart.heart_id] = self._scheduler.call_at(
            heart.expires_at, self._expire, heart.heart_id, on_expire
        )

    def remove_by_id(self, heart_id: int) -> bool:
        """Remove a heart and cancel its pending expiry.

        Returns:
            True if the heart was live and is now removed, False if it was
            already gone
        """
        heart = self._hearts.pop(heart_id, None)
        if heart is None:
            return False

        handle = self._expiries.pop(heart_id, None)
        if handle is not None:
            handle.cancel()
        return True

    def get(self, heart_id: int) -> Optional[Heart]:
        return self._hearts.get(heart_id)

    def __contains__(self, heart_id: int) -> bool:
        return heart_id in self._hearts

    def __len__(self) -> int:
        return len(self._hearts)

    def count(self) -> int:
        """Number of live hearts."""
        return len(self._hearts)

    def hearts(self) -> Tuple[Heart, ...]:
        """Live hearts, oldest first."""
        return tuple(self._hearts.values())

    def find_at(self, x: float, y: float) -> Optional[Heart]:
        """Top-most live heart under a point (the most recently spawned wins)."""
        for heart in reversed(list(self._hearts.values())):
            if heart.contains_point(x, y):
                return heart
        return None

    def clear_all(self) -> int:
        """Remove every heart and cancel every pending expiry.

        Returns:
            Number of hearts removed
        """
        for handle in self._expiries.values():
            handle.cancel()
        removed = len(self._hearts)
        self._expiries.clear()
        self._hearts.clear()
        if removed:
            log.debug("cleared %d live hearts", removed)
        return removed

    def _expire(self, heart_id: int, on_expire: Optional[ExpireCallback]) -> None:
        heart = self._hearts.get(heart_id)
        if heart is None or not self.remove_by_id(heart_id):
            return
        if on_expire is not None:
            on_expire(heart)
