"""
Heart Catch - Surprise unlock.

Winning the mini-game tells the player to check the surprise, which sits
behind a password. SurpriseLock checks guesses in memory only; nothing is
stored between visits.
"""
from typing import Optional

from celebration.logging import get_logger
from models import UnlockResult
from games.HeartCatch.config import SURPRISE_PASSWORD, UNLOCK_RETRY_HINT

log = get_logger('heartcatch.surprise')


class SurpriseLock:
    """Password gate for the surprise message.

    Once unlocked it stays unlocked; later guesses are not checked.
    """

    def __init__(self, password: str = SURPRISE_PASSWORD, hint: str = UNLOCK_RETRY_HINT):
        if not password:
            raise ValueError("password must not be empty")
        self._password = password
        self._hint = hint
        self._attempts = 0
        self._unlocked = False

    @property
    def unlocked(self) -> bool:
        return self._unlocked

    @property
    def attempts(self) -> int:
        return self._attempts

    def try_unlock(self, guess: Optional[str]) -> UnlockResult:
        """Check a guess. Surrounding whitespace is ignored.

        Returns:
            UnlockResult; wrong guesses carry the retry hint
        """
        if self._unlocked:
            return UnlockResult(unlocked=True, attempts=self._attempts)

        self._attempts += 1
        if (guess or '').strip() == self._password:
            self._unlocked = True
            log.info("surprise unlocked after %d attempt(s)", self._attempts)
            return UnlockResult(unlocked=True, attempts=self._attempts)

        log.debug("wrong surprise password (attempt %d)", self._attempts)
        return UnlockResult(unlocked=False, attempts=self._attempts, hint=self._hint)
