"""
Heart Catch game mode.

Hearts pop up in the play area on a steady tick and fade away after a few
seconds. Clicking one catches it for a point; catching enough of them wins
and points the player at the surprise.

HeartCatchMode is the session controller. It owns the live-heart registry,
the score tracker and the spawn tick, and it is the only thing that changes
them. The page layer drives it with three commands (start, reset, click)
and reads snapshots back; it never mutates session state directly.
"""

import random
from typing import Callable, List, Optional, Tuple

from celebration.games import GameState
from celebration.games.input import InputEvent
from celebration.logging import emit_record, get_logger
from celebration.scheduler import Scheduler, TimerHandle
from models import (
    HeartCatchConfig,
    Point2D,
    Resolution,
    SessionEvent,
    SessionEventKind,
    SessionSnapshot,
)
from games.HeartCatch.config import (
    RESET_MESSAGE,
    START_MESSAGE,
    WIN_MESSAGE,
    ENCOURAGEMENTS,
    default_config,
)
from games.HeartCatch.heart import Heart
from games.HeartCatch.registry import HeartRegistry
from games.HeartCatch.scoring import ScoreTracker
from games.HeartCatch.spawner import HeartSpawner

log = get_logger('heartcatch')

SessionListener = Callable[[SessionEvent], None]


class HeartCatchMode:
    """
    Heart Catch session controller.

    States: IDLE (initial) -> RUNNING -> STOPPED, and STOPPED -> RUNNING
    again on start(). While RUNNING a repeating tick asks the spawner for a
    heart; that tick is the only place hearts come from.

    Every command runs to completion before listeners hear about it, so a
    listener always sees the new state together with the new registry.
    """

    NAME = "Heart Catch"
    DESCRIPTION = "Click the hearts before they fade away!"
    VERSION = "1.0.0"

    def __init__(
        self,
        scheduler: Scheduler,
        play_area: Resolution,
        config: Optional[HeartCatchConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize game mode.

        Args:
            scheduler: Timeline shared with the page; ticks and expiries run on it
            play_area: Current size of the area hearts are placed in
            config: Tuning; defaults to the values loaded from .env
            rng: Random source for positions, lifetimes and messages
        """
        self._scheduler = scheduler
        self._play_area = play_area
        self._config = config if config is not None else default_config()
        rng = rng if rng is not None else random.Random()

        self._registry = HeartRegistry(scheduler)
        self._spawner = HeartSpawner(self._config, rng)
        self._tracker = ScoreTracker(ENCOURAGEMENTS, self._config.message_every, rng)

        self._state = GameState.IDLE
        self._tick: Optional[TimerHandle] = None
        self._listeners: List[SessionListener] = []

    # =========================================================================
    # Read-only projections
    # =========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._tracker.value

    @property
    def message(self) -> str:
        return self._tracker.message

    @property
    def hearts(self) -> Tuple[Heart, ...]:
        """Live hearts, oldest first."""
        return self._registry.hearts()

    @property
    def live_count(self) -> int:
        return self._registry.count()

    @property
    def config(self) -> HeartCatchConfig:
        return self._config

    @property
    def play_area(self) -> Resolution:
        return self._play_area

    @property
    def is_running(self) -> bool:
        return self._state == GameState.RUNNING

    def snapshot(self) -> SessionSnapshot:
        """Consistent view of the whole session for rendering."""
        return SessionSnapshot(
            state=self._state,
            score=self._tracker.value,
            message=self._tracker.message,
            hearts=tuple(h.to_snapshot() for h in self._registry.hearts()),
            play_area=self._play_area,
            time=self._scheduler.now,
        )

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_listener(self, listener: SessionListener) -> None:
        """Subscribe to SessionEvents (spawns, catches, wins...)."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # =========================================================================
    # Commands
    # =========================================================================

    def start(self) -> bool:
        """
        Begin a new Running phase.

        Does nothing while already running, so there is never more than
        one spawn tick.

        Returns:
            True if a new phase started, False if already running
        """
        if self._state == GameState.RUNNING:
            log.debug("start ignored: already running")
            return False

        previous = self._state
        self._registry.clear_all()
        self._tracker.reset(START_MESSAGE)
        self._state = GameState.RUNNING
        self._tick = self._scheduler.call_every(self._config.tick_interval, self._on_tick)

        log.info("session started (was %s)", previous.value)
        self._record_transition(previous, 'start')
        self._notify([self._event(SessionEventKind.STARTED)])
        return True

    def reset(self) -> None:
        """Force-stop from any state: clear all hearts, zero the score."""
        previous = self._state
        self._halt()
        self._tracker.reset(RESET_MESSAGE)
        self._state = GameState.STOPPED

        log.info("session reset (was %s)", previous.value)
        self._record_transition(previous, 'reset')
        self._notify([self._event(SessionEventKind.RESET)])

    def click(self, heart_id: int) -> bool:
        """
        Try to catch a heart.

        Clicking a heart that is already gone (caught or expired) is a no-op.

        Returns:
            True if the heart was live and has been caught
        """
        if self._state != GameState.RUNNING:
            return False

        heart = self._registry.get(heart_id)
        if heart is None or not self._registry.remove_by_id(heart_id):
            log.trace("click on missing heart %d ignored", heart_id)
            return False

        message_changed = self._tracker.increment()
        events = [self._event(SessionEventKind.CAUGHT, heart)]
        if message_changed:
            events.append(self._event(SessionEventKind.MESSAGE))
        log.debug("caught heart %d, score %d", heart_id, self._tracker.value)

        if self._tracker.value >= self._config.win_score:
            self._win()
            events.append(self._event(SessionEventKind.WON))

        self._notify(events)
        return True

    def click_at(self, x: float, y: float) -> Optional[int]:
        """
        Catch the top-most heart under a point.

        Returns:
            The caught heart's id, or None if nothing was under the point
        """
        if self._state != GameState.RUNNING:
            return None
        heart = self._registry.find_at(x, y)
        if heart is None:
            return None
        return heart.heart_id if self.click(heart.heart_id) else None

    def handle_input(self, events: List[InputEvent]) -> int:
        """
        Process input events from the input manager.

        Args:
            events: Pointer presses since the last frame

        Returns:
            Number of hearts caught
        """
        caught = 0
        for event in events:
            if self.click_at(event.position.x, event.position.y) is not None:
                caught += 1
        return caught

    def resize(self, width: int, height: int) -> None:
        """Update the play area used for future spawns."""
        self._play_area = Resolution(width=width, height=height)
        log.debug("play area resized to %s", self._play_area)

    # =========================================================================
    # Scheduled callbacks
    # =========================================================================

    def _on_tick(self) -> None:
        if self._state != GameState.RUNNING:
            return

        heart = self._spawner.maybe_spawn(
            self._registry, self._play_area, self._scheduler.now, self._on_expire
        )
        if heart is None:
            log.trace("tick at ceiling (%d live)", self._registry.count())
            return

        log.debug("spawned heart %d at (%.0f, %.0f), lifetime %.2fs",
                  heart.heart_id, heart.x, heart.y, heart.lifetime)
        self._notify([self._event(SessionEventKind.SPAWNED, heart)])

    def _on_expire(self, heart: Heart) -> None:
        log.debug("heart %d expired", heart.heart_id)
        self._notify([self._event(SessionEventKind.EXPIRED, heart)])

    # =========================================================================
    # Internals
    # =========================================================================

    def _halt(self) -> None:
        """Cancel the tick and every pending expiry, then empty the registry."""
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None
        self._registry.clear_all()

    def _win(self) -> None:
        previous = self._state
        self._halt()
        self._tracker.set_message(WIN_MESSAGE)
        self._state = GameState.STOPPED

        log.info("session won with score %d", self._tracker.value)
        self._record_transition(previous, 'win')

    def _event(self, kind: SessionEventKind, heart: Optional[Heart] = None) -> SessionEvent:
        return SessionEvent(
            kind=kind,
            time=self._scheduler.now,
            score=self._tracker.value,
            message=self._tracker.message,
            heart_id=heart.heart_id if heart is not None else None,
            position=Point2D(x=heart.x, y=heart.y) if heart is not None else None,
        )

    def _notify(self, events: List[SessionEvent]) -> None:
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception:
                    log.exception("listener failed on %s event", event.kind.value)

    def _record_transition(self, previous: GameState, reason: str) -> None:
        emit_record('heartcatch', {
            'type': 'transition',
            'reason': reason,
            'from': previous.value,
            'to': self._state.value,
            'score': self._tracker.value,
            'message': self._tracker.message,
            'time': self._scheduler.now,
        })


def mount_heart_catch(
    play_area: Optional[Resolution],
    scheduler: Scheduler,
    config: Optional[HeartCatchConfig] = None,
    rng: Optional[random.Random] = None,
) -> Optional[HeartCatchMode]:
    """
    Create a Heart Catch session for a play area, if there is one.

    The mini-game is decorative: without a play area it is disabled with a
    warning instead of breaking the rest of the page.

    Returns:
        A new HeartCatchMode, or None when play_area is None
    """
    if play_area is None:
        log.warning("no play area available; Heart Catch disabled")
        return None
    return HeartCatchMode(scheduler, play_area, config=config, rng=rng)
