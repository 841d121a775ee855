"""
Cooperative callback scheduler.

All time-driven behaviour of the page games (repeating spawn ticks, per-entity
expiry, delayed effects) runs through one Scheduler. It owns a logical clock
and a queue of pending callbacks ordered by deadline, and it only moves
forward when the owner calls advance(dt), typically once per frame:

    scheduler = Scheduler()
    tick = scheduler.call_every(0.65, spawn_tick)
    expiry = scheduler.call_later(9.2, expire_heart, heart_id)

    while running:
        dt = clock.tick(60) / 1000.0
        scheduler.advance(dt)

    expiry.cancel()   # never runs afterwards

Callbacks run one at a time, in deadline order, with ties broken by
scheduling order. A callback may schedule or cancel other callbacks; anything
that becomes due inside the current advance() window runs in the same call.
"""

import heapq
import itertools
from typing import Any, Callable, List, Optional, Tuple

from celebration.logging import get_logger

log = get_logger('scheduler')


class TimerHandle:
    """A scheduled callback that can be cancelled until it has run.

    For repeating callbacks (call_every) the same handle stays valid across
    repetitions and cancel() stops all future runs.
    """

    __slots__ = ('_when', '_callback', '_args', '_interval', '_cancelled', '_scheduler')

    def __init__(
        self,
        when: float,
        callback: Callable[..., Any],
        args: Tuple[Any, ...],
        scheduler: 'Scheduler',
        interval: Optional[float] = None,
    ):
        self._when = when
        self._callback = callback
        self._args = args
        self._interval = interval
        self._cancelled = False
        self._scheduler = scheduler

    @property
    def when(self) -> float:
        """Logical time of the next run."""
        return self._when

    @property
    def interval(self) -> Optional[float]:
        """Repeat interval, or None for one-shot callbacks."""
        return self._interval

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> bool:
        """Cancel this callback.

        Returns:
            True if the callback was pending and is now cancelled,
            False if it was already cancelled or has already run.
        """
        if self._cancelled:
            return False
        self._cancelled = True
        return self._scheduler._discard(self)

    def __repr__(self) -> str:
        state = 'cancelled' if self._cancelled else 'pending'
        name = getattr(self._callback, '__qualname__', repr(self._callback))
        return f"<TimerHandle {name} when={self._when:.3f} {state}>"


class Scheduler:
    """Single-threaded queue of timed callbacks on a logical clock."""

    def __init__(self, start_time: float = 0.0):
        self._now = start_time
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._live = set()
        self._sequence = itertools.count()
        self._running = False

    @property
    def now(self) -> float:
        """Current logical time in seconds."""
        return self._now

    def pending(self) -> int:
        """Number of callbacks that are scheduled and not cancelled."""
        return len(self._live)

    def call_at(self, when: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Schedule callback(*args) at logical time `when`.

        Deadlines in the past run on the next advance().
        """
        handle = TimerHandle(when, callback, args, self)
        self._push(handle)
        return handle

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Schedule callback(*args) to run `delay` seconds from now."""
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        return self.call_at(self._now + delay, callback, *args)

    def call_every(self, interval: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Schedule callback(*args) every `interval` seconds, first run one interval from now."""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        handle = TimerHandle(self._now + interval, callback, args, self, interval=interval)
        self._push(handle)
        return handle

    def advance(self, dt: float) -> int:
        """Move the clock forward by dt seconds, running every callback that falls due.

        While a callback runs, `now` equals its deadline.

        Args:
            dt: Seconds to advance (non-negative)

        Returns:
            Number of callbacks executed
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if self._running:
            raise RuntimeError("advance() called from inside a scheduled callback")

        target = self._now + dt
        executed = 0
        self._running = True
        try:
            while self._queue and self._queue[0][0] <= target:
                when, _, handle = heapq.heappop(self._queue)
                if handle.cancelled or handle not in self._live:
                    continue
                self._now = max(self._now, when)

                if handle.interval is None:
                    self._live.discard(handle)
                else:
                    handle._when = when + handle.interval
                    heapq.heappush(self._queue, (handle._when, next(self._sequence), handle))

                handle._callback(*handle._args)
                executed += 1
        finally:
            self._running = False

        self._now = target
        if executed:
            log.trace("advanced to %.3f, ran %d callbacks", self._now, executed)
        return executed

    def cancel_all(self) -> int:
        """Cancel every pending callback. Returns how many were cancelled."""
        handles = list(self._live)
        for handle in handles:
            handle.cancel()
        self._queue.clear()
        return len(handles)

    def _push(self, handle: TimerHandle) -> None:
        self._live.add(handle)
        heapq.heappush(self._queue, (handle.when, next(self._sequence), handle))

    def _discard(self, handle: TimerHandle) -> bool:
        if handle in self._live:
            self._live.discard(handle)
            return True
        return False
