"""Tests for the cooperative callback scheduler."""
import pytest
from unittest.mock import Mock

from celebration.scheduler import Scheduler


class TestOneShotCallbacks:
    """call_later / call_at behaviour."""

    def test_runs_when_due(self):
        scheduler = Scheduler()
        callback = Mock()
        scheduler.call_later(1.0, callback, 'a', 2)

        scheduler.advance(0.5)
        callback.assert_not_called()

        scheduler.advance(0.5)
        callback.assert_called_once_with('a', 2)

    def test_runs_only_once(self):
        scheduler = Scheduler()
        callback = Mock()
        scheduler.call_later(1.0, callback)

        scheduler.advance(5.0)
        scheduler.advance(5.0)
        assert callback.call_count == 1
        assert scheduler.pending() == 0

    def test_now_equals_deadline_inside_callback(self):
        scheduler = Scheduler()
        seen = []
        scheduler.call_later(0.3, lambda: seen.append(scheduler.now))

        scheduler.advance(2.0)
        assert seen == [pytest.approx(0.3)]
        assert scheduler.now == pytest.approx(2.0)

    def test_deadline_order_with_ties_in_scheduling_order(self):
        scheduler = Scheduler()
        order = []
        scheduler.call_later(2.0, order.append, 'late')
        scheduler.call_later(1.0, order.append, 'first')
        scheduler.call_later(1.0, order.append, 'second')

        scheduler.advance(3.0)
        assert order == ['first', 'second', 'late']

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Scheduler().call_later(-0.1, Mock())

    def test_negative_advance_rejected(self):
        with pytest.raises(ValueError):
            Scheduler().advance(-1.0)

    def test_call_at_in_past_runs_on_next_advance(self):
        scheduler = Scheduler(start_time=10.0)
        callback = Mock()
        scheduler.call_at(5.0, callback)

        scheduler.advance(0.0)
        callback.assert_called_once()


class TestCancellation:
    """Cancelled callbacks never run."""

    def test_cancel_before_due(self):
        scheduler = Scheduler()
        callback = Mock()
        handle = scheduler.call_later(1.0, callback)

        assert handle.cancel() is True
        assert handle.cancelled
        scheduler.advance(2.0)
        callback.assert_not_called()
        assert scheduler.pending() == 0

    def test_cancel_twice_is_noop(self):
        handle = Scheduler().call_later(1.0, Mock())
        assert handle.cancel() is True
        assert handle.cancel() is False

    def test_cancel_after_run_returns_false(self):
        scheduler = Scheduler()
        handle = scheduler.call_later(1.0, Mock())
        scheduler.advance(1.0)
        assert handle.cancel() is False

    def test_callback_can_cancel_later_callback_in_same_window(self):
        scheduler = Scheduler()
        victim = Mock()
        victim_handle = scheduler.call_later(2.0, victim)
        scheduler.call_later(1.0, victim_handle.cancel)

        scheduler.advance(5.0)
        victim.assert_not_called()

    def test_cancel_all(self):
        scheduler = Scheduler()
        callbacks = [Mock() for _ in range(3)]
        for i, cb in enumerate(callbacks):
            scheduler.call_later(i + 1.0, cb)
        scheduler.call_every(0.5, Mock())

        assert scheduler.cancel_all() == 4
        scheduler.advance(10.0)
        for cb in callbacks:
            cb.assert_not_called()


class TestRepeatingCallbacks:
    """call_every behaviour."""

    def test_runs_every_interval(self):
        scheduler = Scheduler()
        callback = Mock()
        scheduler.call_every(0.5, callback)

        scheduler.advance(0.25)
        assert callback.call_count == 0
        scheduler.advance(0.25)
        assert callback.call_count == 1
        scheduler.advance(1.5)
        assert callback.call_count == 4

    def test_large_advance_runs_each_repetition(self):
        scheduler = Scheduler()
        times = []
        scheduler.call_every(1.0, lambda: times.append(scheduler.now))

        scheduler.advance(3.5)
        assert times == [pytest.approx(1.0), pytest.approx(2.0), pytest.approx(3.0)]

    def test_cancel_stops_future_runs(self):
        scheduler = Scheduler()
        callback = Mock()
        handle = scheduler.call_every(1.0, callback)

        scheduler.advance(2.0)
        handle.cancel()
        scheduler.advance(5.0)
        assert callback.call_count == 2

    def test_cancel_from_inside_own_callback(self):
        scheduler = Scheduler()
        calls = []
        handle = None

        def callback():
            calls.append(scheduler.now)
            handle.cancel()

        handle = scheduler.call_every(1.0, callback)
        scheduler.advance(5.0)
        assert len(calls) == 1
        assert scheduler.pending() == 0

    def test_non_positive_interval_rejected(self):
        with pytest.raises(ValueError):
            Scheduler().call_every(0, Mock())


class TestReentrancy:
    """Callbacks scheduling more work."""

    def test_callback_scheduled_inside_window_runs(self):
        scheduler = Scheduler()
        inner = Mock()
        scheduler.call_later(1.0, lambda: scheduler.call_later(0.5, inner))

        scheduler.advance(2.0)
        inner.assert_called_once()

    def test_callback_scheduled_beyond_window_waits(self):
        scheduler = Scheduler()
        inner = Mock()
        scheduler.call_later(1.0, lambda: scheduler.call_later(5.0, inner))

        scheduler.advance(2.0)
        inner.assert_not_called()
        scheduler.advance(4.0)
        inner.assert_called_once()

    def test_advance_from_callback_rejected(self):
        scheduler = Scheduler()
        scheduler.call_later(1.0, scheduler.advance, 1.0)

        with pytest.raises(RuntimeError):
            scheduler.advance(1.0)
