"""Tests for ScoreTracker counting and encouragement messages."""

import random

import pytest

from games.HeartCatch.config import ENCOURAGEMENTS
from games.HeartCatch.scoring import ScoreTracker


@pytest.fixture
def tracker():
    tracker = ScoreTracker(rng=random.Random(7))
    tracker.reset('Catch them all!')
    return tracker


class TestCounting:
    """Score arithmetic."""

    def test_starts_at_zero(self):
        tracker = ScoreTracker()
        assert tracker.value == 0
        assert tracker.message == ''

    def test_increment(self, tracker):
        tracker.increment()
        tracker.increment()
        assert tracker.value == 2

    def test_reset_zeroes_and_sets_message(self, tracker):
        for _ in range(12):
            tracker.increment()
        tracker.reset('Reset')
        assert tracker.value == 0
        assert tracker.message == 'Reset'

    def test_set_message_keeps_score(self, tracker):
        for _ in range(3):
            tracker.increment()
        tracker.set_message('You win!')
        assert tracker.value == 3
        assert tracker.message == 'You win!'


class TestMessages:
    """Encouragement selection every fifth catch."""

    def test_no_change_before_fifth(self, tracker):
        changed = [tracker.increment() for _ in range(4)]
        assert changed == [False] * 4
        assert tracker.message == 'Catch them all!'

    def test_change_on_multiples_of_five(self, tracker):
        changed = [tracker.increment() for _ in range(15)]
        assert [i + 1 for i, c in enumerate(changed) if c] == [5, 10, 15]
        assert tracker.message in ENCOURAGEMENTS

    def test_draw_with_replacement_covers_all_phrases(self):
        tracker = ScoreTracker(every=1, rng=random.Random(3))
        seen = set()
        for _ in range(200):
            tracker.increment()
            seen.add(tracker.message)
        assert seen == set(ENCOURAGEMENTS)

    def test_custom_phrases_and_interval(self):
        tracker = ScoreTracker(phrases=['yay'], every=2, rng=random.Random(0))
        tracker.increment()
        assert tracker.message == ''
        tracker.increment()
        assert tracker.message == 'yay'

    def test_empty_phrases_rejected(self):
        with pytest.raises(ValueError):
            ScoreTracker(phrases=[])

    def test_invalid_interval_rejected(self):
        with pytest.raises(ValueError):
            ScoreTracker(every=0)
