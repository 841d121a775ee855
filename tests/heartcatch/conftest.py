"""Pytest fixtures for Heart Catch tests."""
import random

import pytest

from celebration.scheduler import Scheduler
from models import HeartCatchConfig, Resolution
from games.HeartCatch.game_mode import HeartCatchMode
from games.HeartCatch.registry import HeartRegistry


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def config():
    """Reference tuning, independent of any local .env overrides."""
    return HeartCatchConfig()


@pytest.fixture
def rng():
    return random.Random(18)


@pytest.fixture
def play_area():
    return Resolution(width=640, height=360)


@pytest.fixture
def registry(scheduler):
    return HeartRegistry(scheduler)


@pytest.fixture
def game(scheduler, play_area, config, rng):
    return HeartCatchMode(scheduler, play_area, config=config, rng=rng)


@pytest.fixture
def recorded_events(game):
    """Every SessionEvent the game emits, in order."""
    events = []
    game.add_listener(events.append)
    return events


@pytest.fixture
def advance_ticks(game, scheduler):
    """Advance the clock by exactly n spawn intervals."""
    def _advance(n=1):
        for _ in range(n):
            scheduler.advance(game.config.tick_interval)
    return _advance
