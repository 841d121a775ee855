"""Tests for HeartSpawner placement, lifetimes and the ceiling."""

import random

import pytest

from models import HeartCatchConfig, Resolution
from games.HeartCatch.registry import HeartRegistry
from games.HeartCatch.spawner import HeartSpawner


@pytest.fixture
def spawner(config, rng):
    return HeartSpawner(config, rng)


class TestCeiling:
    """Backpressure at the live-count ceiling."""

    def test_spawns_until_ceiling(self, spawner, registry, play_area, config):
        for _ in range(config.max_hearts):
            assert spawner.maybe_spawn(registry, play_area, now=0.0) is not None
        assert registry.count() == config.max_hearts

        assert spawner.maybe_spawn(registry, play_area, now=0.0) is None
        assert registry.count() == config.max_hearts

    def test_spawns_again_after_removal(self, spawner, registry, play_area, config):
        hearts = [spawner.maybe_spawn(registry, play_area, now=0.0) for _ in range(config.max_hearts)]
        registry.remove_by_id(hearts[0].heart_id)

        assert spawner.maybe_spawn(registry, play_area, now=0.0) is not None

    def test_custom_ceiling(self, registry, play_area, rng):
        spawner = HeartSpawner(HeartCatchConfig(max_hearts=2), rng)
        spawner.maybe_spawn(registry, play_area, now=0.0)
        spawner.maybe_spawn(registry, play_area, now=0.0)
        assert spawner.maybe_spawn(registry, play_area, now=0.0) is None
        assert spawner.ceiling == 2


class TestPlacement:
    """Positions stay inside the play area."""

    def test_positions_within_margins(self, spawner, registry, play_area, config):
        for _ in range(200):
            heart = spawner.maybe_spawn(registry, play_area, now=0.0)
            assert config.margin <= heart.x <= play_area.width - config.margin - config.heart_size
            assert config.margin <= heart.y <= play_area.height - config.margin - config.heart_size
            registry.remove_by_id(heart.heart_id)

    def test_tiny_area_pins_to_margin(self, spawner, registry, config):
        heart = spawner.maybe_spawn(registry, Resolution(width=20, height=20), now=0.0)
        assert heart.x == config.margin
        assert heart.y == config.margin

    def test_heart_registered_with_expiry(self, spawner, registry, scheduler, play_area):
        heart = spawner.maybe_spawn(registry, play_area, now=0.0)
        assert heart.heart_id in registry
        assert scheduler.pending() == 1


class TestLifetime:
    """Lifetimes drawn from the configured range."""

    def test_lifetime_in_range(self, spawner, registry, play_area, config):
        for _ in range(200):
            heart = spawner.maybe_spawn(registry, play_area, now=0.0)
            assert heart.created_at == 0.0
            assert config.lifetime_min <= heart.lifetime <= config.lifetime_max
            registry.remove_by_id(heart.heart_id)

    def test_fixed_lifetime(self, registry, play_area):
        spawner = HeartSpawner(HeartCatchConfig(lifetime_min=2.0, lifetime_max=2.0), random.Random(1))
        heart = spawner.maybe_spawn(registry, play_area, now=1.0)
        assert heart.expires_at == pytest.approx(3.0)


class TestHeartIds:
    """Each spawner numbers its own hearts."""

    def test_ids_count_up_per_spawner(self, config, scheduler, play_area):
        first = HeartSpawner(config, random.Random(1))
        second = HeartSpawner(config, random.Random(2))
        registry_a, registry_b = HeartRegistry(scheduler), HeartRegistry(scheduler)

        ids_a = [first.maybe_spawn(registry_a, play_area, now=0.0).heart_id for _ in range(3)]
        ids_b = [second.maybe_spawn(registry_b, play_area, now=0.0).heart_id for _ in range(2)]

        assert ids_a == [1, 2, 3]
        assert ids_b == [1, 2]
