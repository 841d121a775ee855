"""
Heart Catch - Spawner.

Decides on each spawn tick whether a new heart appears, and where. At the
ceiling nothing is produced; that is ordinary backpressure, not an error.
"""
import random
from typing import Optional

from models import HeartCatchConfig, Resolution
from games.HeartCatch.heart import Heart, heart_id_generator
from games.HeartCatch.registry import ExpireCallback, HeartRegistry


class HeartSpawner:
    """Creates hearts at random positions with random lifetimes.

    Args:
        config: Ceiling, lifetime range and layout
        rng: Random source (inject a seeded random.Random for repeatable runs)
    """

    def __init__(self, config: HeartCatchConfig, rng: Optional[random.Random] = None):
        self._config = config
        self._rng = rng if rng is not None else random.Random()
        self._ids = heart_id_generator()

    @property
    def ceiling(self) -> int:
        return self._config.max_hearts

    def can_spawn(self, registry: HeartRegistry) -> bool:
        return registry.count() < self._config.max_hearts

    def maybe_spawn(
        self,
        registry: HeartRegistry,
        bounds: Resolution,
        now: float,
        on_expire: Optional[ExpireCallback] = None,
    ) -> Optional[Heart]:
        """Spawn one heart if the registry is below the ceiling.

        The heart is registered immediately, which also schedules its expiry.

        Args:
            registry: Live hearts
            bounds: Current play-area size
            now: Current scheduler time (the heart's creation time)
            on_expire: Passed to the registry for the expiry path

        Returns:
            The new heart, or None when at the ceiling
        """
        if not self.can_spawn(registry):
            return None

        heart = self._create(bounds, now)
        registry.add(heart, on_expire)
        return heart

    def _create(self, bounds: Resolution, now: float) -> Heart:
        cfg = self._config
        lifetime = self._rng.uniform(cfg.lifetime_min, cfg.lifetime_max)
        return Heart(
            heart_id=next(self._ids),
            x=self._coordinate(bounds.width),
            y=self._coordinate(bounds.height),
            size=cfg.heart_size,
            created_at=now,
            expires_at=now + lifetime,
        )

    def _coordinate(self, extent: float) -> float:
        """Uniform position along one axis keeping the footprint inside the area.

        An area too small for margin + footprint pins the heart at the margin.
        """
        low = self._config.margin
        high = extent - self._config.margin - self._config.heart_size
        if high <= low:
            return low
        return self._rng.uniform(low, high)
