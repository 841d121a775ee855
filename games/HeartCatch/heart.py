"""
Heart entity for Heart Catch.

A heart is a transient clickable target: it appears somewhere in the play
area, lives for a few seconds, and is removed either when the player
clicks it or when its lifetime runs out.
"""

import itertools
from dataclasses import dataclass
from typing import Iterator

from models import HeartSnapshot, Point2D, Rectangle


def heart_id_generator() -> Iterator[int]:
    """Auto-incrementing heart ids, starting at 1. Each session owns one."""
    return itertools.count(1)


@dataclass(frozen=True)
class Heart:
    """One live heart.

    Position is the top-left corner of the heart's square footprint, the
    same convention the page uses for absolutely positioned elements.

    Attributes:
        heart_id: Unique identity
        x: Left edge in play-area pixels
        y: Top edge in play-area pixels
        size: Side length of the footprint in pixels
        created_at: Scheduler time when spawned
        expires_at: Scheduler time when it disappears if not caught
    """
    heart_id: int
    x: float
    y: float
    size: float
    created_at: float
    expires_at: float

    def __post_init__(self):
        if self.expires_at < self.created_at:
            raise ValueError(
                f"expires_at ({self.expires_at}) is before created_at ({self.created_at})"
            )

    @property
    def lifetime(self) -> float:
        return self.expires_at - self.created_at

    @property
    def footprint(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point lies on this heart's footprint."""
        return (self.x <= x <= self.x + self.size and
                self.y <= y <= self.y + self.size)

    def to_snapshot(self) -> HeartSnapshot:
        """Read-only projection for the page layer."""
        return HeartSnapshot(
            heart_id=self.heart_id,
            position=Point2D(x=self.x, y=self.y),
            size=self.size,
            created_at=self.created_at,
            expires_at=self.expires_at,
        )
