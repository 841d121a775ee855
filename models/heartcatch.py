"""
Pydantic models for the Heart Catch mini-game.

These are the validated configuration and the read-only projections the
page layer consumes: snapshots of the session, notifications about what
changed, and the result of a surprise unlock attempt. The game itself keeps
its mutable state in plain classes; these models are built from that state
and never mutated.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, ConfigDict, model_validator

from celebration.games.game_state import GameState

from .primitives import Point2D, Resolution


class SessionEventKind(str, Enum):
    """What happened in a Heart Catch session.

    Attributes:
        STARTED: A Running phase began (score zeroed)
        SPAWNED: A heart was created by the spawn tick
        CAUGHT: A heart was clicked before it expired
        EXPIRED: A heart reached its deadline without a click
        MESSAGE: The encouragement message changed
        WON: Score reached the win threshold; session stopped
        RESET: The session was force-stopped by reset
    """
    STARTED = "started"
    SPAWNED = "spawned"
    CAUGHT = "caught"
    EXPIRED = "expired"
    MESSAGE = "message"
    WON = "won"
    RESET = "reset"


class HeartCatchConfig(BaseModel):
    """Validated tuning for a Heart Catch session.

    Times are in seconds. The defaults reproduce the reference page:
    a spawn tick every 650 ms, hearts living 7-13 s, at most 8 on screen,
    and a win at 30 catches.
    """
    model_config = ConfigDict(frozen=True)

    tick_interval: float = Field(default=0.65, gt=0, description="Seconds between spawn ticks")
    lifetime_min: float = Field(default=7.0, gt=0, description="Shortest heart lifetime")
    lifetime_max: float = Field(default=13.0, gt=0, description="Longest heart lifetime")
    max_hearts: int = Field(default=8, ge=1, description="Ceiling on simultaneous live hearts")
    win_score: int = Field(default=30, ge=1, description="Catches needed to win")
    message_every: int = Field(default=5, ge=1, description="New encouragement every N catches")
    margin: float = Field(default=6.0, ge=0, description="Gap kept between a heart and the area edge")
    heart_size: float = Field(default=48.0, gt=0, description="Heart footprint (square) in pixels")

    @model_validator(mode='after')
    def validate_lifetime_range(self) -> 'HeartCatchConfig':
        """Ensure the lifetime range is ordered."""
        if self.lifetime_min > self.lifetime_max:
            raise ValueError(
                f"lifetime_min ({self.lifetime_min}) must not exceed lifetime_max ({self.lifetime_max})"
            )
        return self


class HeartSnapshot(BaseModel):
    """Read-only view of one live heart, for rendering."""
    model_config = ConfigDict(frozen=True)

    heart_id: int
    position: Point2D
    size: float = Field(..., gt=0)
    created_at: float
    expires_at: float

    @property
    def lifetime(self) -> float:
        return self.expires_at - self.created_at


class SessionSnapshot(BaseModel):
    """Read-only view of a whole session at one instant.

    Built in one step after a command or tick has finished, so state and
    hearts always belong to the same moment.
    """
    model_config = ConfigDict(frozen=True)

    state: GameState
    score: int = Field(..., ge=0)
    message: str
    hearts: Tuple[HeartSnapshot, ...] = ()
    play_area: Optional[Resolution] = None
    time: float = 0.0


class SessionEvent(BaseModel):
    """Notification sent to listeners after a session change is complete."""
    model_config = ConfigDict(frozen=True)

    kind: SessionEventKind
    time: float
    score: int = Field(..., ge=0)
    message: str
    heart_id: Optional[int] = None
    position: Optional[Point2D] = None


class UnlockResult(BaseModel):
    """Outcome of one surprise unlock attempt."""
    model_config = ConfigDict(frozen=True)

    unlocked: bool
    attempts: int = Field(..., ge=0)
    hint: Optional[str] = None
