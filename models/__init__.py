"""
Unified models library for the celebration page games.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Resolution, Rectangle)
- HeartCatch: Configuration and read-only projections for the Heart Catch
  mini-game

Usage:
    >>> from models import Point2D, Resolution
    >>> from models import HeartCatchConfig, SessionSnapshot
"""

from .primitives import (
    Point2D,
    Resolution,
    Rectangle,
)

from .heartcatch import (
    SessionEventKind,
    HeartCatchConfig,
    HeartSnapshot,
    SessionSnapshot,
    SessionEvent,
    UnlockResult,
)

__all__ = [
    # Primitives
    "Point2D",
    "Resolution",
    "Rectangle",
    # Heart Catch
    "SessionEventKind",
    "HeartCatchConfig",
    "HeartSnapshot",
    "SessionSnapshot",
    "SessionEvent",
    "UnlockResult",
]
