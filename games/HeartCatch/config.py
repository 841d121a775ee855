"""
Heart Catch - Configuration loader.

Loads settings from the .env file in the game directory, with sensible
defaults. A .env.local next to it overrides .env, and real environment
variables override both.
"""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

from models import HeartCatchConfig

GAME_DIR = Path(__file__).parent

# Real env vars win: load_dotenv never overrides what is already set
load_dotenv(GAME_DIR / '.env.local')
load_dotenv(GAME_DIR / '.env')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 960)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 540)

# Timing (seconds)
TICK_INTERVAL: float = _get_float('TICK_INTERVAL', 0.65)
HEART_LIFETIME_MIN: float = _get_float('HEART_LIFETIME_MIN', 7.0)
HEART_LIFETIME_MAX: float = _get_float('HEART_LIFETIME_MAX', 13.0)
POP_DURATION: float = _get_float('POP_DURATION', 0.22)

# Rules
MAX_HEARTS: int = _get_int('MAX_HEARTS', 8)
WIN_SCORE: int = _get_int('WIN_SCORE', 30)
MESSAGE_EVERY: int = _get_int('MESSAGE_EVERY', 5)

# Layout (pixels)
HEART_MARGIN: float = _get_float('HEART_MARGIN', 6)
HEART_SIZE: float = _get_float('HEART_SIZE', 48)

# Surprise unlock
SURPRISE_PASSWORD: str = os.getenv('SURPRISE_PASSWORD', 'roshni18')

# Messages shown under the score
START_MESSAGE = 'Catch them all!'
RESET_MESSAGE = 'Reset — start again!'
WIN_MESSAGE = 'You win! Check the surprise ❤️'
ENCOURAGEMENTS: Tuple[str, ...] = (
    'So cute!',
    'You make my heart flutter',
    'Keep going, love',
    'I adore you',
)
UNLOCK_RETRY_HINT = 'Try again ❤️'

# Colors (not configurable via .env)
BACKGROUND_COLOR: Tuple[int, int, int] = (255, 240, 245)   # Lavender blush
HEART_COLOR: Tuple[int, int, int] = (255, 111, 145)
HEART_HIGHLIGHT_COLOR: Tuple[int, int, int] = (255, 209, 230)
TEXT_COLOR: Tuple[int, int, int] = (90, 40, 70)
POP_COLOR: Tuple[int, int, int] = (255, 209, 102)


def default_config() -> HeartCatchConfig:
    """Build a validated HeartCatchConfig from the loaded settings."""
    return HeartCatchConfig(
        tick_interval=TICK_INTERVAL,
        lifetime_min=HEART_LIFETIME_MIN,
        lifetime_max=HEART_LIFETIME_MAX,
        max_hearts=MAX_HEARTS,
        win_score=WIN_SCORE,
        message_every=MESSAGE_EVERY,
        margin=HEART_MARGIN,
        heart_size=HEART_SIZE,
    )
