"""
Input source implementations.
"""

from celebration.games.input.sources.base import InputSource
from celebration.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
