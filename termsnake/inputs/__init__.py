"""
Input sources that feed key events into the game loop.
"""

from .base import InputSource
from .keyboard import KeyboardInput

__all__ = [
    'InputSource',
    'KeyboardInput',
]
