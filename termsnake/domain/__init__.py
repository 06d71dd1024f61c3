"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
terminal concerns (key reading, screen writing).
"""

from .constants import (
    GAME_WIDTH, GAME_HEIGHT, GAME_TIME_INTERVAL_MS, NEW_FOOD_INTERVAL_MS,
    MOVE_INTERVAL_MS, MAX_FOOD_COUNT, FOOD_SCORE, FOOD_MARGIN, Block, Key,
)
from .snake import Direction, Position, Snake
from .game_state import GameState, GameSession, UnknownGameStateError, round_half_up

__all__ = [
    'GAME_WIDTH', 'GAME_HEIGHT', 'GAME_TIME_INTERVAL_MS', 'NEW_FOOD_INTERVAL_MS',
    'MOVE_INTERVAL_MS', 'MAX_FOOD_COUNT', 'FOOD_SCORE', 'FOOD_MARGIN',
    'Block', 'Key',
    'Direction', 'Position', 'Snake',
    'GameState', 'GameSession', 'UnknownGameStateError', 'round_half_up',
]
