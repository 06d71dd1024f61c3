"""
Game constants for termsnake.
"""

from enum import Enum

# Board size, including the wall border
GAME_WIDTH = 30
GAME_HEIGHT = 20

# Timing, in milliseconds
GAME_TIME_INTERVAL_MS = 1000 / 60
NEW_FOOD_INTERVAL_MS = 2000
MOVE_INTERVAL_MS = 100

# Food settings
MAX_FOOD_COUNT = 3
FOOD_SCORE = 100
FOOD_MARGIN = 2


class Block(str, Enum):
    """Glyphs used to draw one cell of the board."""
    WALL = "🧱"
    PLAYER_HEAD = "😎"
    PLAYER_TAIL = "🟢"
    FOOD = "🐦"
    EMPTY = "  "


class Key(str, Enum):
    """Named input events delivered by an input source."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    START = "start"
    QUIT = "quit"
    FORCE_QUIT = "force_quit"
