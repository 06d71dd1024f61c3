"""
GameState machine values and the GameSession aggregate.
"""

import math
from enum import Enum
from typing import List

from .constants import GAME_HEIGHT, GAME_WIDTH
from .snake import Direction, Position, Snake


class GameState(str, Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    OVER = "over"


class UnknownGameStateError(ValueError):
    """Raised when a session holds a state the game does not know how to handle."""


def round_half_up(value: float) -> int:
    """Round halves away from zero for positive values (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


class GameSession:
    """
    All mutable state of one running game.

    Attributes:
        width, height: board dimensions, wall border included
        state: current GameState
        direction: direction the head moves on the next step
        player: the Snake, head first
        foods: list of (x, y) food positions
        score: points collected since the last (re)start
        time_since_last_food: ms accumulated since the last spawn attempt
        time_since_last_move: ms accumulated since the last movement step
    """

    def __init__(self, width: int = GAME_WIDTH, height: int = GAME_HEIGHT):
        self.width = width
        self.height = height
        self.state = GameState.WAITING
        self.direction = Direction.LEFT
        self.player = Snake([self.center])
        self.foods: List[Position] = []
        self.score = 0
        self.time_since_last_food = 0.0
        self.time_since_last_move = 0.0

    @property
    def center(self) -> Position:
        return (round_half_up(self.width / 2), round_half_up(self.height / 2))

    def is_border(self, position: Position) -> bool:
        x, y = position
        return x in (1, self.width) or y in (1, self.height)

    def __repr__(self):
        return (
            f"<GameSession state={self.state.value}, head={self.player.head}, "
            f"length={len(self.player)}, foods={self.foods}, score={self.score}>"
        )
