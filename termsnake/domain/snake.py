"""
Snake entity for the game engine.
"""

from collections import deque
from enum import Enum
from typing import List, Optional, Tuple

Position = Tuple[int, int]


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) for one step; y grows downwards."""
        return _DELTAS[self]

    def step(self, position: Position) -> Position:
        dx, dy = self.delta
        return (position[0] + dx, position[1] + dy)


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        death_reason: 'wall' or 'self' once the snake has crashed
    """

    def __init__(self, positions: List[Position]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> List[Position]:
        """Return every segment except the head."""
        return list(self.positions)[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position: Position) -> bool:
        return position in self.positions
