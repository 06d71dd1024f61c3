"""
Input handler: applies one key event to the session's direction or state.
"""

import logging
import sys

from termsnake.domain import Direction, GameSession, GameState, Key
from termsnake.engine import init_game

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
}


def _as_key(key):
    try:
        return Key(key)
    except ValueError:
        return None


def quit_game(session: GameSession, reason: str) -> None:
    logger.info("Quitting (%s) in state %s with score %d", reason, session.state.value, session.score)
    sys.exit(0)


def start_game(session: GameSession) -> None:
    previous = session.state
    init_game(session)
    session.state = GameState.PLAYING
    logger.info("State %s -> %s", previous.value, session.state.value)


def handle_input(session: GameSession, key) -> None:
    """
    Apply a key event. Unknown keys are ignored.

    Force-quit exits in every state. While playing only direction keys
    matter; otherwise only start and quit do.
    """
    key = _as_key(key)
    if key is None:
        return

    if key == Key.FORCE_QUIT:
        quit_game(session, "force quit")

    if session.state == GameState.PLAYING:
        direction = KEY_DIRECTIONS.get(key)
        if direction is None or direction == session.direction.opposite:
            return
        if direction != session.direction:
            logger.debug("Turning %s -> %s", session.direction.value, direction.value)
        session.direction = direction
    elif key == Key.START:
        start_game(session)
    elif key == Key.QUIT:
        quit_game(session, "quit")
