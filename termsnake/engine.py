"""
Update engine: advances a GameSession by one tick.
"""

import logging
import random
from collections import deque
from itertools import islice
from typing import Optional

from termsnake.domain import (
    FOOD_MARGIN,
    FOOD_SCORE,
    MAX_FOOD_COUNT,
    MOVE_INTERVAL_MS,
    NEW_FOOD_INTERVAL_MS,
    Direction,
    GameSession,
    GameState,
    Position,
    Snake,
)

logger = logging.getLogger(__name__)


def init_game(session: GameSession) -> None:
    """Reset player, food, score, timers and direction for a fresh game."""
    session.player = Snake([session.center])
    session.score = 0
    session.foods = []
    session.time_since_last_food = 0.0
    session.time_since_last_move = 0.0
    session.direction = Direction.LEFT


def is_on_player_head(session: GameSession, position: Position) -> bool:
    return session.player.head == position


def is_on_player_tail(session: GameSession, position: Position) -> bool:
    return position in islice(session.player.positions, 1, None)


def is_on_player(session: GameSession, position: Position) -> bool:
    return is_on_player_head(session, position) or is_on_player_tail(session, position)


def is_on_food(session: GameSession, position: Position) -> bool:
    return position in session.foods


def spawn_food(session: GameSession, rng=random) -> Optional[Position]:
    """
    Try to place one food inside the inset sub-grid.

    The candidate is dropped, without retrying, when it lands on the player.
    Returns the new food position, or None if nothing was added.
    """
    if len(session.foods) >= MAX_FOOD_COUNT:
        return None

    candidate = (
        rng.randint(1 + FOOD_MARGIN, session.width - FOOD_MARGIN),
        rng.randint(1 + FOOD_MARGIN, session.height - FOOD_MARGIN),
    )
    if is_on_player(session, candidate):
        logger.debug("Discarded food candidate %s under the player", candidate)
        return None

    session.foods.append(candidate)
    logger.debug("Spawned food at %s (%d on board)", candidate, len(session.foods))
    return candidate


def move_player(session: GameSession) -> None:
    """Advance the head one cell; every other segment follows its predecessor."""
    positions = list(session.player.positions)
    new_head = session.direction.step(positions[0])
    session.player.positions = deque([new_head] + positions[:-1])


def consume_food(session: GameSession) -> bool:
    """
    Eat at most one food under the head.

    Growth prepends a new head one cell further ahead, so the head that just
    moved becomes the second segment.
    """
    head = session.player.head
    for i, food in enumerate(session.foods):
        if food == head:
            del session.foods[i]
            session.player.positions.appendleft(session.direction.step(head))
            session.score += FOOD_SCORE
            logger.debug("Ate food at %s, score is now %d", food, session.score)
            return True
    return False


def check_collision(session: GameSession) -> bool:
    """Return True (and record why) if the head hit a wall or the body."""
    head = session.player.head
    if session.is_border(head):
        session.player.death_reason = "wall"
        return True
    if is_on_player_tail(session, head):
        session.player.death_reason = "self"
        return True
    return False


def update(session: GameSession, delta: float, rng=random) -> None:
    """
    Execute one tick:
      1) Do nothing unless the game is being played
      2) Accumulate the elapsed time into both timers
      3) Attempt a food spawn once the spawn interval has passed
      4) Once the move interval has passed, move, eat and check collisions
    """
    if session.state != GameState.PLAYING:
        return

    session.time_since_last_food += delta
    session.time_since_last_move += delta

    if (
        len(session.foods) < MAX_FOOD_COUNT
        and session.time_since_last_food > NEW_FOOD_INTERVAL_MS
    ):
        spawn_food(session, rng)
        session.time_since_last_food = 0.0

    if session.time_since_last_move <= MOVE_INTERVAL_MS:
        return

    move_player(session)
    consume_food(session)

    if check_collision(session):
        session.state = GameState.OVER
        logger.info(
            "Game over: hit %s at %s with score %d",
            session.player.death_reason, session.player.head, session.score,
        )

    session.time_since_last_move = 0.0
