"""
Renderer: turns a GameSession into a text frame without touching it.
"""

from typing import List

from termsnake.domain import (
    Block,
    GameSession,
    GameState,
    UnknownGameStateError,
    round_half_up,
)
from termsnake.engine import is_on_food, is_on_player_head, is_on_player_tail

WAITING_PROMPT = [
    "Press space bar on your keyboard to play!",
    "  Press escape on your keyboard to exit",
]


def game_over_prompt(score: int) -> List[str]:
    return [
        "                Game Over",
        f"              Your Score is {score}",
        "Press space bar on your keyboard to play again!",
        "     Press escape on your keyboard to exit",
    ]


def _centered_screen(height: int, block: List[str]) -> List[str]:
    """Blank rows with `block` starting at the middle row."""
    lines = [""] * height
    start = round_half_up(height / 2) - 1
    for offset, text in enumerate(block):
        if start + offset < height:
            lines[start + offset] = text
    return lines


def _cell(session: GameSession, x: int, y: int) -> Block:
    if session.is_border((x, y)):
        return Block.WALL
    if is_on_food(session, (x, y)):
        return Block.FOOD
    if is_on_player_head(session, (x, y)):
        return Block.PLAYER_HEAD
    if is_on_player_tail(session, (x, y)):
        return Block.PLAYER_TAIL
    return Block.EMPTY


def _game_screen(session: GameSession) -> List[str]:
    lines = []
    for y in range(1, session.height + 1):
        line = "".join(
            _cell(session, x, y).value for x in range(1, session.width + 1)
        )
        if y == session.height:
            line += f"Your Score: {session.score}"
        lines.append(line)
    return lines


def render(session: GameSession) -> str:
    """
    Build the frame for the session's current state.

    Returns exactly `session.height` lines joined by newlines.
    Raises UnknownGameStateError for a state outside GameState.
    """
    if session.state == GameState.WAITING:
        lines = _centered_screen(session.height, WAITING_PROMPT)
    elif session.state == GameState.PLAYING:
        lines = _game_screen(session)
    elif session.state == GameState.OVER:
        lines = _centered_screen(session.height, game_over_prompt(session.score))
    else:
        raise UnknownGameStateError(f"Cannot render game state {session.state!r}")
    return "\n".join(lines)
