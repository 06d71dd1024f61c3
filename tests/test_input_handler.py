"""
Tests for the input handler and the state transitions it drives.
"""

import os
import random
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.domain import Direction, GameSession, GameState, Key, Snake
from termsnake.engine import init_game
from termsnake.input_handler import handle_input

DIRECTION_KEYS = [Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN]


def playing_session():
    session = GameSession()
    init_game(session)
    session.state = GameState.PLAYING
    return session


class TestWhilePlaying:
    """Direction changes while the game runs."""

    def test_reverse_is_rejected(self):
        session = playing_session()
        handle_input(session, Key.RIGHT)
        assert session.direction == Direction.LEFT

    def test_turn_is_accepted(self):
        session = playing_session()
        handle_input(session, Key.UP)
        assert session.direction == Direction.UP
        handle_input(session, Key.RIGHT)
        assert session.direction == Direction.RIGHT

    def test_string_key_names_accepted(self):
        session = playing_session()
        handle_input(session, "down")
        assert session.direction == Direction.DOWN

    def test_never_accepts_opposite(self):
        """For any key sequence, no single event reverses the direction."""
        session = playing_session()
        rng = random.Random(42)
        for _ in range(500):
            previous = session.direction
            handle_input(session, rng.choice(DIRECTION_KEYS))
            assert session.direction != previous.opposite

    def test_start_and_quit_ignored(self):
        """Start does not reset a running game and quit does nothing while playing."""
        session = playing_session()
        session.score = 500
        handle_input(session, Key.START)
        handle_input(session, Key.QUIT)
        assert session.state == GameState.PLAYING
        assert session.score == 500

    def test_unknown_keys_ignored(self):
        session = playing_session()
        handle_input(session, "x")
        handle_input(session, None)
        assert session.direction == Direction.LEFT
        assert session.state == GameState.PLAYING

    def test_force_quit_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            handle_input(playing_session(), Key.FORCE_QUIT)
        assert exc_info.value.code == 0


class TestWhileNotPlaying:
    """Start, quit and ignored keys on the waiting and game over screens."""

    @pytest.mark.parametrize("state", [GameState.WAITING, GameState.OVER])
    def test_direction_keys_are_no_ops(self, state):
        session = GameSession()
        session.state = state
        session.player = Snake([(7, 7), (8, 7)])
        for key in DIRECTION_KEYS:
            handle_input(session, key)
        assert session.direction == Direction.LEFT
        assert list(session.player.positions) == [(7, 7), (8, 7)]
        assert session.state == state

    def test_start_from_waiting(self):
        session = GameSession()
        handle_input(session, Key.START)
        assert session.state == GameState.PLAYING
        assert list(session.player.positions) == [(15, 10)]

    def test_restart_from_over_reinitializes(self):
        """Restarting clears score, food, timers and resets direction and snake."""
        session = playing_session()
        session.player = Snake([(1, 10), (2, 10), (3, 10)])
        session.direction = Direction.UP
        session.score = 900
        session.foods = [(5, 5)]
        session.time_since_last_move = 60
        session.state = GameState.OVER

        handle_input(session, Key.START)

        assert session.state == GameState.PLAYING
        assert session.score == 0
        assert session.foods == []
        assert list(session.player.positions) == [(15, 10)]
        assert session.direction == Direction.LEFT
        assert session.time_since_last_move == 0
        assert session.time_since_last_food == 0

    @pytest.mark.parametrize("state", [GameState.WAITING, GameState.OVER])
    def test_quit_exits(self, state):
        session = GameSession()
        session.state = state
        with pytest.raises(SystemExit) as exc_info:
            handle_input(session, Key.QUIT)
        assert exc_info.value.code == 0

    def test_force_quit_exits_while_waiting(self):
        with pytest.raises(SystemExit):
            handle_input(GameSession(), Key.FORCE_QUIT)
