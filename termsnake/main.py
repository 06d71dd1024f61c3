"""
Driver loop and command line entry point for termsnake.
"""

import argparse
import logging
import random
import sys
import time
from typing import Optional

from dotenv import load_dotenv

from termsnake.config import configure_logging, get_log_file, get_log_level
from termsnake.domain import GAME_TIME_INTERVAL_MS, GameSession, UnknownGameStateError
from termsnake.engine import update
from termsnake.input_handler import handle_input
from termsnake.inputs import InputSource, KeyboardInput
from termsnake.output import TerminalOutput
from termsnake.renderer import render

logger = logging.getLogger(__name__)


def run_game_loop(
    session: GameSession,
    input_source: InputSource,
    output,
    rng=random,
    clock=time.monotonic,
    sleep=time.sleep,
    tick_interval: float = GAME_TIME_INTERVAL_MS,
    max_ticks: Optional[int] = None,
) -> int:
    """
    Run fixed-interval ticks until the process is asked to quit.

    Each tick applies pending key events, updates the session with the
    wall-clock time since the previous tick, then renders and writes a
    frame. Drift is not corrected. Returns the number of ticks run, which
    only happens when `max_ticks` is given.
    """
    last_update = clock()
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        tick_start = clock()

        for key in input_source.poll():
            handle_input(session, key)

        delta = (tick_start - last_update) * 1000
        last_update = tick_start

        update(session, delta, rng)
        output.write(render(session))
        ticks += 1

        remaining = tick_interval / 1000 - (clock() - tick_start)
        if remaining > 0:
            sleep(remaining)
    return ticks


def main(argv=None):
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. Arrow keys steer, space starts, escape quits."
    )
    parser.add_argument("--log-level", type=str, default=get_log_level(),
                        help="Logging level (default from SNAKE_LOG_LEVEL, else WARNING)")
    parser.add_argument("--log-file", type=str, default=get_log_file(),
                        help="File to write logs to (default from SNAKE_LOG_FILE; no logs when unset)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement, for reproducible games")
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper(), args.log_file)
    logger.info("Starting termsnake (seed=%s)", args.seed)

    session = GameSession()
    input_source = KeyboardInput()
    output = TerminalOutput()

    input_source.start()
    try:
        run_game_loop(session, input_source, output, rng=random.Random(args.seed))
    except UnknownGameStateError as e:
        logger.critical("Cannot continue: %s", e)
        sys.exit(1)
    finally:
        input_source.stop()


if __name__ == "__main__":
    main()
