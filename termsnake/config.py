"""
Runtime configuration: environment defaults, key bindings and logging setup.
"""

import logging
import os
from typing import Dict, Optional

from readchar import key as raw_keys

from termsnake.domain import Key

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Raw key strings as returned by readchar.readkey()
KEY_BINDINGS: Dict[str, Key] = {
    raw_keys.LEFT: Key.LEFT,
    raw_keys.RIGHT: Key.RIGHT,
    raw_keys.UP: Key.UP,
    raw_keys.DOWN: Key.DOWN,
    raw_keys.SPACE: Key.START,
    raw_keys.ESC: Key.QUIT,
    raw_keys.CTRL_C: Key.FORCE_QUIT,
}


def get_log_level() -> str:
    return os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[str]:
    return os.getenv("SNAKE_LOG_FILE") or None


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    Send logs to `log_file`, or drop them when no file is given.

    The terminal is the game screen, so nothing is ever logged to stdout/stderr.
    """
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[handler], force=True)
