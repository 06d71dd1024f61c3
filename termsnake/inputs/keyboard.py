"""
Keyboard input source.

On POSIX terminals the reader owns the terminal mode for the whole game:
echo, line buffering and signal keys are switched off in start() and the
saved attributes are put back in stop(). Bytes are read straight from the
file descriptor so that a lone Escape can be told apart from an arrow key
sequence. Windows reads go through readchar.
"""

import logging
import os
import queue
import sys
import threading
from typing import Callable, Dict, List, Optional

import readchar
from readchar import key as raw_keys

from termsnake.config import KEY_BINDINGS
from termsnake.domain import Key
from .base import InputSource

if sys.platform != "win32":
    import select
    import termios
else:
    select = None
    termios = None

logger = logging.getLogger(__name__)

# How long to wait for the rest of an escape sequence before treating
# the Escape byte as a key of its own.
ESCAPE_DELAY_SECONDS = 0.025
POLL_INTERVAL_SECONDS = 0.1
READ_SIZE = 64

ESC = raw_keys.ESC
CSI_INTRODUCERS = ("[", "O")


class KeyboardInput(InputSource):
    """
    Reads keys on a daemon thread and queues their bound Key names.

    The reader thread never touches the game session; events are only
    applied when the driver loop polls.
    """

    def __init__(
        self,
        bindings: Optional[Dict[str, Key]] = None,
        stream=None,
        read_chunk: Optional[Callable[[float], str]] = None,
    ):
        self.bindings = KEY_BINDINGS if bindings is None else bindings
        self.stream = stream if stream is not None else sys.stdin
        if read_chunk is None:
            read_chunk = self._read_posix if termios is not None else self._read_windows
        self.read_chunk = read_chunk
        self.events: "queue.Queue[Key]" = queue.Queue()
        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._saved_attrs = None
        # Longest sequences first so "\x1b[D" wins over "\x1b"
        self._sequences = sorted(self.bindings, key=len, reverse=True)

    def _match(self, text: str, i: int) -> Optional[str]:
        for sequence in self._sequences:
            if text.startswith(sequence, i):
                return sequence
        return None

    def decode(self, text: str) -> List[Key]:
        """
        Split raw terminal text into bound keys.

        A bare Escape maps through the bindings like any other key. An
        Escape that introduces an unbound CSI/SS3 sequence (function keys,
        modified arrows) is skipped together with the rest of the sequence.
        """
        keys = []
        i = 0
        while i < len(text):
            sequence = self._match(text, i)
            starts_sequence = text[i] == ESC and text[i + 1:i + 2] in CSI_INTRODUCERS
            if starts_sequence and (sequence is None or sequence == ESC):
                i = self._skip_escape_sequence(text, i)
                continue
            if sequence is None:
                logger.debug("Ignoring unbound key %r", text[i])
                i += 1
                continue
            keys.append(self.bindings[sequence])
            i += len(sequence)
        return keys

    @staticmethod
    def _skip_escape_sequence(text: str, start: int) -> int:
        i = start + 2
        while i < len(text) and not ("\x40" <= text[i] <= "\x7e"):
            i += 1
        logger.debug("Ignoring unbound sequence %r", text[start:i + 1])
        return i + 1

    def _read_posix(self, timeout: float) -> str:
        fd = self.stream.fileno()
        if not select.select([fd], [], [], timeout)[0]:
            return ""
        data = os.read(fd, READ_SIZE)
        while _ends_mid_escape(data) and select.select([fd], [], [], ESCAPE_DELAY_SECONDS)[0]:
            more = os.read(fd, READ_SIZE)
            if not more:
                break
            data += more
        return data.decode("utf-8", errors="ignore")

    def _read_windows(self, timeout: float) -> str:
        return readchar.readkey()

    def read_once(self, timeout: float = POLL_INTERVAL_SECONDS) -> None:
        """Wait up to `timeout` for input and queue every bound key in it."""
        try:
            text = self.read_chunk(timeout)
        except KeyboardInterrupt:
            # readchar turns Ctrl+C into KeyboardInterrupt
            text = raw_keys.CTRL_C

        for key in self.decode(text):
            self.events.put(key)
            if key == Key.FORCE_QUIT:
                self._running.clear()

    def _reader(self) -> None:
        while self._running.is_set():
            self.read_once()

    def _enter_key_mode(self) -> None:
        if termios is None or not self.stream.isatty():
            return
        fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        mode = termios.tcgetattr(fd)
        mode[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        mode[6][termios.VMIN] = 1
        mode[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, mode)

    def _restore_terminal(self) -> None:
        if self._saved_attrs is None:
            return
        termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
        self._saved_attrs = None

    def start(self) -> None:
        self._enter_key_mode()
        self._running.set()
        self._thread = threading.Thread(target=self._reader, name="keyboard-reader", daemon=True)
        self._thread.start()

    def poll(self) -> List[Key]:
        keys = []
        while True:
            try:
                keys.append(self.events.get_nowait())
            except queue.Empty:
                return keys

    def stop(self) -> None:
        self._running.clear()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=POLL_INTERVAL_SECONDS * 2)
        self._restore_terminal()


def _ends_mid_escape(data: bytes) -> bool:
    return data.endswith(b"\x1b") or data.endswith(b"\x1b[") or data.endswith(b"\x1bO")
