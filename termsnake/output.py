"""
Terminal output sink: clears the screen and writes one frame.
"""

import sys

WINDOWS_CLEAR = "\x1b[2J\x1b[0f"
ANSI_CLEAR = "\x1b[2J\x1b[3J\x1b[H"


def clear_sequence(platform: str = sys.platform) -> str:
    return WINDOWS_CLEAR if platform == "win32" else ANSI_CLEAR


class TerminalOutput:
    """Writes full frames to a text stream, replacing the previous frame."""

    def __init__(self, stream=None, platform: str = sys.platform):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear_sequence(platform)

    def write(self, frame: str) -> None:
        self.stream.write(self.clear + frame + "\n")
        self.stream.flush()
