"""
Base input source interface for the game loop.
"""

from typing import List

from termsnake.domain import Key


class InputSource:
    """
    Base class/interface for key event producers.

    The driver loop polls the source once per tick and applies the
    returned events in order.
    """

    def start(self) -> None:
        """Begin collecting key events."""

    def poll(self) -> List[Key]:
        """
        Return the key events received since the last poll.

        Must not block.
        """
        raise NotImplementedError

    def stop(self) -> None:
        """Release any terminal or thread resources."""
