"""
Keyboard player - reads single keystrokes from a curses window.
"""

import logging
from typing import Optional

from domain.constants import DEFAULT_KEYMAP, KEYMAPS
from domain.direction import Direction
from domain.snapshot import BoardSnapshot
from .base import Player

logger = logging.getLogger(__name__)

NO_KEY = -1


class KeyboardPlayer(Player):
    """
    Polls a curses window for at most one buffered key per call.

    The window is expected to be in non-blocking mode (nodelay), so
    getch() returns -1 when nothing was pressed.
    """

    def __init__(self, window, keymap: str = DEFAULT_KEYMAP):
        if keymap not in KEYMAPS:
            raise ValueError(f"Unknown keymap '{keymap}'. Choose from: {sorted(KEYMAPS)}")
        self.window = window
        self.keymap = keymap

    def get_control(self, snapshot: BoardSnapshot) -> Optional[Direction]:
        key = self.window.getch()
        if key == NO_KEY:
            return None

        # Function keys (arrows, resize, ...) are above the byte range
        if not 0 <= key < 256:
            return None

        direction = Direction.from_char(chr(key), self.keymap)
        if direction is not None:
            logger.debug(f"Key {chr(key)!r} -> {direction.name}")
        return direction
