"""
Direction value type: the four cardinal headings of the snake.
"""

from enum import Enum
from typing import Optional

from .constants import DEFAULT_KEYMAP, KEYMAPS


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        """Return the reverse heading (UP <-> DOWN, LEFT <-> RIGHT)."""
        return _OPPOSITES[self]

    @property
    def delta(self):
        """(dx, dy) step in screen coordinates, y grows downwards."""
        return _DELTAS[self]

    @classmethod
    def from_char(cls, symbol: str, keymap: str = DEFAULT_KEYMAP) -> Optional["Direction"]:
        """
        Convert a raw input symbol into a Direction.

        Unrecognized symbols return None, meaning "ignore this input".
        """
        name = KEYMAPS[keymap].get(symbol)
        if name is None:
            return None
        return cls(name)


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
