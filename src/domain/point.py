"""
Point entity - a single cell on the board.
"""

from typing import NamedTuple

from .direction import Direction


class Point(NamedTuple):
    """
    An immutable grid coordinate.

    Used for both snake segments and the food position. Bounds are not
    validated here; wall detection belongs to the Board.
    """

    x: int
    y: int

    def shifted(self, direction: Direction) -> "Point":
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def __repr__(self):
        return f"({self.x},{self.y})"
