"""
Renderers for board snapshots.

Renderers only ever see a BoardSnapshot; they have no write access to the
board itself.
"""

import curses
import sys
from typing import TextIO

from domain.point import Point
from domain.snapshot import BoardSnapshot

SNAKE_GLYPH = 'X'
FOOD_GLYPH = 'O'


class Renderer:
    """Base class/interface for renderers."""

    def draw(self, snapshot: BoardSnapshot):
        raise NotImplementedError


class CursesRenderer(Renderer):
    """Clears and redraws the whole board in a curses window every frame."""

    def __init__(self, window):
        self.window = window

    def draw(self, snapshot: BoardSnapshot):
        self.window.clear()
        for segment in snapshot.snake:
            self._put(segment, SNAKE_GLYPH)
        if snapshot.food is not None:
            self._put(snapshot.food, FOOD_GLYPH)
        self.window.refresh()

    def _put(self, point: Point, glyph: str):
        try:
            self.window.addch(point.y, point.x, glyph)
        except curses.error:
            # Outside the visible window (or the bottom-right cell)
            pass


class TextRenderer(Renderer):
    """Writes each frame as a plain-text grid, used for headless runs."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout

    def draw(self, snapshot: BoardSnapshot):
        self.stream.write(snapshot.print_board() + "\n\n")
        self.stream.flush()
