"""
Domain entities for the terminal Snake game.

This module contains the core game entities that are independent of
terminal concerns (curses windows, keyboards, rendering).
"""

from .constants import (
    DEFAULT_BOARD_WIDTH,
    DEFAULT_BOARD_HEIGHT,
    GAME_SPEED_MS,
    INPUT_POLL_MS,
    FOOD_RESPAWN_FRAMES,
    FOOD_MARGIN,
    KEYMAPS,
    DEFAULT_KEYMAP,
)
from .direction import Direction
from .point import Point
from .snapshot import BoardSnapshot
from .board import Board, BoardState, InvalidGameStateError

__all__ = [
    'DEFAULT_BOARD_WIDTH', 'DEFAULT_BOARD_HEIGHT', 'GAME_SPEED_MS', 'INPUT_POLL_MS',
    'FOOD_RESPAWN_FRAMES', 'FOOD_MARGIN', 'KEYMAPS', 'DEFAULT_KEYMAP',
    'Direction',
    'Point',
    'BoardSnapshot',
    'Board',
    'BoardState',
    'InvalidGameStateError',
]
