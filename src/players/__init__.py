"""
Input sources for the terminal Snake game.

A player is polled by the frame loop and answers with an optional
Direction for the snake.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
]
