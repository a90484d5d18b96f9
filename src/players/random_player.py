"""
Random player implementation - an autopilot that picks safe moves.
"""

import random
from typing import List, Optional

from domain.direction import Direction
from domain.point import Point
from domain.snapshot import BoardSnapshot
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that keeps its heading while it is safe and otherwise picks
    a random direction that avoids walls and self-collisions. When boxed in
    it leaves the heading alone.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_control(self, snapshot: BoardSnapshot) -> Optional[Direction]:
        if not snapshot.snake:
            return None

        head = snapshot.snake[-1]
        if self._is_safe(snapshot, head.shifted(snapshot.pending_direction)):
            return None

        valid_moves: List[Direction] = [
            direction for direction in Direction
            if self._is_safe(snapshot, head.shifted(direction))
        ]

        # If no valid moves, keep the heading (we'll die anyway).
        if not valid_moves:
            return None

        return self.rng.choice(valid_moves)

    @staticmethod
    def _is_safe(snapshot: BoardSnapshot, point: Point) -> bool:
        # The board treats coordinate 0 and width/height as wall
        if (point.x <= 0 or point.x >= snapshot.width or
                point.y <= 0 or point.y >= snapshot.height):
            return False

        return point not in snapshot.snake
