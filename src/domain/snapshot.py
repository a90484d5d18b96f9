"""
BoardSnapshot entity - a read-only view of the board at a point in time.
"""

from typing import Optional, Tuple

from .direction import Direction
from .point import Point


class BoardSnapshot:
    """
    A snapshot of the board handed to renderers and input sources.

    Attributes:
        width, height: board dimensions
        state: BoardState of the board when the snapshot was taken
        snake: tuple of Points, tail first and head last
        food: position of the food, or None
        pending_direction: heading that the next move will use
        frames_since_food: respawn counter
    """

    def __init__(
        self,
        width: int,
        height: int,
        state,
        snake: Tuple[Point, ...],
        food: Optional[Point],
        pending_direction: Direction,
        frames_since_food: int = 0
    ):
        self.width = width
        self.height = height
        self.state = state
        self.snake = tuple(snake)
        self.food = food
        self.pending_direction = pending_direction
        self.frames_since_food = frames_since_food

    @property
    def head(self) -> Optional[Point]:
        return self.snake[-1] if self.snake else None

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        O = food
        X = snake body
        H = snake head

        The grid covers columns 0..width and rows 0..height inclusive, so the
        wall cells on the far edges are visible too.
        """
        board = [['.' for _ in range(self.width + 1)] for _ in range(self.height + 1)]

        if self.food is not None and self._visible(self.food):
            board[self.food.y][self.food.x] = 'O'

        for idx, segment in enumerate(self.snake):
            if not self._visible(segment):
                continue
            board[segment.y][segment.x] = 'H' if idx == len(self.snake) - 1 else 'X'

        return "\n".join("".join(row) for row in board)

    def _visible(self, point: Point) -> bool:
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height

    def __repr__(self):
        return (
            f"<BoardSnapshot state={self.state.name}, length={len(self.snake)}, "
            f"head={self.head}, food={self.food}>"
        )
