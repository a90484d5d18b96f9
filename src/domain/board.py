"""
Board entity - owns the full mutable game state.

The board is advanced one frame at a time by update(), which runs the
transition sequence in a fixed order:

    1. check_collision_death
    2. check_collision_food
    3. move_snake
    4. chop_tail
    5. spawn_food
"""

import logging
import random
from collections import deque
from enum import Enum
from typing import Optional

from .constants import FOOD_MARGIN, FOOD_RESPAWN_FRAMES, INITIAL_SNAKE_LENGTH
from .direction import Direction
from .point import Point
from .snapshot import BoardSnapshot

logger = logging.getLogger(__name__)


class BoardState(Enum):
    RUNNING = "running"
    FRUIT_COLLECTED = "fruit_collected"
    GAME_OVER = "game_over"


class InvalidGameStateError(RuntimeError):
    """Raised when the in-memory model is corrupted, e.g. the snake is empty."""


class Board:
    """
    Represents the game board.

    Attributes:
        width, height: fixed grid bounds
        state: current BoardState
        pending_direction: Direction used by the next move
        snake: deque of Points from tail (index 0) to head (last element)
        food: the single food Point, or None
        frames_since_food: frames elapsed without food on the board
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width <= 2 * FOOD_MARGIN or height <= 2 * FOOD_MARGIN:
            raise ValueError(
                f"Board {width}x{height} is too small, both sides must exceed {2 * FOOD_MARGIN}."
            )

        self._width = width
        self._height = height
        self._rng = rng or random.Random()

        self.state = BoardState.RUNNING
        self.pending_direction = Direction.RIGHT

        head = Point(width // 2, height // 2)
        self.snake = deque(
            Point(head.x - offset, head.y)
            for offset in range(INITIAL_SNAKE_LENGTH - 1, -1, -1)
        )
        self.food: Optional[Point] = None
        self.frames_since_food = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def head(self) -> Point:
        """Return the head position (last element)."""
        if not self.snake:
            raise InvalidGameStateError("Invalid game state, snake is empty")
        return self.snake[-1]

    @property
    def game_over(self) -> bool:
        return self.state is BoardState.GAME_OVER

    def get_next_point(self) -> Point:
        """Return the cell the head moves into given pending_direction."""
        return self.head.shifted(self.pending_direction)

    def is_wall(self, point: Point) -> bool:
        """Coordinates 0 and width/height both count as wall."""
        return (point.x <= 0 or point.x >= self._width
                or point.y <= 0 or point.y >= self._height)

    def change_control(self, direction: Direction):
        """Overwrite the pending direction. Reversals are not vetoed."""
        self.pending_direction = direction

    def check_collision_death(self):
        """
        Check for collisions against the walls and the snake itself.

        Sets the state to GAME_OVER if any segment sits on a wall cell, or if
        the next head position overlaps any current segment.
        """
        if not self.snake:
            raise InvalidGameStateError("Invalid game state, snake is empty")

        for segment in self.snake:
            if self.is_wall(segment):
                logger.debug(f"Wall collision at {segment}")
                self.state = BoardState.GAME_OVER
                return

        next_point = self.get_next_point()
        if next_point in self.snake:
            logger.debug(f"Self collision moving {self.pending_direction.name} into {next_point}")
            self.state = BoardState.GAME_OVER

    def check_collision_food(self):
        """Collect the food if the current head sits on it."""
        if self.state is BoardState.GAME_OVER or self.food is None:
            return

        if self.food == self.head:
            logger.debug(f"Food collected at {self.food}")
            self.state = BoardState.FRUIT_COLLECTED
            self.food = None

    def move_snake(self):
        """Append the next head position. Always grows the snake by one."""
        if self.state is BoardState.GAME_OVER:
            return

        self.snake.append(self.get_next_point())

    def chop_tail(self):
        """
        Remove the tail segment.

        A FRUIT_COLLECTED board keeps its tail for this frame (growth) and
        goes back to RUNNING.
        """
        if self.state is BoardState.FRUIT_COLLECTED:
            self.state = BoardState.RUNNING
            return

        if self.state is not BoardState.RUNNING:
            return

        if not self.snake:
            raise InvalidGameStateError("Invalid game state, snake is empty")
        self.snake.popleft()

    def spawn_food(self):
        """
        Place food once the board has been without it for FOOD_RESPAWN_FRAMES.

        The cell is picked uniformly from the region inset by FOOD_MARGIN on
        every side. It is not checked against the snake body.
        """
        if self.food is not None:
            return

        if self.frames_since_food < FOOD_RESPAWN_FRAMES:
            self.frames_since_food += 1
            return

        self.food = Point(
            self._rng.randrange(FOOD_MARGIN, self._width - FOOD_MARGIN),
            self._rng.randrange(FOOD_MARGIN, self._height - FOOD_MARGIN),
        )
        self.frames_since_food = 0
        logger.debug(f"Food spawned at {self.food}")

    def update(self):
        """Run one frame of the transition sequence."""
        if self.state is BoardState.GAME_OVER:
            return

        self.check_collision_death()
        self.check_collision_food()
        self.move_snake()
        self.chop_tail()
        self.spawn_food()

    def snapshot(self) -> BoardSnapshot:
        """Return a read-only copy of the current board."""
        return BoardSnapshot(
            width=self._width,
            height=self._height,
            state=self.state,
            snake=tuple(self.snake),
            food=self.food,
            pending_direction=self.pending_direction,
            frames_since_food=self.frames_since_food,
        )

    def __repr__(self):
        return (
            f"<Board {self._width}x{self._height} state={self.state.name}, "
            f"snake={list(self.snake)}, food={self.food}>"
        )
