"""
Base input source interface for the frame loop.
"""

from typing import Optional

from domain.direction import Direction
from domain.snapshot import BoardSnapshot


class Player:
    """
    Base class/interface for input sources.

    The frame loop polls get_control() repeatedly during each frame window;
    every Direction returned overwrites the board's pending direction.
    """

    def get_control(self, snapshot: BoardSnapshot) -> Optional[Direction]:
        """
        Return the latest control, or None if there is no new input.

        Args:
            snapshot: Board state as of the previous frame

        Returns:
            A Direction, or None to leave the pending direction unchanged
        """
        raise NotImplementedError
