"""
Tests for the input sources.
"""

import curses
import os
import random
import sys
from unittest.mock import Mock

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import BoardSnapshot, BoardState, Direction, Point  # noqa: E402
from players import KeyboardPlayer, Player, RandomPlayer  # noqa: E402


def make_snapshot(snake, direction=Direction.RIGHT, width=10, height=10):
    return BoardSnapshot(
        width=width,
        height=height,
        state=BoardState.RUNNING,
        snake=tuple(Point(x, y) for x, y in snake),
        food=None,
        pending_direction=direction,
    )


class TestPlayerInterface:
    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_control(make_snapshot([(5, 5)]))


class TestKeyboardPlayer:
    """Tests for the curses keyboard player."""

    def _player(self, key, keymap="full"):
        window = Mock()
        window.getch = Mock(return_value=key)
        return KeyboardPlayer(window, keymap)

    def test_no_key_returns_none(self):
        """getch() == -1 means nothing was pressed."""
        player = self._player(-1)
        assert player.get_control(make_snapshot([(5, 5)])) is None

    @pytest.mark.parametrize("char,expected", [
        ("w", Direction.UP), ("a", Direction.LEFT),
        ("s", Direction.DOWN), ("d", Direction.RIGHT),
        ("k", Direction.DOWN), ("j", Direction.LEFT),
    ])
    def test_decodes_keys(self, char, expected):
        player = self._player(ord(char))
        assert player.get_control(make_snapshot([(5, 5)])) is expected

    def test_wasd_keymap_ignores_ijkl(self):
        player = self._player(ord("i"), keymap="wasd")
        assert player.get_control(make_snapshot([(5, 5)])) is None

    def test_function_keys_are_ignored(self):
        """Arrow keys and other curses key codes are silently dropped."""
        player = self._player(curses.KEY_UP)
        assert player.get_control(make_snapshot([(5, 5)])) is None

    def test_reads_one_key_per_poll(self):
        window = Mock()
        window.getch = Mock(side_effect=[ord("w"), ord("q"), -1])
        player = KeyboardPlayer(window)
        snapshot = make_snapshot([(5, 5)])

        assert player.get_control(snapshot) is Direction.UP
        assert player.get_control(snapshot) is None
        assert player.get_control(snapshot) is None
        assert window.getch.call_count == 3

    def test_unknown_keymap_raises(self):
        with pytest.raises(ValueError):
            KeyboardPlayer(Mock(), keymap="dvorak")


class TestRandomPlayer:
    """Tests for the autopilot."""

    def test_keeps_a_safe_heading(self):
        """No new control while the current direction is safe."""
        player = RandomPlayer(random.Random(0))
        snapshot = make_snapshot([(3, 5), (4, 5), (5, 5)], Direction.RIGHT)
        assert player.get_control(snapshot) is None

    def test_turns_away_from_the_wall(self):
        """Column 0 is a wall, so heading LEFT from (1,5) must change."""
        player = RandomPlayer(random.Random(0))
        snapshot = make_snapshot([(3, 5), (2, 5), (1, 5)], Direction.LEFT)

        for _ in range(20):
            assert player.get_control(snapshot) in {Direction.UP, Direction.DOWN}

    def test_avoids_its_own_body(self):
        player = RandomPlayer(random.Random(1))
        # Head at (5,5) heading UP into (5,4), which is body
        snapshot = make_snapshot([(4, 4), (5, 4), (6, 4), (6, 5), (5, 5)], Direction.UP)

        for _ in range(20):
            assert player.get_control(snapshot) in {Direction.LEFT, Direction.DOWN}

    def test_boxed_in_keeps_the_heading(self):
        """With no safe move left, no new control is produced on any poll."""
        player = RandomPlayer(random.Random(2))
        snapshot = make_snapshot([(1, 2), (2, 2), (2, 1), (1, 1)], Direction.UP)

        for _ in range(20):
            assert player.get_control(snapshot) is None

    def test_empty_snapshot_returns_none(self):
        player = RandomPlayer()
        assert player.get_control(make_snapshot([])) is None
