"""
Curses window setup for the interactive game.
"""

import curses
import logging

logger = logging.getLogger(__name__)


def setup_window(stdscr):
    """
    Configure the curses screen for the game.

    Input becomes non-blocking: getch() returns -1 at once when no key is
    buffered, so the frame loop alone decides how long to idle between polls.
    """
    try:
        curses.curs_set(0)
    except curses.error:
        # Some terminals cannot hide the cursor
        logger.debug("Terminal does not support cursor visibility changes")
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(True)
    stdscr.attrset(curses.A_BOLD)
    return stdscr
