"""
Runtime settings for the terminal Snake game.

Values come from environment variables (a .env file is honoured when the
entry point calls load_dotenv()) and fall back to the defaults in
domain.constants:

- SNAKE_BOARD_WIDTH / SNAKE_BOARD_HEIGHT: board size in cells
- SNAKE_GAME_SPEED_MS: frame interval in milliseconds
- SNAKE_INPUT_POLL_MS: input poll interval in milliseconds
- SNAKE_KEYMAP: 'full' (wasd + ijkl) or 'wasd'
- SNAKE_LOG_LEVEL: logging level name
- SNAKE_LOG_FILE: write logs to this file instead of stderr
"""

import os
from dataclasses import dataclass
from typing import Optional

from domain.constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_KEYMAP,
    GAME_SPEED_MS,
    INPUT_POLL_MS,
    KEYMAPS,
)

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class GameSettings:
    width: int = DEFAULT_BOARD_WIDTH
    height: int = DEFAULT_BOARD_HEIGHT
    speed_ms: int = GAME_SPEED_MS
    poll_ms: int = INPUT_POLL_MS
    keymap: str = DEFAULT_KEYMAP
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def get_settings() -> GameSettings:
    """
    Build the settings from the current environment.

    Raises:
        ValueError: If a variable is set to a malformed value
    """
    keymap = os.getenv("SNAKE_KEYMAP", DEFAULT_KEYMAP).strip().lower()
    if keymap not in KEYMAPS:
        raise ValueError(f"SNAKE_KEYMAP must be one of {sorted(KEYMAPS)}, got {keymap!r}")

    return GameSettings(
        width=_get_int("SNAKE_BOARD_WIDTH", DEFAULT_BOARD_WIDTH),
        height=_get_int("SNAKE_BOARD_HEIGHT", DEFAULT_BOARD_HEIGHT),
        speed_ms=_get_int("SNAKE_GAME_SPEED_MS", GAME_SPEED_MS),
        poll_ms=_get_int("SNAKE_INPUT_POLL_MS", INPUT_POLL_MS),
        keymap=keymap,
        log_level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=os.getenv("SNAKE_LOG_FILE") or None,
    )
