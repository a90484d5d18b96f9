"""
Tests for environment-driven settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameSettings, get_settings  # noqa: E402

ENV_VARS = [
    "SNAKE_BOARD_WIDTH",
    "SNAKE_BOARD_HEIGHT",
    "SNAKE_GAME_SPEED_MS",
    "SNAKE_INPUT_POLL_MS",
    "SNAKE_KEYMAP",
    "SNAKE_LOG_LEVEL",
    "SNAKE_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings == GameSettings()
    assert settings.width == 78
    assert settings.height == 24
    assert settings.speed_ms == 100
    assert settings.poll_ms == 10
    assert settings.keymap == "full"
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SNAKE_BOARD_WIDTH", "40")
    monkeypatch.setenv("SNAKE_BOARD_HEIGHT", "20")
    monkeypatch.setenv("SNAKE_GAME_SPEED_MS", "150")
    monkeypatch.setenv("SNAKE_KEYMAP", "WASD")
    monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SNAKE_LOG_FILE", "snake.log")

    settings = get_settings()

    assert settings.width == 40
    assert settings.height == 20
    assert settings.speed_ms == 150
    assert settings.keymap == "wasd"
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "snake.log"


def test_blank_values_use_defaults(monkeypatch):
    monkeypatch.setenv("SNAKE_BOARD_WIDTH", "")
    assert get_settings().width == 78


def test_malformed_integer_raises(monkeypatch):
    monkeypatch.setenv("SNAKE_BOARD_WIDTH", "wide")
    with pytest.raises(ValueError, match="SNAKE_BOARD_WIDTH"):
        get_settings()


def test_non_positive_integer_raises(monkeypatch):
    monkeypatch.setenv("SNAKE_GAME_SPEED_MS", "0")
    with pytest.raises(ValueError, match="SNAKE_GAME_SPEED_MS"):
        get_settings()


def test_unknown_keymap_raises(monkeypatch):
    monkeypatch.setenv("SNAKE_KEYMAP", "dvorak")
    with pytest.raises(ValueError, match="SNAKE_KEYMAP"):
        get_settings()
