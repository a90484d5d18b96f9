"""
Game constants for the terminal Snake game.
"""

# Board defaults
DEFAULT_BOARD_WIDTH = 78
DEFAULT_BOARD_HEIGHT = 24
INITIAL_SNAKE_LENGTH = 4

# Frame timing
GAME_SPEED_MS = 100
INPUT_POLL_MS = 10

# Food respawn
FOOD_RESPAWN_FRAMES = 5
FOOD_MARGIN = 4

# Input keymaps: raw character -> direction name
KEYMAPS = {
    "full": {
        "w": "UP", "i": "UP",
        "a": "LEFT", "j": "LEFT",
        "s": "DOWN", "k": "DOWN",
        "d": "RIGHT", "l": "RIGHT",
    },
    "wasd": {
        "w": "UP",
        "a": "LEFT",
        "s": "DOWN",
        "d": "RIGHT",
    },
}
DEFAULT_KEYMAP = "full"
