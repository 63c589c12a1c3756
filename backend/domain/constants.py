"""
Game constants for the snake arcade engine.
"""

from .coords import Coords

# Movement directions
NONE = "NONE"
LEFT = "LEFT"
UP = "UP"
RIGHT = "RIGHT"
DOWN = "DOWN"
VALID_MOVES = {LEFT, UP, RIGHT, DOWN}

# Screen coordinates: y grows downwards
VELOCITIES = {
    NONE: Coords(0, 0),
    LEFT: Coords(-1, 0),
    UP: Coords(0, -1),
    RIGHT: Coords(1, 0),
    DOWN: Coords(0, 1),
}

OPPOSITES = {
    LEFT: RIGHT,
    RIGHT: LEFT,
    UP: DOWN,
    DOWN: UP,
}

# Game settings
GRID_SIZE = 30
STARTING_SPEED = 8.0  # ticks per second
MAX_SPEED = 16.6
SPEED_INCREMENT = 0.4
INITIAL_LENGTH = 5
START_HEAD = Coords(10, 10)
APPLE_START = Coords(15, 15)
POINTS_PER_APPLE = 1

# Persisted keys
HIGH_SCORE_KEY = "highScore"
HIGH_SCORE_OWNER_KEY = "highScoreOwner"

# Control events
PAUSE = "PAUSE"
SUSPEND = "SUSPEND"

KEY_BINDINGS = {
    "ArrowLeft": LEFT,
    "ArrowUp": UP,
    "ArrowRight": RIGHT,
    "ArrowDown": DOWN,
    "KeyA": LEFT,
    "KeyW": UP,
    "KeyD": RIGHT,
    "KeyS": DOWN,
    "Space": PAUSE,
    "KeyP": PAUSE,
    "KeyB": SUSPEND,
}

# Colors used by render surfaces
SNAKE_COLOR = "lime"
APPLE_COLOR = "red"
BACKGROUND_COLOR = "black"
