"""
Game configuration.

Defaults live in domain.constants. Any of them can be overridden through
environment variables (a .env file is honoured) or by building a
GameConfig directly, which is what the tests do for small boards.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    GRID_SIZE,
    STARTING_SPEED,
    MAX_SPEED,
    SPEED_INCREMENT,
    INITIAL_LENGTH,
    START_HEAD,
    APPLE_START,
    POINTS_PER_APPLE,
)
from .coords import Coords


@dataclass(frozen=True)
class GameConfig:
    """
    Board and pacing parameters for one game session.

    Attributes:
        grid_size: cells per side of the square, wrapping board
        starting_speed: ticks per second after a reset
        max_speed: upper bound on ticks per second
        speed_increment: speed added per apple eaten
        initial_length: snake length after a reset
        start_head: where the snake's head is placed on reset
        apple_start: where the first apple sits
        points_per_apple: score added per apple eaten
    """

    grid_size: int = GRID_SIZE
    starting_speed: float = STARTING_SPEED
    max_speed: float = MAX_SPEED
    speed_increment: float = SPEED_INCREMENT
    initial_length: int = INITIAL_LENGTH
    start_head: Coords = START_HEAD
    apple_start: Coords = APPLE_START
    points_per_apple: int = POINTS_PER_APPLE

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.starting_speed <= 0:
            raise ValueError(f"starting_speed must be positive, got {self.starting_speed}")
        if self.max_speed < self.starting_speed:
            raise ValueError(
                f"max_speed ({self.max_speed}) must not be below starting_speed ({self.starting_speed})"
            )
        if self.speed_increment < 0:
            raise ValueError(f"speed_increment must not be negative, got {self.speed_increment}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {self.initial_length}")
        if self.points_per_apple < 0:
            raise ValueError(f"points_per_apple must not be negative, got {self.points_per_apple}")
        for name in ("start_head", "apple_start"):
            cell = getattr(self, name)
            if not (0 <= cell.x < self.grid_size and 0 <= cell.y < self.grid_size):
                raise ValueError(f"{name} {cell} is outside a {self.grid_size}x{self.grid_size} grid")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "GameConfig":
        """Build a config from SNAKE_* environment variables, falling back to defaults."""
        load_dotenv(dotenv_path)

        return cls(
            grid_size=int(os.getenv("SNAKE_GRID_SIZE", GRID_SIZE)),
            starting_speed=float(os.getenv("SNAKE_STARTING_SPEED", STARTING_SPEED)),
            max_speed=float(os.getenv("SNAKE_MAX_SPEED", MAX_SPEED)),
            speed_increment=float(os.getenv("SNAKE_SPEED_INCREMENT", SPEED_INCREMENT)),
            initial_length=int(os.getenv("SNAKE_INITIAL_LENGTH", INITIAL_LENGTH)),
            points_per_apple=int(os.getenv("SNAKE_POINTS_PER_APPLE", POINTS_PER_APPLE)),
        )


def tick_interval_ms(speed: float) -> float:
    """Timer period for a given speed in ticks per second."""
    return 1000 / speed
