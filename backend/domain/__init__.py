"""
Domain entities for the snake arcade engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, timers, rendering).
"""

from .constants import NONE, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from .coords import Coords
from .config import GameConfig, tick_interval_ms
from .snake import Snake
from .apple import Apple
from .scoreboard import Scoreboard
from .game_state import GameState
from .session import GameSession

__all__ = [
    'NONE', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Coords',
    'GameConfig', 'tick_interval_ms',
    'Snake',
    'Apple',
    'Scoreboard',
    'GameState',
    'GameSession',
]
