"""
Player implementations for the snake arcade.

Players are input sources: each tick the game loop asks the player for a
direction and feeds it to the snake.
"""

from .base import Player, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .keyboard_player import KeyboardPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'KeyboardPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
