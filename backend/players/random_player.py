"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.constants import VALID_MOVES, OPPOSITES
from domain.game_state import GameState
from .base import Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids reversals and self-collisions.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def get_move(self, game_state: GameState) -> str:
        valid_moves = safe_moves(game_state)

        # Boxed in: any legal turn, we'll die anyway
        if not valid_moves:
            valid_moves = sorted(m for m in VALID_MOVES if OPPOSITES[m] != game_state.direction)

        return self.rng.choice(valid_moves)
