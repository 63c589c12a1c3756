"""
Greedy player - heads straight for the apple.
"""

import random
from typing import List, Optional

from domain.constants import LEFT, RIGHT, UP, DOWN
from domain.game_state import GameState
from .base import Player, safe_moves


def wrapped_delta(start: int, end: int, grid_size: int) -> int:
    """Signed shortest step count from start to end on a wrapping axis."""
    delta = (end - start) % grid_size
    if delta > grid_size // 2:
        delta -= grid_size
    return delta


class GreedyPlayer(Player):
    """
    Moves along whichever axis is farther from the apple, taking the short
    way around the wrapping board. Falls back to a random safe move when the
    preferred directions are blocked.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def preferred_moves(self, game_state: GameState) -> List[str]:
        dx = wrapped_delta(game_state.head.x, game_state.apple.x, game_state.grid_size)
        dy = wrapped_delta(game_state.head.y, game_state.apple.y, game_state.grid_size)

        horizontal = [RIGHT if dx > 0 else LEFT] if dx else []
        vertical = [DOWN if dy > 0 else UP] if dy else []

        if abs(dx) >= abs(dy):
            return horizontal + vertical
        return vertical + horizontal

    def get_move(self, game_state: GameState) -> Optional[str]:
        safe = safe_moves(game_state)
        if not safe:
            return None

        for move in self.preferred_moves(game_state):
            if move in safe:
                return move

        # Keep going straight if that's safe
        if game_state.direction in safe:
            return game_state.direction
        return self.rng.choice(safe)
