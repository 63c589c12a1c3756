"""
Base player interface for the game engine.
"""

from typing import List, Optional

from domain.constants import OPPOSITES, VALID_MOVES, VELOCITIES
from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    The game loop asks the player for a direction once per tick, before the
    snake moves. Returning None keeps the current direction.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None
        """
        raise NotImplementedError


def safe_moves(game_state: GameState) -> List[str]:
    """
    Directions that neither reverse into the neck nor step onto the trail.

    The board wraps, so there are no walls to avoid.
    """
    moves = []
    for move in sorted(VALID_MOVES):
        if OPPOSITES[move] == game_state.direction:
            continue
        next_head = game_state.head.translate(VELOCITIES[move]).wrap(game_state.grid_size)
        if next_head in game_state.trail:
            continue
        moves.append(move)
    return moves
