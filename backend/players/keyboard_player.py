"""
Keyboard player - replays key presses collected by a front end.
"""

from collections import deque
from typing import Iterable, Optional

from domain.constants import KEY_BINDINGS, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class KeyboardPlayer(Player):
    """
    Buffers key codes (e.g. 'ArrowLeft') and hands out one direction per tick.

    Keys that are not bound to a direction are dropped.
    """

    def __init__(self, keys: Iterable[str] = ()):
        self.pending = deque()
        for code in keys:
            self.press(code)

    def press(self, code: str) -> bool:
        direction = KEY_BINDINGS.get(code)
        if direction not in VALID_MOVES:
            return False
        self.pending.append(direction)
        return True

    def get_move(self, game_state: GameState) -> Optional[str]:
        if not self.pending:
            return None
        return self.pending.popleft()
