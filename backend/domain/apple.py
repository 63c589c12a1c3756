"""
Apple entity - the single piece of food on the board.
"""

import random
from typing import Iterable, Optional

from .constants import APPLE_START
from .coords import Coords


class Apple:
    """
    Attributes:
        position: the cell the apple currently occupies
    """

    def __init__(self, position: Coords = APPLE_START):
        self.position = position

    def replace(self, occupied: Iterable[Coords], grid_size: int, rng: Optional[random.Random] = None) -> Coords:
        """
        Move the apple to a random free cell.

        Draws uniformly over the whole grid until the cell is not occupied.
        This assumes the snake never fills the board; a saturated grid would
        keep it drawing forever.
        """
        rng = rng or random
        occupied = set(occupied)

        while True:
            candidate = Coords(rng.randrange(grid_size), rng.randrange(grid_size))
            if candidate not in occupied:
                self.position = candidate
                return candidate

    def __repr__(self):
        return f"<Apple position={self.position}>"
