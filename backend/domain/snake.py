"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import List, Optional

from .config import GameConfig
from .constants import NONE, VALID_MOVES, VELOCITIES, OPPOSITES
from .coords import Coords

logger = logging.getLogger(__name__)

ATE_APPLE = "ate_apple"
DIED = "died"


class Snake:
    """
    The player's snake.

    Attributes:
        head: current head cell
        velocity: unit step applied on every move
        trail: deque of occupied cells, oldest first
        length: how many trail cells are kept
        speed: ticks per second
        direction: one of NONE, LEFT, UP, RIGHT, DOWN
        has_changed_direction: set once a turn is accepted, cleared by move()
        last_event: ATE_APPLE or DIED for the tick that caused it, else None
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.head: Coords = self.config.start_head
        self.velocity: Coords = VELOCITIES[NONE]
        self.trail: deque = deque()
        self.direction = NONE
        self.has_changed_direction = False
        self.last_event: Optional[str] = None

        self.reset()

    def set_direction(self, direction: str) -> bool:
        """
        Turn the snake.

        Unknown directions, a reversal into the neck and a second turn within
        the same tick are ignored.

        Returns:
            True if the turn was accepted.
        """
        if self.has_changed_direction:  # prevent suicides when pressing keys too fast
            return False
        if direction not in VALID_MOVES:
            return False
        if OPPOSITES[direction] == self.direction:
            return False

        self.velocity = VELOCITIES[direction]
        self.direction = direction
        self.has_changed_direction = True
        return True

    def move(self):
        self.head = self.head.translate(self.velocity).wrap(self.config.grid_size)
        self.has_changed_direction = False
        self.last_event = None

    def collides_with(self, cell: Coords) -> bool:
        """True if the cell is the head or any trail cell."""
        if self.head.collides_with(cell):
            return True
        return any(block.collides_with(cell) for block in self.trail)

    def bites_itself(self) -> bool:
        """
        True if the head has entered the trail.

        Must be called before append_trail_and_trim(), so the trail still
        holds only the cells from previous ticks.
        """
        if self.velocity == VELOCITIES[NONE]:
            return False
        return any(block.collides_with(self.head) for block in self.trail)

    def grow(self):
        self.length += 1
        self.speed = min(self.speed + self.config.speed_increment, self.config.max_speed)
        self.last_event = ATE_APPLE
        logger.debug("Snake grew to length %d, speed %.2f", self.length, self.speed)

    def append_trail_and_trim(self):
        self.trail.append(self.head)
        while len(self.trail) > self.length:
            self.trail.popleft()

    def reset(self):
        """Put the snake back at its starting cell with initial length and speed."""
        self.head = self.config.start_head
        self.velocity = VELOCITIES[NONE]
        self.direction = NONE
        self.trail.clear()
        self.length = self.config.initial_length
        self.speed = self.config.starting_speed
        self.has_changed_direction = False

    def occupied_cells(self) -> List[Coords]:
        return [self.head, *self.trail]

    def __repr__(self):
        return (
            f"<Snake head={self.head}, direction={self.direction}, "
            f"length={self.length}, speed={self.speed:.1f}>"
        )
