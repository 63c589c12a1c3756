"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List

from .coords import Coords


class GameState:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        tick_number: how many ticks have been simulated (0-based)
        head: the snake's head cell
        trail: snake cells oldest first
        direction: current snake direction
        apple: the apple's cell
        length, speed: snake length and ticks per second
        score, high_score: scoreboard values
        grid_size: cells per board side
        paused, suspended: loop flags when the snapshot was taken
    """

    def __init__(
        self,
        tick_number: int,
        head: Coords,
        trail: List[Coords],
        direction: str,
        apple: Coords,
        length: int,
        speed: float,
        score: int,
        high_score: int,
        grid_size: int,
        paused: bool = False,
        suspended: bool = False,
    ):
        self.tick_number = tick_number
        self.head = head
        self.trail = trail
        self.direction = direction
        self.apple = apple
        self.length = length
        self.speed = speed
        self.score = score
        self.high_score = high_score
        self.grid_size = grid_size
        self.paused = paused
        self.suspended = suspended

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        T = snake trail
        H = snake head
        Row 0 is at the top, matching screen coordinates.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        board[self.apple.y][self.apple.x] = 'A'

        for x, y in self.trail:
            board[y][x] = 'T'
        board[self.head.y][self.head.x] = 'H'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Single digit labels keep the columns aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_number": self.tick_number,
            "head": list(self.head),
            "trail": [list(cell) for cell in self.trail],
            "direction": self.direction,
            "apple": list(self.apple),
            "length": self.length,
            "speed": self.speed,
            "score": self.score,
            "high_score": self.high_score,
            "grid_size": self.grid_size,
            "paused": self.paused,
            "suspended": self.suspended,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, head={self.head}, apple={self.apple}, "
            f"length={self.length}, score={self.score}>"
        )
