"""
Grid coordinates.
"""

from typing import NamedTuple


class Coords(NamedTuple):
    """An immutable cell on the grid. Equality is by value."""

    x: int
    y: int

    def collides_with(self, other: "Coords") -> bool:
        return self.x == other.x and self.y == other.y

    def translate(self, velocity: "Coords") -> "Coords":
        return Coords(self.x + velocity.x, self.y + velocity.y)

    def wrap(self, grid_size: int) -> "Coords":
        """Map each axis back onto the board; leaving one edge re-enters at the opposite one."""
        return Coords(self.x % grid_size, self.y % grid_size)

    def __repr__(self):
        return f"({self.x}, {self.y})"
