"""
Render surfaces the game loop draws on.

The loop only ever calls clear() and draw_cell(); what a cell looks like
is up to the surface.
"""

from typing import Dict, List, Optional, Protocol, Tuple

from domain.constants import SNAKE_COLOR, APPLE_COLOR
from domain.coords import Coords


class RenderSurface(Protocol):
    def clear(self) -> None: ...
    def draw_cell(self, cell: Coords, color: str) -> None: ...


class NullRenderSurface:
    """Draws nothing; counts calls so tests can check the draw sequence."""

    def __init__(self):
        self.clears = 0
        self.cells: List[Tuple[Coords, str]] = []

    def clear(self):
        self.clears += 1
        self.cells = []

    def draw_cell(self, cell: Coords, color: str):
        self.cells.append((cell, color))


class TextRenderSurface:
    """
    Character grid for terminals.

    Colors map to characters through `glyphs`; anything unknown is drawn as '#'.
    """

    DEFAULT_GLYPHS = {
        SNAKE_COLOR: 'o',
        APPLE_COLOR: '@',
    }

    def __init__(self, grid_size: int, glyphs: Optional[Dict[str, str]] = None, empty: str = '.'):
        self.grid_size = grid_size
        self.glyphs = glyphs or dict(self.DEFAULT_GLYPHS)
        self.empty = empty
        self.rows: List[List[str]] = []
        self.clear()

    def clear(self):
        self.rows = [[self.empty] * self.grid_size for _ in range(self.grid_size)]

    def draw_cell(self, cell: Coords, color: str):
        self.rows[cell.y][cell.x] = self.glyphs.get(color, '#')

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.rows)
