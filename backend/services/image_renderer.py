"""
Image render surface for snake games.

Draws the board with Pillow using the browser canvas geometry (square
tiles with a small gap between them) and can keep every frame so a game
can be written out as a PNG or an animated GIF.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from PIL import Image, ImageColor, ImageDraw

from domain.coords import Coords
from domain.constants import BACKGROUND_COLOR

logger = logging.getLogger(__name__)

TILE_SIDE_LENGTH = 20  # pixels per cell
TILE_MARGIN = 2  # gap between cells


def to_rgb(color: str) -> Tuple[int, int, int]:
    """Accepts CSS names ('lime') and hex strings ('#EA2014')."""
    return ImageColor.getrgb(color)[:3]


class ImageRenderSurface:
    """
    Pillow-backed render surface.

    Attributes:
        grid_size: cells per board side
        image: the frame currently being drawn
        frames: completed frames, one per clear() after the first, when keep_frames is set
    """

    def __init__(
        self,
        grid_size: int,
        tile_side_length: int = TILE_SIDE_LENGTH,
        tile_margin: int = TILE_MARGIN,
        background: str = BACKGROUND_COLOR,
        keep_frames: bool = False,
    ):
        self.grid_size = grid_size
        self.tile_side_length = tile_side_length
        self.tile_margin = tile_margin
        self.background = to_rgb(background)
        self.keep_frames = keep_frames
        self.frames: List[Image.Image] = []
        self._dirty = False

        side = grid_size * tile_side_length
        self.image = Image.new('RGB', (side, side), self.background)
        self._draw = ImageDraw.Draw(self.image)

    def clear(self):
        if self.keep_frames and self._dirty:
            self.frames.append(self.image.copy())
        self._draw.rectangle([0, 0, self.image.width, self.image.height], fill=self.background)
        self._dirty = False

    def draw_cell(self, cell: Coords, color: str):
        x0 = cell.x * self.tile_side_length
        y0 = cell.y * self.tile_side_length
        size = self.tile_side_length - self.tile_margin
        # Pillow rectangles include both corners
        self._draw.rectangle([x0, y0, x0 + size - 1, y0 + size - 1], fill=to_rgb(color))
        self._dirty = True

    def pixel_at(self, cell: Coords) -> Tuple[int, int, int]:
        """Color at the top-left pixel of a cell."""
        return self.image.getpixel((cell.x * self.tile_side_length, cell.y * self.tile_side_length))

    def save_png(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path, format='PNG')
        return path

    def save_gif(self, path: Union[str, Path], fps: float = 8) -> Path:
        """Write all kept frames plus the current one as an animated GIF."""
        frames = self.frames + [self.image.copy()]
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        frames[0].save(
            path,
            format='GIF',
            save_all=True,
            append_images=frames[1:],
            duration=int(1000 / fps),
            loop=0,
        )
        logger.info("Saved %d frames to %s", len(frames), path)
        return path
