"""
blockicon/render.py
Painting icons onto raster surfaces

The core never draws pixels itself. render_icon() drives any object with
fill_all() and fill_rect(), so callers can plug in their own backend.
Two are provided here: PillowSurface and the vectorized rasterize().
The Qt backend lives in blockicon.qt_render.
"""

from typing import Dict, Protocol

import numpy as np
from PIL import Image, ImageDraw

from .colors import RGB, to_rgb
from .config import CELL_BACKGROUND, CELL_FOREGROUND, RENDER_CONFIG
from .models import Icon


class Surface(Protocol):
    """Minimal 2D raster target."""

    def fill_all(self, color: str) -> None:
        ...

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None:
        ...


def cell_color(icon: Icon, value: int) -> str:
    """Color for a non-background cell value: 1 is foreground, all else spot."""
    return icon.color if value == CELL_FOREGROUND else icon.spot_color


def render_icon(icon: Icon, surface: Surface) -> Surface:
    """
    Paint icon onto surface and return the surface.

    The surface must already be icon.pixel_size pixels per side. Background
    cells are left as painted by fill_all().
    """
    scale = icon.scale
    surface.fill_all(icon.bg_color)
    for (row, col), value in np.ndenumerate(icon.grid):
        if value == CELL_BACKGROUND:
            continue
        surface.fill_rect(col * scale, row * scale, scale, scale, cell_color(icon, value))
    return surface


# =============================================================================
# Pillow
# =============================================================================

class PillowSurface:
    """Surface backed by a Pillow image."""

    def __init__(self, width: int, height: int, mode: str = RENDER_CONFIG.mode):
        self.image = Image.new(mode, (width, height))
        self._draw = ImageDraw.Draw(self.image)
        self._cache: Dict[str, RGB] = {}

    def _rgb(self, color: str) -> RGB:
        if color not in self._cache:
            self._cache[color] = to_rgb(color)
        return self._cache[color]

    def fill_all(self, color: str) -> None:
        width, height = self.image.size
        self._draw.rectangle([0, 0, width - 1, height - 1], fill=self._rgb(color))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None:
        self._draw.rectangle([x, y, x + width - 1, y + height - 1], fill=self._rgb(color))


def render_image(icon: Icon) -> Image.Image:
    """Render icon to a new Pillow image."""
    surface = PillowSurface(icon.pixel_size, icon.pixel_size)
    return render_icon(icon, surface).image


# =============================================================================
# numpy
# =============================================================================

def rasterize(icon: Icon) -> np.ndarray:
    """
    Render icon to an (H, W, 3) uint8 array without a drawing backend.

    Produces the same pixels as render_image().
    """
    fg = to_rgb(icon.color)
    bg = to_rgb(icon.bg_color)
    spot = to_rgb(icon.spot_color)

    # index 0 = background, 1 = foreground, everything above = spot
    lut = np.array([bg, fg, spot], dtype=np.uint8)
    index = np.minimum(icon.grid, 2)
    cells = lut[index]
    return np.repeat(np.repeat(cells, icon.scale, axis=0), icon.scale, axis=1)
