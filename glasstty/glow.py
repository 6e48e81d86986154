"""Phosphor glow: a Gaussian blur of glyph rasters with a bright core and a dim halo."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

BLUR_RADIUS = 4
DEFAULT_GAMMA = 1.0 / 2.2


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    @classmethod
    def from_word(cls, word: int) -> "Color":
        """Build a colour from a 32-bit RGBA8888 pixel value."""
        return cls((word >> 24) & 0xFF, (word >> 16) & 0xFF, (word >> 8) & 0xFF, word & 0xFF)

    def to_word(self) -> int:
        """Pack the colour into a 32-bit RGBA8888 pixel value."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


Kernel = tuple[tuple[float, ...], ...]


def make_kernel(sigma: float) -> Kernel:
    """Return the (2*BLUR_RADIUS+1)-square Gaussian weight matrix for ``sigma``."""
    size = 2 * BLUR_RADIUS + 1
    spread = 2 * sigma * sigma
    norm = math.pi * spread
    return tuple(
        tuple(
            math.exp(-((i - BLUR_RADIUS) ** 2 + (j - BLUR_RADIUS) ** 2) / spread) / norm
            for j in range(size)
        )
        for i in range(size)
    )


class Glow:
    """Turns a sharp glyph raster into a glowing phosphor image."""

    def __init__(self, sigma: float, bright: Color, dim: Color, gamma: float = DEFAULT_GAMMA):
        self.kernel = make_kernel(sigma)
        self.bright = bright
        self.dim = dim
        self.gamma = gamma

    def _curve(self, value: int) -> int:
        return min(255, int((value / 255.0) ** self.gamma * 255))

    def pixel(self, raster: Sequence[Color], width: int, height: int, x: int, y: int) -> Color:
        """Return the glowing colour of the pixel at (x, y)."""
        r = g = b = a = 0
        for i, row in enumerate(self.kernel):
            yy = y - BLUR_RADIUS + i
            if not 0 <= yy < height:
                continue
            base = yy * width
            for j, weight in enumerate(row):
                xx = x - BLUR_RADIUS + j
                if not 0 <= xx < width:
                    continue
                p = raster[base + xx]
                r = int(r + p.r * weight)
                g = int(g + p.g * weight)
                b = int(b + p.b * weight)
                a = int(a + p.a * weight)
        level = self._curve(a)
        if raster[y * width + x].a > level:
            return self.bright
        return Color(
            int(self.dim.r * level / 255.0),
            int(self.dim.g * level / 255.0),
            int(self.dim.b * level / 255.0),
            255,
        )

    def blur(self, raster: Sequence[Color], width: int, height: int) -> list[Color]:
        """Return the whole raster glowed, every pixel fully opaque."""
        if len(raster) != width * height:
            raise ValueError(f"raster holds {len(raster)} pixels, expected {width * height}")
        return [
            self.pixel(raster, width, height, x, y)._replace(a=255)
            for y in range(height)
            for x in range(width)
        ]