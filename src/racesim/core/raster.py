"""
Rasterization of runners into a flat 32-bit pixel buffer.

Pixel mapping for a continuous position (x, y) plus integer offset (dx, dy):

    X = floor(x) + dx,  Y = floor(y) + dy
    px = X mod width
    py = Y + wrap_offset * floor(X / width)

The track is longer than the canvas, so every time it runs past the right
edge it continues on a new band `wrap_offset` pixels further down.
Pixels that land outside the buffer are dropped without complaint: runners
far down the course (or still behind the start) are simply off-screen.
"""

from __future__ import annotations

import numpy as np


class PixelBuffer:
    """
    A width x height frame of 0xRRGGBB pixels, stored flat (index y*width + x).
    """

    def __init__(self, width: int, height: int, background: int = 0x000000):
        if width <= 0 or height <= 0:
            raise ValueError(f"PixelBuffer must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = background
        self.pixels = np.full(width * height, background, dtype=np.uint32)

    @property
    def shape(self) -> tuple[int, int]:
        """Return (height, width)."""
        return self.height, self.width

    def clear(self) -> None:
        """Overwrite every pixel with the background color."""
        self.pixels.fill(self.background)

    def get(self, x: int, y: int) -> int:
        """Color of pixel (x, y)."""
        return int(self.pixels[y * self.width + x])

    def paint(self, px: np.ndarray, py: np.ndarray, colors: int | np.ndarray) -> int:
        """
        Write colors at pixel coordinates, skipping any outside the buffer.

        Args:
            px, py: Integer pixel coordinates (same shape)
            colors: A single color or one color per coordinate

        Returns:
            Number of pixels actually written
        """
        px = np.asarray(px, dtype=np.int64)
        py = np.asarray(py, dtype=np.int64)
        inside = (px >= 0) & (px < self.width) & (py >= 0) & (py < self.height)

        if not np.isscalar(colors):
            colors = np.asarray(colors, dtype=np.uint32)[inside]

        self.pixels[py[inside] * self.width + px[inside]] = colors
        return int(np.count_nonzero(inside))

    def as_image(self) -> np.ndarray:
        """View the buffer as a (height, width) array."""
        return self.pixels.reshape(self.height, self.width)


def disk_offsets(radius: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Integer offsets (dx, dy) forming a filled disk of the given radius.

    Candidates span one unit beyond the radius in each direction and are
    kept when dx² + dy² <= radius².
    """
    span = np.arange(-(radius + 1), radius + 2)
    dx, dy = np.meshgrid(span, span, indexing="xy")
    keep = dx * dx + dy * dy <= radius * radius
    return dx[keep].astype(np.int64), dy[keep].astype(np.int64)


def pixel_coords(
    x: float | np.ndarray,
    y: float | np.ndarray,
    width: int,
    wrap_offset: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Map positions to pixel coordinates with horizontal wrap-around.

    Args:
        x, y: Positions (scalars or arrays)
        width: Canvas width
        wrap_offset: Vertical shift per wrap (2 * aligned_per_row * start_distance)

    Returns:
        (px, py) int64 arrays, unclipped
    """
    big_x = np.floor(np.asarray(x, dtype=np.float64))
    big_y = np.floor(np.asarray(y, dtype=np.float64))
    wraps = np.floor_divide(big_x, width)
    px = np.mod(big_x, width)
    py = big_y + np.floor(wrap_offset * wraps)
    return px.astype(np.int64), py.astype(np.int64)


def footprints(
    xs: np.ndarray,
    ys: np.ndarray,
    radius: int,
    width: int,
    wrap_offset: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Pixel footprints of many runners at once.

    Each disk pixel is wrapped on its own, so a runner straddling the
    right edge is split between two bands, like a single dot would be.

    Returns:
        (px, py) arrays of shape (N, K) with K pixels per runner
    """
    dx, dy = disk_offsets(radius)
    base_x = np.floor(np.asarray(xs, dtype=np.float64)).reshape(-1, 1)
    base_y = np.floor(np.asarray(ys, dtype=np.float64)).reshape(-1, 1)
    return pixel_coords(base_x + dx, base_y + dy, width, wrap_offset)
