"""
Static figures of a race.

- buffer_to_rgb: unpack a 0xRRGGBB pixel buffer into an RGB image
- plot_frame: show one rendered frame
- plot_speed_histogram: speed distribution coloured by wave

All plots use matplotlib and follow the (fig, ax) convention.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from racesim.core.raster import PixelBuffer
    from racesim.core.simulation import Simulation


def buffer_to_rgb(buffer: "PixelBuffer") -> np.ndarray:
    """
    Convert a pixel buffer to a (height, width, 3) uint8 RGB image.
    """
    img = buffer.as_image()
    rgb = np.empty(img.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (img >> 16) & 0xFF
    rgb[..., 1] = (img >> 8) & 0xFF
    rgb[..., 2] = img & 0xFF
    return rgb


def color_to_rgb(color: int) -> tuple[float, float, float]:
    """0xRRGGBB integer to a matplotlib (r, g, b) tuple in [0, 1]."""
    return (
        ((color >> 16) & 0xFF) / 255.0,
        ((color >> 8) & 0xFF) / 255.0,
        (color & 0xFF) / 255.0,
    )


def plot_frame(
    buffer: "PixelBuffer",
    title: str = "",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (12, 7),
) -> tuple[Figure, Axes]:
    """
    Plot a rendered frame.

    Row 0 of the buffer is drawn at the top, as on screen.

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ax.imshow(buffer_to_rgb(buffer), origin="upper", interpolation="nearest")
    ax.set_title(title)
    ax.set_axis_off()

    return fig, ax


def plot_speed_histogram(
    sim: "Simulation",
    bins: int = 60,
    title: str = "Runner Speeds by Wave",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Histogram of runner speeds, one colour per wave.

    White waves are drawn with a dark edge so they stay visible.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    speeds = sim.speeds
    wave_indices = sim.wave_indices
    edges = np.histogram_bin_edges(speeds, bins=bins) if len(speeds) else bins

    for i, wave in enumerate(sim.waves):
        wave_speeds = speeds[wave_indices == i]
        if len(wave_speeds) == 0:
            continue
        ax.hist(
            wave_speeds,
            bins=edges,
            color=color_to_rgb(wave.color),
            edgecolor="0.2",
            linewidth=0.5,
            label=f"{wave.name or f'wave {i}'} ({len(wave_speeds)})",
        )

    ax.set_title(title)
    ax.set_xlabel("speed")
    ax.set_ylabel("runners")
    if len(speeds):
        ax.legend(fontsize=8)

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
