"""
Visualization utilities.

- Frame images and speed histograms
- Live display surfaces
"""

from racesim.viz.frames import (
    buffer_to_rgb,
    color_to_rgb,
    plot_frame,
    plot_speed_histogram,
    save_figure,
)

from racesim.viz.surface import (
    DisplayError,
    DisplaySurface,
    MatplotlibSurface,
)

__all__ = [
    "buffer_to_rgb",
    "color_to_rgb",
    "plot_frame",
    "plot_speed_histogram",
    "save_figure",
    "DisplayError",
    "DisplaySurface",
    "MatplotlibSurface",
]
