"""
Display surfaces: where finished frames go.

The frame driver only needs four things from a surface:
- is_open(): the window still exists
- is_stop_key_pressed(): the user asked to quit
- present(buffer): show a frame
- close(): release the window

MatplotlibSurface implements this with an interactive figure holding a
single imshow artist. Escape (or q) sets the stop flag.
"""

from __future__ import annotations
from typing import Protocol, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from racesim.viz.frames import buffer_to_rgb

if TYPE_CHECKING:
    from racesim.core.raster import PixelBuffer

STOP_KEYS = frozenset({"escape", "q"})


class DisplayError(RuntimeError):
    """A surface could not be created or could not show a frame."""


class DisplaySurface(Protocol):
    """Protocol for live frame outputs."""

    def is_open(self) -> bool:
        ...

    def is_stop_key_pressed(self) -> bool:
        ...

    def present(self, buffer: "PixelBuffer") -> None:
        ...

    def close(self) -> None:
        ...


class MatplotlibSurface:
    """
    Live window backed by an interactive matplotlib figure.

    Use MatplotlibSurface.create() rather than the constructor.
    """

    def __init__(self, fig, image, width: int, height: int, pause: float = 0.001):
        self.fig = fig
        self.image = image
        self.width = width
        self.height = height
        self.pause = pause
        self._open = True
        self._stop = False

        fig.canvas.mpl_connect("key_press_event", self._on_key)
        fig.canvas.mpl_connect("close_event", self._on_close)

    @classmethod
    def create(cls, title: str, width: int, height: int, dpi: int = 100) -> MatplotlibSurface:
        """
        Open a window of width x height pixels.

        Raises:
            DisplayError: if the figure cannot be created
        """
        try:
            plt.ion()
            fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
            fig.canvas.manager.set_window_title(title)
            ax = fig.add_axes([0, 0, 1, 1])
            ax.set_axis_off()
            image = ax.imshow(
                np.zeros((height, width, 3), dtype=np.uint8),
                origin="upper",
                interpolation="nearest",
            )
            plt.show(block=False)
        except Exception as e:
            raise DisplayError(f"Unable to open window: {e}") from e

        return cls(fig, image, width, height)

    def _on_key(self, event) -> None:
        if event.key in STOP_KEYS:
            self._stop = True

    def _on_close(self, event) -> None:
        self._open = False

    def is_open(self) -> bool:
        return self._open

    def is_stop_key_pressed(self) -> bool:
        return self._stop

    def present(self, buffer: "PixelBuffer") -> None:
        """
        Show a frame.

        Raises:
            DisplayError: if the buffer size does not match the window or drawing fails
        """
        if buffer.shape != (self.height, self.width):
            raise DisplayError(
                f"Buffer is {buffer.width}x{buffer.height}, window is {self.width}x{self.height}"
            )
        try:
            self.image.set_data(buffer_to_rgb(buffer))
            self.fig.canvas.draw_idle()
            plt.pause(self.pause)
        except Exception as e:
            raise DisplayError(f"Failed to update buffer: {e}") from e

    def close(self) -> None:
        if self._open:
            plt.close(self.fig)
            self._open = False
