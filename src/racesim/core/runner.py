"""
Runner: a single agent moving along the track.

A runner has a constant speed and a wave assigned once at creation.
Two motion modes are supported:
- "linear": straight line along x at constant speed, y never changes
- "wandering": mostly forward, with a small random heading each frame;
  y is reflected back into [0, track_height] at the track edges

The heading perturbation is not sampled here. The caller draws it and
passes it to advance(), which keeps the runner a pure function of its
inputs and lets tests feed exact headings.
"""

from __future__ import annotations
import math

import numpy as np

from racesim.core.config import MotionMode, MOTION_MODES
from racesim.core.raster import footprints


def reflect(y: float, track_height: float) -> float:
    """
    Single-bounce reflection of y into [0, track_height].

    An excursion of more than one track height past an edge is NOT fully
    corrected: the caller must keep speed * dt < track_height.
    """
    if y < 0:
        return -y
    if y > track_height:
        return 2 * track_height - y
    return y


class Runner:
    """
    One runner in the race.

    The runner:
    1. Starts at its start-grid cell with last_update_time = start_time
    2. On advance(t), moves by speed * (t - last_update_time)
    3. Reports the pixels it covers through footprint()
    """

    def __init__(
        self,
        x: float,
        y: float,
        speed: float,
        wave_index: int,
        motion: MotionMode = "wandering",
        track_height: float = math.inf,
        start_time: float = 0.0,
    ):
        if speed <= 0:
            raise ValueError(f"Runner speed must be > 0, got {speed}")
        if motion not in MOTION_MODES:
            raise ValueError(f"motion must be one of {MOTION_MODES}, got {motion!r}")

        self.x = float(x)
        self.y = float(y)
        self.speed = float(speed)
        self.wave_index = int(wave_index)
        self.motion = motion
        self.track_height = float(track_height)
        self.last_update_time = float(start_time)

        # Start-grid cell, kept for distance reporting
        self.start_x = self.x
        self.start_y = self.y

    def __repr__(self) -> str:
        return (
            f"Runner(x={self.x:.2f}, y={self.y:.2f}, speed={self.speed:.2f}, "
            f"wave_index={self.wave_index}, motion={self.motion!r})"
        )

    @property
    def position(self) -> tuple[float, float]:
        """Current position (x, y)."""
        return self.x, self.y

    def advance(self, t: float, orientation: float = 0.0) -> tuple[float, float]:
        """
        Move the runner to simulation time t.

        Args:
            t: Target simulation time
            orientation: Heading perturbation in radians (ignored in linear mode)

        Returns:
            New position (x, y)
        """
        dt = t - self.last_update_time

        if self.motion == "linear":
            self.x += self.speed * dt
        else:
            self.x += self.speed * math.cos(orientation) * dt
            self.y += self.speed * math.sin(orientation) * dt
            self.y = reflect(self.y, self.track_height)

        self.last_update_time = t
        return self.x, self.y

    def footprint(self, radius: int, width: int, wrap_offset: float) -> tuple[np.ndarray, np.ndarray]:
        """
        Pixel coordinates covered by this runner's disk (unclipped).

        Args:
            radius: Disk radius in pixels
            width: Canvas width (wrap period)
            wrap_offset: Vertical shift per wrap

        Returns:
            (px, py) int64 arrays
        """
        px, py = footprints(np.array([self.x]), np.array([self.y]), radius, width, wrap_offset)
        return px[0], py[0]

    def distance_from_start(self) -> float:
        """Straight-line distance from the start-grid cell."""
        return math.hypot(self.x - self.start_x, self.y - self.start_y)
