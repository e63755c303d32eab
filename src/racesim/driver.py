"""
FrameDriver: wall-clock loop that turns a Simulation into live frames.

Each iteration:
1. Stop if the surface was closed or the stop key was pressed
2. Convert elapsed wall-clock time to simulation time (x time_factor)
3. Stop if simulation time reached the horizon t_max
4. Clear the buffer, draw the race, present the frame

The only cancellation point is between frames: a frame that has started
is always drawn and presented.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Literal, TYPE_CHECKING

from racesim.core.raster import PixelBuffer

if TYPE_CHECKING:
    from racesim.core.config import RaceConfig
    from racesim.core.simulation import Simulation
    from racesim.viz.surface import DisplaySurface

logger = logging.getLogger(__name__)

StopReason = Literal["closed", "stop_key", "horizon", "max_frames"]


@dataclass
class FrameStats:
    """What happened during a run."""

    frames: int = 0
    sim_time: float = 0.0  # Simulation time of the last drawn frame
    wall_time: float = 0.0
    stop_reason: StopReason | None = None

    @property
    def fps(self) -> float:
        if self.wall_time <= 0:
            return 0.0
        return self.frames / self.wall_time


@dataclass
class FrameDriver:
    """
    Drives a Simulation at time_factor x real time until a stop condition.

    The buffer belongs to the driver and is lent to Simulation.draw()
    for one frame at a time.
    """

    simulation: "Simulation"
    surface: "DisplaySurface"
    config: "RaceConfig"
    clock: Callable[[], float] = time.perf_counter
    max_frames: int | None = None  # Optional frame cap (None = until t_max)

    buffer: PixelBuffer = field(init=False)

    def __post_init__(self):
        self.buffer = PixelBuffer(
            self.config.width,
            self.config.height,
            background=self.config.background_color,
        )

    def _stop_reason(self, frames: int) -> StopReason | None:
        if not self.surface.is_open():
            return "closed"
        if self.surface.is_stop_key_pressed():
            return "stop_key"
        if self.max_frames is not None and frames >= self.max_frames:
            return "max_frames"
        return None

    def run(self) -> FrameStats:
        """
        Run until the window closes, the stop key is pressed, or t >= t_max.

        Raises:
            DisplayError: if the surface fails to present a frame
        """
        stats = FrameStats()
        start = self.clock()
        logger.info(
            "Starting race: %d runners, horizon %.0fs at x%.1f",
            len(self.simulation),
            self.config.t_max,
            self.config.time_factor,
        )

        while True:
            reason = self._stop_reason(stats.frames)
            if reason is not None:
                stats.stop_reason = reason
                break

            t = (self.clock() - start) * self.config.time_factor
            if t >= self.config.t_max:
                stats.stop_reason = "horizon"
                break

            self.buffer.clear()
            self.simulation.draw(t, self.buffer)
            self.surface.present(self.buffer)

            stats.frames += 1
            stats.sim_time = t
            if stats.frames % 100 == 0:
                logger.debug("Frame %d at t=%.1fs", stats.frames, t)

        stats.wall_time = self.clock() - start
        logger.info(
            "Race stopped (%s) after %d frames, t=%.1fs, %.1f fps",
            stats.stop_reason,
            stats.frames,
            stats.sim_time,
            stats.fps,
        )
        return stats
