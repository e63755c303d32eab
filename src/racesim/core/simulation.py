"""
Simulation: the field of runners plus the wave table.

Build pipeline:
1. Draw speeds from N(speed_mean, speed_std) truncated to speed > 0
2. Classify each runner on its true or perceived speed
3. Lay out the start grid wave by wave
4. Create the runners

Each tick, draw(t, buffer) advances every runner to time t and paints
them into the buffer. The caller clears the buffer between ticks.
"""

from __future__ import annotations
import logging
from typing import Sequence

import numpy as np
from scipy.stats import truncnorm

from racesim.core.config import RaceConfig
from racesim.core.layout import grid_columns, start_grid
from racesim.core.noise import GaussianNoise, NoiseSource
from racesim.core.raster import PixelBuffer, footprints
from racesim.core.runner import Runner
from racesim.core.waves import WaveTable, create_default_waves

logger = logging.getLogger(__name__)


def sample_speeds(
    n: int,
    mean: float,
    std: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Draw n speeds from a Gaussian truncated to (0, inf).

    With std == 0 every runner gets exactly `mean`.
    """
    if std == 0:
        return np.full(n, mean, dtype=np.float64)
    a = (0.0 - mean) / std
    speeds = truncnorm.rvs(a, np.inf, loc=mean, scale=std, size=n, random_state=rng)
    return np.asarray(speeds, dtype=np.float64)


class Simulation:
    """
    Owns the runners and advances them in lock-step.

    Runner order is the draw order: where two disks overlap, the runner
    drawn later wins the pixel.
    """

    def __init__(
        self,
        runners: Sequence[Runner],
        waves: WaveTable,
        config: RaceConfig,
        noise: NoiseSource,
    ):
        self.runners = list(runners)
        self.waves = waves
        self.config = config
        self.noise = noise
        self._wave_colors = waves.colors()
        self.time = 0.0  # Simulation time of the last advance

    @classmethod
    def build(
        cls,
        config: RaceConfig,
        seed: int | None = None,
        noise: NoiseSource | None = None,
        waves: WaveTable | None = None,
    ) -> Simulation:
        """
        Create a ready-to-run race with config.runner_count runners.

        Args:
            config: Race configuration
            seed: Seed for speed sampling (and for the default noise source)
            noise: Source for perception and heading noise (seeded GaussianNoise if None)
            waves: Wave table (default four-wave table if None)
        """
        rng = np.random.default_rng(seed)
        if noise is None:
            noise = GaussianNoise(rng=rng)

        speeds = sample_speeds(config.runner_count, config.speed_mean, config.speed_std, rng)
        return cls.from_speeds(speeds, config, waves=waves, noise=noise)

    @classmethod
    def from_speeds(
        cls,
        speeds: Sequence[float] | np.ndarray,
        config: RaceConfig,
        waves: WaveTable | None = None,
        noise: NoiseSource | None = None,
    ) -> Simulation:
        """
        Create a race from explicit runner speeds.

        config.runner_count is ignored; one runner is created per speed.
        """
        if waves is None:
            waves = create_default_waves()
        if noise is None:
            noise = GaussianNoise()

        speeds = np.asarray(speeds, dtype=np.float64)
        if np.any(speeds <= 0):
            raise ValueError("All runner speeds must be > 0")

        # Perceived speed is only used for classification, then discarded
        if config.perception_std > 0:
            perceived = speeds + noise.normal(config.perception_std, len(speeds))
        else:
            perceived = speeds
        wave_indices = waves.classify_many(perceived)

        positions = start_grid(
            wave_indices,
            n_waves=len(waves),
            aligned_per_row=config.aligned_per_row,
            start_distance=config.start_distance,
            wave_gap=config.wave_gap,
        )

        track_height = config.effective_track_height
        runners = [
            Runner(x, y, speed, wave_index, motion=config.motion, track_height=track_height)
            for (x, y), speed, wave_index in zip(positions, speeds, wave_indices)
        ]

        sim = cls(runners, waves, config, noise)
        counts = sim.wave_counts()
        logger.debug(
            "Built race: %d runners, wave counts %s, start grid spans %d columns",
            len(runners),
            counts.tolist(),
            grid_columns(counts, config.aligned_per_row, config.wave_gap),
        )
        return sim

    def __len__(self) -> int:
        return len(self.runners)

    @property
    def positions(self) -> np.ndarray:
        """(N, 2) array of current runner positions."""
        if not self.runners:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([r.position for r in self.runners], dtype=np.float64)

    @property
    def speeds(self) -> np.ndarray:
        return np.array([r.speed for r in self.runners], dtype=np.float64)

    @property
    def wave_indices(self) -> np.ndarray:
        return np.array([r.wave_index for r in self.runners], dtype=np.int64)

    def wave_counts(self) -> np.ndarray:
        """Number of runners in each wave."""
        return np.bincount(self.wave_indices, minlength=len(self.waves))

    def advance(self, t: float) -> None:
        """Advance every runner to simulation time t."""
        if self.config.motion == "wandering":
            headings = self.noise.normal(self.config.orientation_std, len(self.runners))
        else:
            headings = np.zeros(len(self.runners))

        for runner, heading in zip(self.runners, headings):
            runner.advance(t, float(heading))
        self.time = t

    def run_to(self, t_end: float, step: float) -> int:
        """
        Advance to t_end in increments of at most `step`.

        Keeps per-advance displacement small so the single-bounce reflection
        stays valid (speed * step < track_height).

        Returns:
            Number of advance() calls made
        """
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step}")
        if t_end < self.time:
            raise ValueError(f"t_end {t_end} is before the current time {self.time}")
        calls = 0
        while self.time + step < t_end:
            self.advance(self.time + step)
            calls += 1
        self.advance(t_end)
        return calls + 1

    def rasterize(self, buffer: PixelBuffer) -> int:
        """
        Paint every runner in its wave color.

        Returns:
            Number of pixels written (off-buffer pixels are skipped)
        """
        if not self.runners:
            return 0

        positions = self.positions
        px, py = footprints(
            positions[:, 0],
            positions[:, 1],
            self.config.runner_radius,
            buffer.width,
            self.config.wrap_offset,
        )
        colors = np.broadcast_to(self._wave_colors[self.wave_indices][:, np.newaxis], px.shape)
        return buffer.paint(px, py, colors)

    def rasterize_runner(self, runner: Runner, buffer: PixelBuffer) -> int:
        """Paint a single runner in its wave color."""
        px, py = runner.footprint(self.config.runner_radius, buffer.width, self.config.wrap_offset)
        return buffer.paint(px, py, self.waves.color_of(runner.wave_index))

    def draw(self, t: float, buffer: PixelBuffer) -> int:
        """
        Advance to time t and paint into buffer. Does NOT clear the buffer.

        Returns:
            Number of pixels written
        """
        self.advance(t)
        return self.rasterize(buffer)
