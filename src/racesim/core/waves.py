"""
Waves: speed bands that group runners on the start grid.

A wave is a half-open speed interval [min_speed, max_speed) with a display
color. The WaveTable holds the ordered waves and classifies speeds.

INVARIANT (checked at construction): the last wave is unbounded above, so
every speed resolves to a wave. Speeds that fall in a gap between disjoint
waves, or below the first wave, land in the last wave (the catch-all).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Wave:
    """A speed band and its display color (0xRRGGBB)."""

    min_speed: float
    max_speed: float
    color: int
    name: str = ""

    def contains(self, speed: float) -> bool:
        """True if speed lies in [min_speed, max_speed)."""
        return self.min_speed <= speed < self.max_speed


class WaveTable:
    """
    Ordered, immutable collection of waves.

    Raises ValueError if the waves are empty, unordered, overlapping,
    degenerate, or if the last wave has a finite upper bound.
    """

    def __init__(self, waves: Sequence[Wave]):
        waves = tuple(waves)
        if not waves:
            raise ValueError("WaveTable needs at least one wave")

        for i, wave in enumerate(waves):
            if not wave.min_speed < wave.max_speed:
                raise ValueError(
                    f"Wave {i} has empty interval [{wave.min_speed}, {wave.max_speed})"
                )
            if i > 0 and waves[i - 1].max_speed > wave.min_speed:
                raise ValueError(
                    f"Wave {i} starts at {wave.min_speed} inside wave {i - 1} "
                    f"(ends at {waves[i - 1].max_speed})"
                )

        if not np.isposinf(waves[-1].max_speed):
            raise ValueError(
                f"Last wave must be unbounded above, got max_speed={waves[-1].max_speed}"
            )

        self._waves = waves
        self._colors = np.array([w.color for w in waves], dtype=np.uint32)

    def __len__(self) -> int:
        return len(self._waves)

    def __getitem__(self, index: int) -> Wave:
        return self._waves[index]

    def __iter__(self):
        return iter(self._waves)

    def __repr__(self) -> str:
        return f"WaveTable({list(self._waves)!r})"

    @property
    def waves(self) -> tuple[Wave, ...]:
        return self._waves

    def classify(self, speed: float) -> int:
        """Index of the first wave containing speed (last wave if none does)."""
        for i, wave in enumerate(self._waves):
            if wave.contains(speed):
                return i
        return len(self._waves) - 1

    def classify_many(self, speeds: np.ndarray) -> np.ndarray:
        """Vectorized classify() over an array of speeds."""
        speeds = np.asarray(speeds, dtype=np.float64)
        result = np.full(speeds.shape, len(self._waves) - 1, dtype=np.int64)
        unmatched = np.ones(speeds.shape, dtype=bool)

        for i, wave in enumerate(self._waves):
            hit = unmatched & (speeds >= wave.min_speed) & (speeds < wave.max_speed)
            result[hit] = i
            unmatched &= ~hit

        return result

    def color_of(self, index: int) -> int:
        """Display color of the wave at index."""
        return self._waves[index].color

    def colors(self) -> np.ndarray:
        """Wave colors as a uint32 lookup array."""
        return self._colors.copy()


DEFAULT_WAVES = (
    Wave(0.0, 10.0, 0xFF0000, "red"),
    Wave(10.0, 12.0, 0x0000FF, "blue"),
    Wave(12.0, 15.0, 0x00FF00, "green"),
    Wave(15.0, float("inf"), 0xFFFFFF, "white"),
)


def create_default_waves() -> WaveTable:
    """
    Factory for the default four-wave table.

    Speeds below 10 start in the red wave, 10-12 blue, 12-15 green,
    and 15 or more in the white (elite) wave.
    """
    return WaveTable(DEFAULT_WAVES)
