"""
Noise sources for perception error and heading wander.

The simulation never touches a global RNG. Every random draw goes through a
NoiseSource passed in by the caller, so tests can swap in FixedNoise and runs
can be reproduced from a seed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol

import numpy as np


class NoiseSource(Protocol):
    """Protocol for zero-mean noise generators."""

    def normal(self, scale: float, size: int) -> np.ndarray:
        """
        Draw `size` independent samples from N(0, scale).

        Args:
            scale: Standard deviation (0 gives all zeros)
            size: Number of samples

        Returns:
            float64 array of shape (size,)
        """
        ...


@dataclass
class GaussianNoise:
    """Gaussian noise backed by a numpy Generator."""

    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    @classmethod
    def seeded(cls, seed: int | None) -> GaussianNoise:
        """Noise source with a reproducible generator."""
        return cls(rng=np.random.default_rng(seed))

    def normal(self, scale: float, size: int) -> np.ndarray:
        if scale == 0.0:
            return np.zeros(size, dtype=np.float64)
        return self.rng.normal(0.0, scale, size)


@dataclass
class FixedNoise:
    """
    Deterministic stand-in that returns the same value for every sample.

    FixedNoise(0.0) turns off all randomness: runners head straight
    along the track and are classified on their true speed.
    """

    value: float = 0.0

    def normal(self, scale: float, size: int) -> np.ndarray:
        return np.full(size, self.value, dtype=np.float64)
