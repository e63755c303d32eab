"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_config():
    """A 200x120 canvas with 5 runners per column and no gap between waves."""
    from racesim.core import RaceConfig
    return RaceConfig(
        width=200,
        height=120,
        runner_count=50,
        aligned_per_row=5,
        start_distance=2.0,
        wave_gap=0,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def still_noise():
    """Noise source that always returns 0 (straight headings, true speeds)."""
    from racesim.core import FixedNoise
    return FixedNoise(0.0)
