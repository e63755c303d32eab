"""
Core race model.

This layer knows NOTHING about windows, figures, or wall-clock time.
It only knows:
- Waves (speed bands) and how to classify a speed
- The start grid layout
- Runners and how they move between two simulation times
- How positions map to pixels in a flat buffer

Randomness always comes from an injected NoiseSource.
"""

from racesim.core.config import RaceConfig, MotionMode, MOTION_MODES
from racesim.core.waves import Wave, WaveTable, DEFAULT_WAVES, create_default_waves
from racesim.core.noise import NoiseSource, GaussianNoise, FixedNoise
from racesim.core.layout import start_grid, grid_columns
from racesim.core.raster import PixelBuffer, disk_offsets, pixel_coords, footprints
from racesim.core.runner import Runner, reflect
from racesim.core.simulation import Simulation, sample_speeds

__all__ = [
    "RaceConfig",
    "MotionMode",
    "MOTION_MODES",
    "Wave",
    "WaveTable",
    "DEFAULT_WAVES",
    "create_default_waves",
    "NoiseSource",
    "GaussianNoise",
    "FixedNoise",
    "start_grid",
    "grid_columns",
    "PixelBuffer",
    "disk_offsets",
    "pixel_coords",
    "footprints",
    "Runner",
    "reflect",
    "Simulation",
    "sample_speeds",
]
