"""
RaceConfig: every startup constant of a race in one place.

Defaults reproduce the classic mass-start setup: 20 000 runners on a
1920x1080 canvas, 40 runners per start-grid column, speeds ~ N(12, 2).
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import Literal

MotionMode = Literal["linear", "wandering"]
MOTION_MODES = ("linear", "wandering")


@dataclass(frozen=True)
class RaceConfig:
    """Configuration for a race and its canvas."""

    # Canvas (pixels)
    width: int = 1920
    height: int = 1080

    # Field
    runner_count: int = 20_000
    runner_radius: int = 1  # Disk radius in pixels
    aligned_per_row: int = 40  # Runners per start-grid column
    start_distance: float = 2.0  # Grid spacing between neighbouring runners
    wave_gap: int = 1  # Empty columns between consecutive waves

    # Time
    t_max: float = 600.0  # Simulation horizon (simulated seconds)
    time_factor: float = 10.0  # Simulated seconds per wall-clock second

    # Speed distribution N(speed_mean, speed_std), truncated to speed > 0
    speed_mean: float = 12.0
    speed_std: float = 2.0

    # Noise
    perception_std: float = 0.0  # Speed self-estimation error; 0 = classify on true speed
    orientation_std: float = 0.05  # Heading wander per frame (radians)

    # Motion
    motion: MotionMode = "wandering"
    track_height: float | None = None  # Reflection boundary; None = start grid height

    # Display
    background_color: int = 0x000000
    title: str = "Runners Simulation - ESC to exit"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas must be positive, got {self.width}x{self.height}")
        if self.runner_count < 0:
            raise ValueError(f"runner_count must be >= 0, got {self.runner_count}")
        if self.runner_radius < 0:
            raise ValueError(f"runner_radius must be >= 0, got {self.runner_radius}")
        if self.aligned_per_row < 1:
            raise ValueError(f"aligned_per_row must be >= 1, got {self.aligned_per_row}")
        if self.start_distance <= 0:
            raise ValueError(f"start_distance must be > 0, got {self.start_distance}")
        if self.wave_gap < 0:
            raise ValueError(f"wave_gap must be >= 0, got {self.wave_gap}")
        if self.t_max <= 0 or self.time_factor <= 0:
            raise ValueError("t_max and time_factor must be > 0")
        if self.speed_mean <= 0:
            raise ValueError(f"speed_mean must be > 0, got {self.speed_mean}")
        for name in ("speed_std", "perception_std", "orientation_std"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.motion not in MOTION_MODES:
            raise ValueError(f"motion must be one of {MOTION_MODES}, got {self.motion!r}")
        if self.track_height is not None and self.track_height <= 0:
            raise ValueError(f"track_height must be > 0, got {self.track_height}")
        if self.track_height is not None and self.track_height < self.grid_height:
            raise ValueError(
                f"track_height {self.track_height} is below the start grid height {self.grid_height}"
            )

    @property
    def grid_height(self) -> float:
        """y of the last row in the start grid."""
        return (self.aligned_per_row - 1) * self.start_distance

    @property
    def wrap_offset(self) -> float:
        """Vertical shift applied each time the track wraps past the right edge."""
        return 2 * self.aligned_per_row * self.start_distance

    @property
    def effective_track_height(self) -> float:
        """Reflection boundary for wandering runners."""
        if self.track_height is None:
            return self.aligned_per_row * self.start_distance
        return self.track_height

    def replace(self, **overrides) -> RaceConfig:
        """Validated copy with some fields changed."""
        return dataclasses.replace(self, **overrides)
