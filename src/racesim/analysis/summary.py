"""
Per-wave statistics of a running race.

Derived quantities only: nothing here feeds back into the simulation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from racesim.core.simulation import Simulation


@dataclass
class WaveSummary:
    """Snapshot statistics for one wave."""

    index: int
    name: str
    count: int
    mean_speed: float  # NaN for an empty wave
    lead_x: float  # Furthest x reached; NaN for an empty wave
    tail_x: float  # Smallest x; NaN for an empty wave

    @property
    def spread(self) -> float:
        """Length of track covered by the wave."""
        return self.lead_x - self.tail_x


def summarize_waves(sim: "Simulation") -> list[WaveSummary]:
    """
    Compute one WaveSummary per wave, in wave order.

    Args:
        sim: Simulation to inspect (at its current time)
    """
    wave_indices = sim.wave_indices
    speeds = sim.speeds
    xs = sim.positions[:, 0]

    summaries = []
    for i, wave in enumerate(sim.waves):
        mask = wave_indices == i
        count = int(np.count_nonzero(mask))
        if count:
            mean_speed = float(speeds[mask].mean())
            lead_x = float(xs[mask].max())
            tail_x = float(xs[mask].min())
        else:
            mean_speed = lead_x = tail_x = float("nan")
        summaries.append(
            WaveSummary(
                index=i,
                name=wave.name or f"wave {i}",
                count=count,
                mean_speed=mean_speed,
                lead_x=lead_x,
                tail_x=tail_x,
            )
        )
    return summaries


def misclassified_fraction(sim: "Simulation") -> float:
    """
    Fraction of runners whose wave does not contain their true speed.

    Zero when runners are classified on their true speed; grows with
    perception error.
    """
    if len(sim) == 0:
        return 0.0
    true_waves = sim.waves.classify_many(sim.speeds)
    return float(np.mean(true_waves != sim.wave_indices))


def format_summary(summaries: list[WaveSummary]) -> str:
    """Render summaries as a fixed-width text table."""
    lines = [f"{'wave':<10}{'runners':>9}{'mean v':>9}{'lead x':>10}"]
    for s in summaries:
        lines.append(f"{s.name:<10}{s.count:>9d}{s.mean_speed:>9.2f}{s.lead_x:>10.1f}")
    return "\n".join(lines)
