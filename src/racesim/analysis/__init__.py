"""
Analysis layer: derived quantities for reporting.

IMPORTANT: This is NOT seen by the simulation. One-way derivation only.

- summarize_waves: per-wave counts, mean speed and track spread
- misclassified_fraction: effect of perception error on wave assignment
"""

from racesim.analysis.summary import (
    WaveSummary,
    summarize_waves,
    misclassified_fraction,
    format_summary,
)

__all__ = [
    "WaveSummary",
    "summarize_waves",
    "misclassified_fraction",
    "format_summary",
]
