"""
Start grid layout.

Runners line up wave by wave in columns of `aligned_per_row` runners.
Each wave starts on a fresh column, followed by `wave_gap` empty columns,
so waves form visually separated blocks and no two runners share a cell.

Grid cell (row, col) maps to position (col * start_distance, row * start_distance):
x runs along the track, y across it.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np


def start_grid(
    wave_indices: Sequence[int] | np.ndarray,
    n_waves: int,
    aligned_per_row: int,
    start_distance: float,
    wave_gap: int = 0,
) -> np.ndarray:
    """
    Compute collision-free starting positions.

    Waves are placed in index order. Within a wave, runners keep their
    relative order and fill a column top to bottom before moving on to the
    next column. After a wave, a partially filled column is closed and
    `wave_gap` columns are skipped. A wave with no runners still adds
    its gap.

    Args:
        wave_indices: Wave index of each runner
        n_waves: Number of waves in the table
        aligned_per_row: Runners per column before moving to the next one
        start_distance: Spacing between grid cells
        wave_gap: Empty columns inserted after each wave

    Returns:
        (N, 2) float64 array of (x, y) starting positions, in runner order
    """
    if aligned_per_row < 1:
        raise ValueError(f"aligned_per_row must be >= 1, got {aligned_per_row}")
    if start_distance <= 0:
        raise ValueError(f"start_distance must be > 0, got {start_distance}")
    if wave_gap < 0:
        raise ValueError(f"wave_gap must be >= 0, got {wave_gap}")

    wave_indices = np.asarray(wave_indices, dtype=np.int64)
    if wave_indices.size and (wave_indices.min() < 0 or wave_indices.max() >= n_waves):
        raise ValueError(f"wave indices must lie in [0, {n_waves})")

    positions = np.zeros((len(wave_indices), 2), dtype=np.float64)
    row = 0
    col = 0

    for wave_index in range(n_waves):
        for i in np.flatnonzero(wave_indices == wave_index):
            positions[i] = (col * start_distance, row * start_distance)
            row += 1
            if row == aligned_per_row:
                row = 0
                col += 1

        # Close a partially filled column
        if row != 0:
            row = 0
            col += 1
        col += wave_gap

    return positions


def grid_columns(wave_counts: Sequence[int], aligned_per_row: int, wave_gap: int = 0) -> int:
    """
    Total number of columns (gaps included) used by the start grid.

    Useful for checking that the start grid fits on the canvas.
    """
    total = 0
    for count in wave_counts:
        total += -(-int(count) // aligned_per_row) + wave_gap
    return total
