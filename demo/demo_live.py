#!/usr/bin/env python3
"""
Demo: Live Race

Opens a window and animates the default 20 000-runner mass start at
10x real time. Press Escape (or close the window) to stop.
"""

import logging

from racesim.core import RaceConfig, Simulation
from racesim.driver import FrameDriver
from racesim.viz import MatplotlibSurface


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = RaceConfig()
    sim = Simulation.build(config, seed=2024)
    surface = MatplotlibSurface.create(config.title, config.width, config.height)
    try:
        stats = FrameDriver(sim, surface, config).run()
    finally:
        surface.close()

    print(f"{stats.frames} frames, stopped by {stats.stop_reason}")


if __name__ == "__main__":
    main()
