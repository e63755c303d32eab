"""
racesim: Mass-Start Race Simulator

A simulator that animates thousands of runners leaving a start line in
speed-sorted waves and rasterizes them into a pixel buffer for live display.

Core concepts:
- Each runner has a fixed speed drawn from a Gaussian
- Speed (true or perceived) decides the runner's wave
- Waves start in separated column blocks on the start grid
- Runners advance with a small random heading wander each frame
- The track wraps into stacked bands when it runs off the right edge

See SPEC_FULL.md and DESIGN.md for full details.
"""

__version__ = "0.1.0"
