"""Unit tests for FrameDriver with a fake surface and clock."""

import numpy as np
import pytest

from racesim.core import FixedNoise, Simulation
from racesim.driver import FrameDriver
from racesim.viz.surface import DisplayError


class FakeSurface:
    """Records presented frames; closes or stops after a given number of frames."""

    def __init__(self, close_after=None, stop_after=None, fail_at=None):
        self.close_after = close_after
        self.stop_after = stop_after
        self.fail_at = fail_at
        self.frames = []
        self.closed = False

    def is_open(self):
        return not self.closed and (self.close_after is None or len(self.frames) < self.close_after)

    def is_stop_key_pressed(self):
        return self.stop_after is not None and len(self.frames) >= self.stop_after

    def present(self, buffer):
        if self.fail_at is not None and len(self.frames) == self.fail_at:
            raise DisplayError("Failed to update buffer")
        self.frames.append(buffer.pixels.copy())

    def close(self):
        self.closed = True


class FakeClock:
    """Advances by a fixed step every time it is read."""

    def __init__(self, step=0.1):
        self.now = 0.0
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def race(small_config):
    config = small_config.replace(t_max=5.0, time_factor=10.0)
    return Simulation.from_speeds([10.0, 12.0, 16.0], config, noise=FixedNoise())


class TestStopConditions:

    def test_stops_at_horizon(self, race):
        # Each frame reads the clock once: t = 1, 2, 3, 4, then 5 >= t_max
        driver = FrameDriver(race, FakeSurface(), race.config, clock=FakeClock(0.1))
        stats = driver.run()
        assert stats.stop_reason == "horizon"
        assert stats.frames == 4
        assert stats.sim_time == pytest.approx(4.0)

    def test_stops_when_closed(self, race):
        surface = FakeSurface(close_after=2)
        stats = FrameDriver(race, surface, race.config, clock=FakeClock(0.01)).run()
        assert stats.stop_reason == "closed"
        assert stats.frames == 2

    def test_stops_on_stop_key(self, race):
        surface = FakeSurface(stop_after=3)
        stats = FrameDriver(race, surface, race.config, clock=FakeClock(0.01)).run()
        assert stats.stop_reason == "stop_key"
        assert len(surface.frames) == 3

    def test_max_frames(self, race):
        driver = FrameDriver(race, FakeSurface(), race.config, clock=FakeClock(0.01), max_frames=2)
        assert driver.run().stop_reason == "max_frames"

    def test_closed_before_first_frame(self, race):
        surface = FakeSurface(close_after=0)
        stats = FrameDriver(race, surface, race.config, clock=FakeClock()).run()
        assert stats.frames == 0
        assert surface.frames == []


class TestFrames:

    def test_buffer_cleared_each_frame(self, race):
        surface = FakeSurface()
        FrameDriver(race, surface, race.config, clock=FakeClock(0.1)).run()
        # Runners move 10+ pixels per frame: no pixel of frame 1 survives into frame 4
        first, last = surface.frames[0], surface.frames[-1]
        painted_first = np.flatnonzero(first)
        assert painted_first.size > 0
        assert np.all(last[painted_first] == 0)

    def test_simulation_time_scaled(self, race):
        FrameDriver(race, FakeSurface(), race.config, clock=FakeClock(0.1)).run()
        # Last frame drawn at t=4: runner at speed 10 moved 40 along x
        assert race.runners[0].x == pytest.approx(race.runners[0].start_x + 40.0)

    def test_buffer_matches_config(self, race):
        driver = FrameDriver(race, FakeSurface(), race.config)
        assert driver.buffer.shape == (race.config.height, race.config.width)

    def test_fps(self, race):
        stats = FrameDriver(race, FakeSurface(), race.config, clock=FakeClock(0.1)).run()
        assert stats.fps > 0


class TestPresentationFailure:

    def test_display_error_propagates(self, race):
        surface = FakeSurface(fail_at=1)
        driver = FrameDriver(race, surface, race.config, clock=FakeClock(0.01))
        with pytest.raises(DisplayError):
            driver.run()
        assert len(surface.frames) == 1
