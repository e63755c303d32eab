"""Unit tests for Runner motion and reflection."""

import math

import numpy as np
import pytest

from racesim.core.runner import Runner, reflect


class TestReflect:
    """Tests for single-bounce reflection."""

    def test_inside_unchanged(self):
        assert reflect(3.0, 10.0) == 3.0
        assert reflect(0.0, 10.0) == 0.0
        assert reflect(10.0, 10.0) == 10.0

    def test_below_zero(self):
        assert reflect(-2.5, 10.0) == 2.5

    def test_above_height(self):
        assert reflect(12.0, 10.0) == 8.0

    @pytest.mark.parametrize("y", np.linspace(-10.0, 20.0, 61))
    def test_bounded_within_one_reflection(self, y):
        out = reflect(float(y), 10.0)
        assert 0.0 <= out <= 10.0

    def test_two_heights_out_not_corrected(self):
        """More than one track height past an edge stays out of bounds."""
        assert reflect(-25.0, 10.0) == 25.0
        assert reflect(35.0, 10.0) == -15.0


class TestRunnerCreation:

    def test_initial_state(self):
        runner = Runner(4.0, 6.0, speed=12.0, wave_index=2)
        assert runner.position == (4.0, 6.0)
        assert runner.last_update_time == 0.0
        assert runner.wave_index == 2
        assert runner.motion == "wandering"

    def test_rejects_non_positive_speed(self):
        with pytest.raises(ValueError):
            Runner(0.0, 0.0, speed=0.0, wave_index=0)

    def test_rejects_unknown_motion(self):
        with pytest.raises(ValueError):
            Runner(0.0, 0.0, speed=1.0, wave_index=0, motion="sprint")


class TestLinearMotion:

    def test_straight_line(self):
        runner = Runner(2.0, 4.0, speed=10.0, wave_index=0, motion="linear")
        runner.advance(1.5)
        assert runner.position == (17.0, 4.0)
        assert runner.last_update_time == 1.5

    def test_orientation_ignored(self):
        runner = Runner(0.0, 4.0, speed=10.0, wave_index=0, motion="linear")
        runner.advance(1.0, orientation=0.5)
        assert runner.position == (10.0, 4.0)

    def test_matches_closed_form(self):
        """Many small steps land where x0 + v*t says."""
        runner = Runner(6.0, 2.0, speed=11.5, wave_index=1, motion="linear")
        for t in np.linspace(0.0, 30.0, 301):
            runner.advance(float(t))
        assert runner.x == pytest.approx(6.0 + 11.5 * 30.0)
        assert runner.y == 2.0


class TestWanderingMotion:

    def test_zero_dt_no_displacement(self):
        runner = Runner(5.0, 5.0, speed=12.0, wave_index=0, track_height=80.0)
        for heading in (0.0, 0.3, -2.0, math.pi):
            runner.advance(0.0, orientation=heading)
            assert runner.position == (5.0, 5.0)

    def test_zero_dt_at_later_time(self):
        runner = Runner(5.0, 5.0, speed=12.0, wave_index=0, track_height=80.0)
        runner.advance(2.0, orientation=0.1)
        before = runner.position
        runner.advance(2.0, orientation=1.0)
        assert runner.position == before

    def test_heading_displacement(self):
        runner = Runner(0.0, 40.0, speed=10.0, wave_index=0, track_height=80.0)
        runner.advance(2.0, orientation=math.pi / 6)
        assert runner.x == pytest.approx(20.0 * math.cos(math.pi / 6))
        assert runner.y == pytest.approx(40.0 + 20.0 * math.sin(math.pi / 6))

    def test_speed_constant(self):
        runner = Runner(0.0, 40.0, speed=10.0, wave_index=0, track_height=80.0)
        runner.advance(1.0, orientation=0.4)
        runner.advance(2.0, orientation=-0.4)
        assert runner.speed == 10.0

    def test_reflects_off_bottom_edge(self):
        runner = Runner(0.0, 1.0, speed=4.0, wave_index=0, track_height=10.0)
        runner.advance(1.0, orientation=-math.pi / 2)  # straight down by 4
        assert runner.y == pytest.approx(3.0)

    def test_reflects_off_top_edge(self):
        runner = Runner(0.0, 9.0, speed=4.0, wave_index=0, track_height=10.0)
        runner.advance(1.0, orientation=math.pi / 2)
        assert runner.y == pytest.approx(7.0)

    def test_distance_from_start(self):
        runner = Runner(1.0, 1.0, speed=5.0, wave_index=0, track_height=80.0)
        runner.advance(1.0, orientation=0.0)
        assert runner.distance_from_start() == pytest.approx(5.0)


class TestFootprint:

    def test_radius_one_disk(self):
        runner = Runner(10.4, 20.7, speed=1.0, wave_index=0)
        px, py = runner.footprint(radius=1, width=100, wrap_offset=80.0)
        assert sorted(zip(px.tolist(), py.tolist())) == [
            (9, 20), (10, 19), (10, 20), (10, 21), (11, 20),
        ]

    def test_radius_zero_single_pixel(self):
        runner = Runner(3.9, 4.1, speed=1.0, wave_index=0)
        px, py = runner.footprint(radius=0, width=100, wrap_offset=80.0)
        assert px.tolist() == [3]
        assert py.tolist() == [4]
