"""Unit tests for RaceConfig."""

import pytest

from racesim.core.config import RaceConfig


class TestRaceConfig:

    def test_default_config(self):
        cfg = RaceConfig()
        assert cfg.width == 1920
        assert cfg.height == 1080
        assert cfg.runner_count == 20_000
        assert cfg.aligned_per_row == 40
        assert cfg.start_distance == 2.0
        assert cfg.motion == "wandering"
        assert cfg.perception_std == 0.0

    def test_wrap_offset(self):
        cfg = RaceConfig(aligned_per_row=40, start_distance=2.0)
        assert cfg.wrap_offset == 160.0

    def test_track_height_defaults_to_grid_height(self):
        cfg = RaceConfig(aligned_per_row=10, start_distance=3.0)
        assert cfg.effective_track_height == 30.0

    def test_explicit_track_height(self):
        cfg = RaceConfig(track_height=100.0)
        assert cfg.effective_track_height == 100.0

    def test_track_height_may_equal_grid_height(self):
        cfg = RaceConfig(aligned_per_row=40, start_distance=2.0, track_height=78.0)
        assert cfg.grid_height == 78.0
        assert cfg.effective_track_height == 78.0

    def test_replace_validates(self):
        cfg = RaceConfig()
        assert cfg.replace(runner_count=10).runner_count == 10
        with pytest.raises(ValueError):
            cfg.replace(aligned_per_row=0)

    def test_frozen(self):
        cfg = RaceConfig()
        with pytest.raises(AttributeError):
            cfg.width = 10

    @pytest.mark.parametrize(
        "overrides",
        [
            dict(width=0),
            dict(height=-1),
            dict(runner_count=-5),
            dict(runner_radius=-1),
            dict(aligned_per_row=0),
            dict(start_distance=0.0),
            dict(wave_gap=-1),
            dict(t_max=0.0),
            dict(time_factor=-1.0),
            dict(speed_mean=0.0),
            dict(speed_std=-0.1),
            dict(perception_std=-1.0),
            dict(orientation_std=-0.01),
            dict(motion="jog"),
            dict(track_height=0.0),
            dict(aligned_per_row=40, start_distance=2.0, track_height=10.0),
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            RaceConfig(**overrides)
