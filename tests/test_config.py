"""
Tests for configuration and command line handling.
"""
from pathlib import Path

import pytest

from playback.config import PlaybackConfig, StreamConfig


class TestPlaybackConfig:

    def test_defaults(self, monkeypatch):
        for name in ("TRAJ_FPS", "TRAJ_TRAIL_OFFSET", "TRAJ_SPRITE_PATH"):
            monkeypatch.delenv(name, raising=False)
        config = PlaybackConfig.from_env()

        assert config.fps == 50
        assert config.frame_interval_ms == 20.0
        assert config.trail_offset == 1
        assert config.sprite_path == "images/mosquito.png"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TRAJ_FPS", "25")
        monkeypatch.setenv("TRAJ_TRAIL_OFFSET", "3")
        monkeypatch.setenv("TRAJ_MAX_SPEED", "2.0")
        monkeypatch.setenv("TRAJ_SPRITE_PATH", "")
        config = PlaybackConfig.from_env()

        assert config.frame_interval_ms == 40.0
        assert config.trail_offset == 3
        assert config.max_speed_color == 2.0
        assert config.sprite_path is None


class TestStreamConfig:

    def test_from_path(self):
        cfg = StreamConfig.from_path("data/trajectories_visual_co2.csv", size=400, y_up=False)

        assert cfg.stream_id == "trajectories_visual_co2"
        assert cfg.title == "trajectories visual co2"
        assert cfg.data_path == Path("data/trajectories_visual_co2.csv")
        assert (cfg.width, cfg.height) == (400, 400)
        assert not cfg.y_up


class TestParseArgs:

    @pytest.fixture
    def parse_args(self):
        from main import parse_args
        return parse_args

    def test_multiple_conditions(self, parse_args):
        paths, density, y_up, grid = parse_args(["a.csv", "b.csv"])
        assert paths == ["a.csv", "b.csv"]
        assert not density and y_up and grid

    def test_flags(self, parse_args):
        paths, density, y_up, grid = parse_args(["--density", "--y-down", "--no-grid", "a.csv"])
        assert paths == ["a.csv"]
        assert density and not y_up and not grid

    def test_density_needs_single_file(self, parse_args):
        with pytest.raises(ValueError, match="exactly one"):
            parse_args(["--density", "a.csv", "b.csv"])

    def test_unknown_flag(self, parse_args):
        with pytest.raises(ValueError, match="Unknown option"):
            parse_args(["--fast", "a.csv"])

    def test_no_files(self, parse_args):
        with pytest.raises(ValueError, match="No data files"):
            parse_args([])


class TestStreamConfigsFromPaths:

    def test_same_file_name_in_different_folders(self):
        configs = StreamConfig.from_paths(["control/trajectories.csv", "co2/trajectories.csv"])

        assert [c.stream_id for c in configs] == ["trajectories-1", "trajectories-2"]
        assert [c.title for c in configs] == ["control / trajectories", "co2 / trajectories"]

    def test_suffix_does_not_clash_with_existing_name(self):
        configs = StreamConfig.from_paths(["a/run.csv", "b/run.csv", "run-1.csv"])
        ids = [c.stream_id for c in configs]

        assert len(set(ids)) == 3
        assert ids[2] == "run-1"

    def test_distinct_names_unchanged(self):
        configs = StreamConfig.from_paths(["control.csv", "co2.csv"], size=300)

        assert [c.stream_id for c in configs] == ["control", "co2"]
        assert all(c.width == 300 for c in configs)
