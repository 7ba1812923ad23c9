"""
Tests for timeline extraction and time grid filtering.
"""
import math

import numpy as np

from conftest import make_samples
from trajectory.model import Sample
from trajectory.loader import grid_mask
from trajectory.timeline import extract_timeline


def _sample(t, tid=0):
    return Sample(time=t, trajectory_id=tid, x=0.0, y=0.0, vx=0.0, vy=1.0, speed=0.1)


class TestExtractTimeline:

    def test_unique_and_ascending(self):
        samples = [_sample(t, tid) for t in (0.06, 0.0, 0.04, 0.02, 0.04, 0.0) for tid in (0, 1)]
        timeline = extract_timeline(samples)

        assert list(timeline) == [0.0, 0.02, 0.04, 0.06]
        assert np.all(np.diff(timeline) > 0)

    def test_empty_input_gives_empty_timeline(self):
        timeline = extract_timeline([])
        assert timeline.size == 0

    def test_nan_times_are_ignored(self):
        timeline = extract_timeline([_sample(math.nan), _sample(0.02)])
        assert list(timeline) == [0.02]

    def test_one_tick_per_grid_point(self):
        timeline = extract_timeline(make_samples(25, n_insects=3))
        assert len(timeline) == 25


class TestTimeGrid:

    def test_multiples_of_step(self):
        assert grid_mask(np.array([0.0, 0.06, 1.34]), 0.02).all()

    def test_off_grid(self):
        assert not grid_mask(np.array([0.01, 0.035]), 0.02).any()

    def test_nan_is_off_grid(self):
        assert not grid_mask(np.array([math.nan]), 0.02).any()
