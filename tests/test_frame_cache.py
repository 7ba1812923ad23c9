"""
Tests for chunked frame precomputation.
"""
import pytest
from PyQt5 import QtCore

from conftest import make_stream
from playback.config import StreamConfig
from playback.frame_cache import FrameCache, PrecomputeTask, progress_percent
from playback.renderer import FrameRenderer
from playback.stream import Stream


class FakeRenderer:
    """Counts render calls instead of drawing."""

    def __init__(self):
        self.calls = []

    def render(self, stream, tick):
        self.calls.append(tick)
        return f"frame-{tick}"


class TestProgressPercent:

    def test_rounds_half_up(self):
        assert progress_percent(1, 8) == 13   # 12.5
        assert progress_percent(1, 3) == 33

    def test_complete(self):
        assert progress_percent(25, 25) == 100


class TestFrameCacheSteps:

    def test_yields_after_each_chunk(self):
        stream = make_stream(n_ticks=25)
        renderer = FakeRenderer()
        steps = FrameCache(renderer, chunk_size=10).steps(stream)

        assert next(steps) == 40
        assert len(renderer.calls) == 10
        assert stream.is_precomputing and not stream.is_ready

        assert next(steps) == 80
        assert next(steps) == 100
        assert not stream.is_ready

        with pytest.raises(StopIteration):
            next(steps)
        assert stream.is_ready
        assert not stream.is_precomputing
        assert stream.frames == [f"frame-{i}" for i in range(25)]

    def test_precompute_runs_to_completion(self):
        stream = make_stream(n_ticks=7)
        frames = FrameCache(FakeRenderer(), chunk_size=3).precompute(stream)

        assert len(frames) == 7
        assert stream.precompute_progress == 100
        assert stream.is_ready

    def test_empty_timeline_never_becomes_ready(self):
        stream = Stream(StreamConfig(stream_id="empty", title="empty", data_path="empty.csv"))
        stream.load([])

        frames = FrameCache(FakeRenderer()).precompute(stream)

        assert frames == []
        assert not stream.is_ready
        assert not stream.is_precomputing
        assert stream.error

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            FrameCache(FakeRenderer(), chunk_size=0)


@pytest.mark.usefixtures("qapp")
class TestFrameCacheRendering:

    def test_rerun_is_pixel_identical(self, config):
        cache = FrameCache(FrameRenderer(config), chunk_size=4)
        first = list(cache.precompute(make_stream(n_ticks=12)))
        second = cache.precompute(make_stream(n_ticks=12))

        assert len(first) == len(second) == 12
        assert all(a == b for a, b in zip(first, second))

    def test_task_runs_in_event_loop(self, config):
        stream = make_stream(n_ticks=23)
        task = PrecomputeTask(FrameCache(FakeRenderer(), chunk_size=10), stream)
        progress = []
        finished = []
        task.progress.connect(lambda sid, pct: progress.append(pct))
        task.finished.connect(finished.append)

        loop = QtCore.QEventLoop()
        task.finished.connect(loop.quit)
        QtCore.QTimer.singleShot(5000, loop.quit)
        task.start()
        loop.exec_()

        assert progress == [43, 87, 100]
        assert finished == ["s"]
        assert stream.is_ready
