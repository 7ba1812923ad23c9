"""
Shared fixtures for the playback tests.

Qt runs with the offscreen platform so QPainter/QImage work without a display.
"""
import math
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5 import QtWidgets

from playback.config import PlaybackConfig, StreamConfig
from playback.stream import Stream
from trajectory.model import Sample


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def make_samples(n_ticks, n_insects=2, step=0.02, skip=()):
    """
    Synthetic circling insects.

    Args:
        n_ticks: Number of time points
        n_insects: Trajectories per time point
        step: Time grid step
        skip: (trajectory_id, tick) pairs to leave out, to create gaps
    """
    samples = []
    for tick in range(n_ticks):
        t = round(tick * step, 10)
        for tid in range(n_insects):
            if (tid, tick) in skip:
                continue
            phase = tick * 0.05 + tid
            samples.append(Sample(
                time=t,
                trajectory_id=tid,
                x=0.5 * (tid + 1) / n_insects * math.cos(phase),
                y=0.5 * (tid + 1) / n_insects * math.sin(phase),
                vx=-math.sin(phase),
                vy=math.cos(phase),
                speed=0.3 * tid + 0.2,
            ))
    return samples


def make_stream(stream_id="s", n_ticks=10, size=100, **kwargs):
    cfg = StreamConfig(stream_id=stream_id, title=stream_id, data_path=f"{stream_id}.csv",
                       width=size, height=size)
    stream = Stream(cfg)
    stream.load(make_samples(n_ticks, **kwargs))
    return stream


def ready_stream(stream_id="s", n_ticks=10):
    """A loaded stream with placeholder frames, no rendering involved."""
    stream = make_stream(stream_id, n_ticks)
    stream.frames = [f"{stream_id}:{i}" for i in range(n_ticks)]
    stream.is_ready = True
    return stream


class RecordingDisplay:
    """Display sink that remembers every call."""

    def __init__(self):
        self.frames = []
        self.progress = []
        self.errors = []

    def show_frame(self, stream, frame):
        self.frames.append((stream.stream_id, frame))

    def show_progress(self, stream, percent):
        self.progress.append((stream.stream_id, percent))

    def show_error(self, stream, message):
        self.errors.append((stream.stream_id, message))


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def config():
    return PlaybackConfig(sprite_path=None)
