"""
Frame precomputation.

Rendering every tick of every stream up front can mean tens of thousands of
frames, so the work is split into small chunks. `FrameCache.steps()` is a
generator that yields after each chunk; `PrecomputeTask` resumes it from the
Qt event loop so the window stays responsive while several streams
precompute side by side.
"""
import logging
import math
from typing import Iterator, List

from PyQt5 import QtCore

from playback.renderer import FrameRenderer
from playback.stream import Stream

logger = logging.getLogger(__name__)


def progress_percent(done: int, total: int) -> int:
    """Rounded completion percentage, halves rounded up, never above 100."""
    return min(100, math.floor(done / total * 100 + 0.5))


class FrameCache:
    """Renders and stores one frame per timeline tick of a stream."""

    def __init__(self, renderer: FrameRenderer, chunk_size: int = 10):
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.renderer = renderer
        self.chunk_size = chunk_size

    def steps(self, stream: Stream) -> Iterator[int]:
        """
        Precompute `stream` one chunk at a time.

        Yields the stream's progress (0-100) after every chunk. When the
        generator is exhausted the stream is either ready or, for an empty
        timeline, failed with an explanatory error.
        """
        total = len(stream.timeline)
        stream.frames = []
        stream.is_ready = False
        stream.precompute_progress = 0

        if total == 0:
            logger.warning(f"[{stream.stream_id}] No time points to render, stream will not play")
            stream.fail("No time points found in data")
            return

        stream.is_precomputing = True
        logger.info(f"[{stream.stream_id}] Precomputing {total} frames")

        for start in range(0, total, self.chunk_size):
            for tick in range(start, min(start + self.chunk_size, total)):
                stream.frames.append(self.renderer.render(stream, tick))
            stream.precompute_progress = progress_percent(len(stream.frames), total)
            yield stream.precompute_progress

        stream.is_precomputing = False
        stream.is_ready = True
        logger.info(f"[{stream.stream_id}] Precomputation complete")

    def precompute(self, stream: Stream) -> List:
        """Run all chunks without yielding to an event loop."""
        for _ in self.steps(stream):
            pass
        return stream.frames


class PrecomputeTask(QtCore.QObject):
    """
    Drives FrameCache.steps() from the Qt event loop.

    Signals:
        progress(str stream_id, int percent) - after each chunk
        finished(str stream_id) - generator exhausted (ready or failed)
    """
    progress = QtCore.pyqtSignal(str, int)
    finished = QtCore.pyqtSignal(str)

    def __init__(self, cache: FrameCache, stream: Stream, parent=None):
        super().__init__(parent)
        self.cache = cache
        self.stream = stream
        self._steps = None

    def start(self) -> None:
        self._steps = self.cache.steps(self.stream)
        QtCore.QTimer.singleShot(0, self._step)

    def _step(self) -> None:
        try:
            percent = next(self._steps)
        except StopIteration:
            self._steps = None
            self.finished.emit(self.stream.stream_id)
            return
        self.progress.emit(self.stream.stream_id, percent)
        QtCore.QTimer.singleShot(0, self._step)
