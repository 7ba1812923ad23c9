"""
Fixed-rate playback clock.

`PlaybackClock.wake()` is called at display-refresh rate with a millisecond
timestamp. Whenever at least one frame interval has elapsed it advances all
streams by exactly one tick and draws their frames together. The reference
time keeps the remainder of the elapsed time so the playback rate does not
drift slower than the target.
"""
import logging
from typing import Callable, List

from PyQt5 import QtCore

from playback.session import PlaybackSession, PlaybackState

logger = logging.getLogger(__name__)


class PlaybackClock:

    def __init__(self, session: PlaybackSession, frame_interval_ms: float = 20.0):
        self.session = session
        self.frame_interval_ms = frame_interval_ms
        self.advance_listeners: List[Callable[[], None]] = []

    def add_advance_listener(self, callback: Callable[[], None]) -> None:
        self.advance_listeners.append(callback)

    def wake(self, timestamp_ms: float) -> int:
        """
        Run one scheduler wake-up.

        Returns:
            Number of ticks advanced (0 or 1)
        """
        session = self.session
        state = session.state

        if state is PlaybackState.WAITING:
            for stream in session.streams:
                if stream.is_precomputing:
                    session.display.show_progress(stream, stream.precompute_progress)
            return 0

        if session.last_frame_time is None:
            session.last_frame_time = timestamp_ms

        if state is PlaybackState.READY_PAUSED:
            return 0

        elapsed = timestamp_ms - session.last_frame_time
        if elapsed < self.frame_interval_ms:
            return 0

        for stream in session.streams:
            stream.advance()
        for stream in session.streams:
            frame = stream.current_frame()
            if frame is not None:
                session.display.show_frame(stream, frame)

        session.last_frame_time = timestamp_ms - (elapsed % self.frame_interval_ms)

        for callback in self.advance_listeners:
            callback()
        return 1


class ClockDriver(QtCore.QObject):
    """Calls PlaybackClock.wake() from a QTimer running at roughly display refresh rate."""

    def __init__(self, clock: PlaybackClock, refresh_ms: int = 4, parent=None):
        super().__init__(parent)
        self.clock = clock
        self.elapsed = QtCore.QElapsedTimer()
        self.timer = QtCore.QTimer(self)
        self.timer.setTimerType(QtCore.Qt.PreciseTimer)
        self.timer.setInterval(refresh_ms)
        self.timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        self.elapsed.start()
        self.timer.start()
        logger.info(f"Playback clock started ({1000.0 / self.clock.frame_interval_ms:.0f} fps target)")

    def stop(self) -> None:
        self.timer.stop()

    def _on_timeout(self) -> None:
        self.clock.wake(float(self.elapsed.elapsed()))
