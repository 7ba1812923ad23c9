"""
Shared playback state for one viewing session.
"""
import logging
from enum import Enum
from typing import List, Optional

from playback.stream import Stream

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    WAITING = "waiting"              # at least one stream not ready
    READY_PAUSED = "ready_paused"
    READY_PLAYING = "ready_playing"


class PlaybackSession:
    """
    Context object owned by the playback clock and transport controller.

    Holds the streams, the global play flag and the clock's last-advance
    reference time. The display is any object providing
    show_frame(stream, frame), show_progress(stream, percent) and
    show_error(stream, message).

    Autoplay: the moment the last stream becomes ready, `is_playing` is
    forced to True, whatever the transport did while streams were loading.
    This happens once per session.
    """

    def __init__(self, streams: List[Stream], display):
        ids = [s.stream_id for s in streams]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Stream ids must be unique, got duplicates: {', '.join(duplicates)}")
        self.streams = list(streams)
        self.display = display
        self.is_playing = False
        self.last_frame_time: Optional[float] = None
        self.autoplay_fired = False

    def stream(self, stream_id: str) -> Stream:
        for s in self.streams:
            if s.stream_id == stream_id:
                return s
        raise KeyError(stream_id)

    def all_ready(self) -> bool:
        return bool(self.streams) and all(s.is_ready for s in self.streams)

    @property
    def state(self) -> PlaybackState:
        if not self.all_ready():
            return PlaybackState.WAITING
        return PlaybackState.READY_PLAYING if self.is_playing else PlaybackState.READY_PAUSED

    def stream_finished(self, stream: Stream) -> None:
        """Called once a stream's precomputation is over, successfully or not."""
        if not stream.is_ready:
            self.stream_failed(stream)
            return

        frame = stream.frame_at(0)
        stream.tick_index = 0
        if frame is not None:
            self.display.show_frame(stream, frame)

        if self.all_ready() and not self.autoplay_fired:
            self._autoplay()

    def stream_failed(self, stream: Stream) -> None:
        logger.error(f"[{stream.stream_id}] {stream.error}")
        self.display.show_error(stream, stream.error or "Unknown error")

    def _autoplay(self) -> None:
        self.autoplay_fired = True
        self.is_playing = True
        self.last_frame_time = None
        logger.info(f"All {len(self.streams)} streams ready, starting playback")
