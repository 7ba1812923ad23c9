# playback/transport.py
import logging
from typing import Callable, List

from playback.session import PlaybackSession

logger = logging.getLogger(__name__)


class TransportController:
    """Play/pause and reset actions shared by all streams."""

    def __init__(self, session: PlaybackSession):
        self.session = session
        self.reset_listeners: List[Callable[[], None]] = []

    def add_reset_listener(self, callback: Callable[[], None]) -> None:
        self.reset_listeners.append(callback)

    def toggle_play_pause(self) -> bool:
        """
        Flip the global play flag and return the new value.

        While streams are still precomputing the flag is recorded but has no
        visible effect; autoplay overrides it once every stream is ready.
        """
        self.session.is_playing = not self.session.is_playing
        logger.info(f"Playback {'resumed' if self.session.is_playing else 'paused'} "
                    f"(state: {self.session.state.value})")
        return self.session.is_playing

    def reset(self) -> None:
        """Jump every stream back to tick 0 and redraw it right away."""
        for stream in self.session.streams:
            stream.tick_index = 0
            frame = stream.frame_at(0)
            if frame is not None:
                self.session.display.show_frame(stream, frame)

        for callback in self.reset_listeners:
            callback()
        logger.info("Playback reset to t=0")
