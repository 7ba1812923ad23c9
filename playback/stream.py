# playback/stream.py
import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from playback.config import StreamConfig
from trajectory.model import Sample
from trajectory.timeline import extract_timeline

logger = logging.getLogger(__name__)


class Stream:
    """
    One independently playing condition.

    Holds the loaded samples indexed by tick, the precomputed frame store
    and the readiness flags read by the playback clock.
    """

    def __init__(self, config: StreamConfig):
        self.config = config
        self.samples: List[Sample] = []
        self.timeline = np.empty(0, dtype=float)
        self.tick_index = 0

        self.frames: List[Any] = []
        self.is_precomputing = False
        self.precompute_progress = 0
        self.is_ready = False
        self.error: Optional[str] = None

        self._tick_of_time: Dict[float, int] = {}
        self._by_tick: Dict[int, List[Sample]] = {}
        self._by_key: Dict[Tuple[int, int], Sample] = {}

    @property
    def stream_id(self) -> str:
        return self.config.stream_id

    @property
    def title(self) -> str:
        return self.config.title

    def __len__(self):
        return len(self.timeline)

    def __repr__(self):
        return f"Stream({self.stream_id!r}, ticks={len(self)}, ready={self.is_ready})"

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def load(self, samples: List[Sample]) -> None:
        """Attach samples and build the timeline and lookup indexes."""
        self.samples = list(samples)
        self.timeline = extract_timeline(self.samples)
        self._tick_of_time = {float(t): i for i, t in enumerate(self.timeline)}

        by_tick = defaultdict(list)
        self._by_key = {}
        for s in self.samples:
            tick = self._tick_of_time.get(s.time)
            if tick is None:
                continue
            by_tick[tick].append(s)
            self._by_key[(s.trajectory_id, tick)] = s
        self._by_tick = dict(by_tick)
        self.tick_index = 0

        logger.info(f"[{self.stream_id}] {len(self.samples)} samples over {len(self.timeline)} ticks")

    def fail(self, message: str) -> None:
        """Mark the stream as permanently not ready."""
        self.error = message
        self.is_precomputing = False
        self.is_ready = False

    def tick_of(self, time: float) -> Optional[int]:
        return self._tick_of_time.get(time)

    def time_at(self, tick: int) -> float:
        return float(self.timeline[tick])

    def samples_at(self, tick: int) -> List[Sample]:
        return self._by_tick.get(tick, [])

    def sample_for(self, trajectory_id: int, tick: int) -> Optional[Sample]:
        return self._by_key.get((trajectory_id, tick))

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------

    def advance(self) -> int:
        """Step one tick forward, looping at the end of this stream's own timeline."""
        if len(self.timeline):
            self.tick_index = (self.tick_index + 1) % len(self.timeline)
        return self.tick_index

    def frame_at(self, tick: int):
        if 0 <= tick < len(self.frames):
            return self.frames[tick]
        return None

    def current_frame(self):
        return self.frame_at(self.tick_index)
