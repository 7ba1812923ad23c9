"""
Position sampling for the density companion view.
"""
from typing import Optional, Tuple

import numpy as np


class DensitySampler:
    """
    Collects every insect position inside a short trailing time window.

    The view is refreshed only when the data time has moved on by at least
    `update_interval` seconds since the last refresh (or on the first call
    after construction/reset), so the scatter does not flicker at 50 fps.
    """

    def __init__(self, stream, sample_window: float = 0.05, update_interval: float = 0.1):
        self.stream = stream
        self.sample_window = sample_window
        self.update_interval = update_interval
        self.last_update_time: Optional[float] = None

    def reset(self) -> None:
        self.last_update_time = None

    def positions_at(self, tick: int) -> Tuple[np.ndarray, np.ndarray]:
        """x and y of all samples with time in (t - window, t]."""
        timeline = self.stream.timeline
        t = timeline[tick]
        lo = np.searchsorted(timeline, t - self.sample_window, side="right")
        xs, ys = [], []
        for k in range(lo, tick + 1):
            for s in self.stream.samples_at(k):
                xs.append(s.x)
                ys.append(s.y)
        return np.array(xs, dtype=float), np.array(ys, dtype=float)

    def update(self, tick: int) -> Optional[Tuple[np.ndarray, np.ndarray, float]]:
        """
        Return (xs, ys, t) when a refresh is due at this tick, else None.
        """
        if len(self.stream.timeline) == 0:
            return None
        t = float(self.stream.timeline[tick])
        due = (
            self.last_update_time is None
            or t - self.last_update_time >= self.update_interval - 1e-9
            # playback looped back to the start
            or t < self.last_update_time
        )
        if not due:
            return None
        self.last_update_time = t
        xs, ys = self.positions_at(tick)
        return xs, ys, t
