# trajectory/timeline.py
from typing import Iterable

import numpy as np

from .model import Sample


def extract_timeline(samples: Iterable[Sample]) -> np.ndarray:
    """
    Build the ordered set of distinct time points for one stream.

    Two times are the same tick only if they parse to the identical float.
    Non-finite times never become ticks. An empty input gives an empty
    timeline, which downstream code treats as "never ready".
    """
    times = np.fromiter((s.time for s in samples), dtype=float)
    times = times[np.isfinite(times)]
    return np.unique(times)

