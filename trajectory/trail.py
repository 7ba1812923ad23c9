# trajectory/trail.py
from typing import List

from .model import Sample


def resolve_trail(sample: Sample, stream, length: int = 10, offset: int = 1) -> List[Sample]:
    """
    Recent positions of the same insect, nearest first.

    Scans `length` ticks starting `offset` ticks before the sample's own
    tick. Ticks where the trajectory has no row are skipped; scanning stops
    at tick 0.

    Args:
        sample: Current position of the insect
        stream: Anything exposing tick_of(time) and sample_for(trajectory_id, tick)
        length: Maximum number of trail points
        offset: How many ticks back the trail starts (1 = previous tick)
    """
    tick = stream.tick_of(sample.time)
    if tick is None:
        return []

    trail = []
    for i in range(offset, offset + length):
        prev_tick = tick - i
        if prev_tick < 0:
            break
        prev = stream.sample_for(sample.trajectory_id, prev_tick)
        if prev is not None:
            trail.append(prev)
    return trail
