# trajectory/model.py
from dataclasses import dataclass

REQUIRED_COLUMNS = ("time", "trajectory_id", "x", "y", "vx", "vy", "speed")


@dataclass(frozen=True)
class Sample:
    time: float          # seconds, on the simulation time grid
    trajectory_id: int   # one id per simulated insect
    x: float             # data space, [-1, 1]
    y: float             # data space, [-1, 1]
    vx: float
    vy: float
    speed: float         # used for trail coloring
