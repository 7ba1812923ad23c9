"""
Playback configuration.

Defaults match the values the trajectory exports were produced with; each
one can be overridden from the environment (or a .env file loaded by
main.py).
"""
import os
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass
class PlaybackConfig:
    fps: int = 50                       # ticks per second
    trail_length: int = 10              # trail points per insect
    trail_offset: int = 1               # first trail point, ticks before now
    max_speed_color: float = 1.5        # speed mapped to full red
    chunk_size: int = 10                # frames rendered between yields
    time_step: float = 0.02             # simulation time grid [s]
    distribution_window: float = 0.05   # density view sampling window [s]
    distribution_interval: float = 0.1  # density view refresh period [s]
    canvas_size: int = 600              # square surface, pixels
    sprite_path: Optional[str] = "images/mosquito.png"

    @property
    def frame_interval_ms(self) -> float:
        return 1000.0 / self.fps

    @classmethod
    def from_env(cls) -> "PlaybackConfig":
        """Build a config, letting TRAJ_* environment variables override defaults."""
        defaults = cls()
        return cls(
            fps=int(os.getenv("TRAJ_FPS", defaults.fps)),
            trail_length=int(os.getenv("TRAJ_TRAIL_LENGTH", defaults.trail_length)),
            trail_offset=int(os.getenv("TRAJ_TRAIL_OFFSET", defaults.trail_offset)),
            max_speed_color=float(os.getenv("TRAJ_MAX_SPEED", defaults.max_speed_color)),
            chunk_size=int(os.getenv("TRAJ_CHUNK_SIZE", defaults.chunk_size)),
            time_step=float(os.getenv("TRAJ_TIME_STEP", defaults.time_step)),
            distribution_window=float(os.getenv("TRAJ_DIST_WINDOW", defaults.distribution_window)),
            distribution_interval=float(os.getenv("TRAJ_DIST_INTERVAL", defaults.distribution_interval)),
            canvas_size=int(os.getenv("TRAJ_CANVAS_SIZE", defaults.canvas_size)),
            sprite_path=os.getenv("TRAJ_SPRITE_PATH", defaults.sprite_path) or None,
        )


@dataclass
class StreamConfig:
    stream_id: str
    title: str
    data_path: Path
    width: int = 600
    height: int = 600
    y_up: bool = True        # data y grows upwards, canvas y is flipped
    show_grid: bool = True

    @classmethod
    def from_path(cls, path, size: int = 600, y_up: bool = True, show_grid: bool = True) -> "StreamConfig":
        path = Path(path)
        return cls(
            stream_id=path.stem,
            title=path.stem.replace("_", " "),
            data_path=path,
            width=size,
            height=size,
            y_up=y_up,
            show_grid=show_grid,
        )

    @classmethod
    def from_paths(cls, paths, **kwargs) -> List["StreamConfig"]:
        """
        One config per data file, with unique ids.

        Files sharing a name (e.g. control/trajectories.csv and
        co2/trajectories.csv) are told apart by their parent directory in the
        title and by a numeric suffix in the id.
        """
        configs = [cls.from_path(p, **kwargs) for p in paths]
        stems = Counter(c.stream_id for c in configs)
        taken = set(stems)
        for cfg in configs:
            stem = cfg.stream_id
            if stems[stem] < 2:
                continue
            n = 1
            while f"{stem}-{n}" in taken:
                n += 1
            cfg.stream_id = f"{stem}-{n}"
            taken.add(cfg.stream_id)
            parent = cfg.data_path.parent.name
            if parent:
                cfg.title = f"{parent} / {cfg.title}"
        return configs
