"""
CSV loader for simulated trajectory files.

One file per experimental condition, header row required:
    time,trajectory_id,x,y,vx,vy,speed

Numeric fields that fail to parse become NaN (no validation layer), rows
off the simulation time grid are dropped.
"""
import logging
from pathlib import Path
from typing import List, Union

import numpy as np
import pandas as pd

from .model import REQUIRED_COLUMNS, Sample

logger = logging.getLogger(__name__)

GRID_TOLERANCE = 1e-4


class LoadError(Exception):
    """Raised when a trajectory file cannot be read at all."""


def _read_csv(path: Path) -> pd.DataFrame:
    """Read the raw table, turning every way a file can be unreadable into LoadError."""
    try:
        df = pd.read_csv(path, encoding="utf-8-sig", float_precision="round_trip")
    except pd.errors.EmptyDataError as e:
        raise LoadError(f"Failed to load data: {path.name} is empty") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"Failed to load data: {path.name} is not UTF-8 text ({e.reason})") from e
    except pd.errors.ParserError as e:
        raise LoadError(f"Failed to load data: {path.name} is not valid CSV ({e})") from e
    except OSError as e:
        raise LoadError(f"Failed to load data: {path} ({e.strerror or e})") from e

    df.columns = [str(c).strip() for c in df.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise LoadError(
            f"Failed to load data: {path.name} is missing columns {', '.join(missing)}"
        )
    return df


def grid_mask(times: np.ndarray, step: float, tolerance: float = GRID_TOLERANCE) -> np.ndarray:
    """True where a time is a multiple of step; NaN is never on the grid."""
    ratio = times / step
    with np.errstate(invalid="ignore"):
        return np.abs(ratio - np.round(ratio)) < tolerance


def load_samples(path: Union[str, Path], time_step: float = 0.02) -> List[Sample]:
    """
    Read one trajectory file into a list of Samples.

    Args:
        path: CSV file path
        time_step: Simulation grid step; rows whose time is not a multiple
            of it are filtered out

    Raises:
        LoadError: file missing/unreadable/not UTF-8/not CSV, empty, or
            missing a required column
    """
    path = Path(path)
    df = _read_csv(path)

    values = {
        col: pd.to_numeric(df[col], errors="coerce").values.astype(np.float64)
        for col in REQUIRED_COLUMNS
    }

    ids = values["trajectory_id"]
    with np.errstate(invalid="ignore"):
        # non-integral ids would silently merge into another trajectory
        usable_id = np.isfinite(ids) & (ids == np.floor(ids))
    keep = usable_id & grid_mask(values["time"], time_step)

    samples = [
        Sample(
            time=float(t),
            trajectory_id=int(tid),
            x=float(x), y=float(y),
            vx=float(vx), vy=float(vy),
            speed=float(speed),
        )
        for t, tid, x, y, vx, vy, speed in zip(*(values[col][keep] for col in REQUIRED_COLUMNS))
    ]

    dropped = len(df) - len(samples)
    logger.info(f"Loaded {len(samples)} samples from {path.name} ({dropped} rows off-grid or unusable)")
    return samples
