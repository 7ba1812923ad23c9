"""
Frame renderer: composes one playback frame for one stream and tick.
"""
import logging
import math
from typing import Optional, Tuple

from PyQt5 import QtCore, QtGui

from playback.config import PlaybackConfig
from playback.surface import RasterSurface
from trajectory.trail import resolve_trail
from ui.styles import (
    FRAME_AXIS_COLOR,
    FRAME_ERROR_COLOR,
    FRAME_GRID_COLOR,
    FRAME_TEXT_COLOR,
    SPRITE_BODY_COLOR,
    SPRITE_WING_COLOR,
)

logger = logging.getLogger(__name__)

GRID_SPACING = 50        # pixels
SPRITE_SIZE = 20         # pixels
TRAIL_BASE_RADIUS = 8.0
TRAIL_RADIUS_STEP = 0.7


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map value from [in_min, in_max] to [out_min, out_max]."""
    return (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min


def to_canvas(x: float, y: float, width: int, height: int, y_up: bool = True) -> Tuple[float, float]:
    """Map data space [-1, 1] x [-1, 1] onto a width x height canvas."""
    cx = map_range(x, -1, 1, 0, width)
    if y_up:
        cy = map_range(y, -1, 1, height, 0)
    else:
        cy = map_range(y, -1, 1, 0, height)
    return cx, cy


def speed_color(speed: float, max_speed: float = 1.5) -> QtGui.QColor:
    """Blue (slow) through green to red (fast); speeds above max_speed are red."""
    n = min(max(speed / max_speed, 0.0), 1.0)
    r = math.floor(n * 255)
    g = math.floor((1 - abs(2 * n - 1)) * 255)
    b = math.floor((1 - n) * 255)
    return QtGui.QColor(r, g, b)


def trail_radius(rank: int) -> float:
    """Marker radius of the rank-th trail point (0 = most recent)."""
    return TRAIL_BASE_RADIUS - rank * TRAIL_RADIUS_STEP


def heading_degrees(vx: float, vy: float) -> float:
    """Rotation that turns an upward-pointing sprite along (vx, vy)."""
    return math.degrees(math.atan2(vy, vx) + math.pi / 2)


def default_sprite(size: int = 64) -> QtGui.QImage:
    """A simple insect glyph pointing up, used when no sprite image is available."""
    image = QtGui.QImage(size, size, QtGui.QImage.Format_ARGB32_Premultiplied)
    image.fill(QtCore.Qt.transparent)
    p = QtGui.QPainter(image)
    p.setRenderHint(QtGui.QPainter.Antialiasing)
    s = size / 64.0

    # wings
    p.setPen(QtCore.Qt.NoPen)
    p.setBrush(QtGui.QColor(SPRITE_WING_COLOR))
    p.drawEllipse(QtCore.QPointF(20 * s, 30 * s), 12 * s, 6 * s)
    p.drawEllipse(QtCore.QPointF(44 * s, 30 * s), 12 * s, 6 * s)

    # body, head at the top
    p.setBrush(QtGui.QColor(SPRITE_BODY_COLOR))
    p.drawEllipse(QtCore.QPointF(32 * s, 36 * s), 5 * s, 18 * s)
    p.drawEllipse(QtCore.QPointF(32 * s, 14 * s), 5 * s, 5 * s)
    p.setPen(QtGui.QPen(QtGui.QColor(SPRITE_BODY_COLOR), 1.5 * s))
    p.drawLine(QtCore.QPointF(32 * s, 9 * s), QtCore.QPointF(32 * s, 1 * s))
    p.end()
    return image


def load_sprite(path: Optional[str]) -> QtGui.QImage:
    """Load the insect sprite image, falling back to the built-in glyph."""
    if path:
        image = QtGui.QImage(str(path))
        if not image.isNull():
            logger.info(f"Loaded sprite {path} ({image.width()}x{image.height()})")
            return image
        logger.warning(f"Sprite {path} could not be loaded, using built-in glyph")
    return default_sprite()


def _finite(*values) -> bool:
    return all(math.isfinite(v) for v in values)


class FrameRenderer:
    """
    Composes frames onto a per-stream RasterSurface.

    A frame contains: optional grid, each insect's speed-colored trail, the
    insect sprite rotated along its velocity, and the current time label.
    """

    def __init__(self, config: PlaybackConfig, sprite: Optional[QtGui.QImage] = None):
        self.config = config
        self.sprite = sprite if sprite is not None else default_sprite()
        self._surfaces = {}

    def surface_for(self, stream) -> RasterSurface:
        cfg = stream.config
        surface = self._surfaces.get(stream.stream_id)
        if surface is None or (surface.width, surface.height) != (cfg.width, cfg.height):
            surface = RasterSurface(cfg.width, cfg.height)
            self._surfaces[stream.stream_id] = surface
        return surface

    def render(self, stream, tick: int) -> QtGui.QImage:
        """Compose the frame for `tick` of `stream` and return an immutable copy."""
        surface = self.surface_for(stream)
        cfg = stream.config

        with surface:
            surface.clear()
            if cfg.show_grid:
                self.draw_grid(surface)

            for sample in stream.samples_at(tick):
                trail = resolve_trail(
                    sample, stream,
                    length=self.config.trail_length,
                    offset=self.config.trail_offset,
                )
                self.draw_trail(surface, trail, cfg.y_up)
                self.draw_insect(surface, sample, cfg.y_up)

            surface.draw_text(f"Time: {stream.time_at(tick):.2f}s", 10, 20, FRAME_TEXT_COLOR)

        return surface.snapshot()

    def render_error(self, stream, message: str) -> QtGui.QImage:
        """Frame shown instead of playback when a stream failed to load."""
        surface = self.surface_for(stream)
        with surface:
            surface.clear()
            surface.draw_text(f"Error: {message}", 20, 50, FRAME_ERROR_COLOR)
            surface.draw_text("Check the log output for details", 20, 80, FRAME_ERROR_COLOR)
            surface.draw_text(f"Make sure {stream.config.data_path} exists", 20, 110, FRAME_ERROR_COLOR)
        return surface.snapshot()

    @staticmethod
    def draw_grid(surface: RasterSurface) -> None:
        w, h = surface.width, surface.height
        for x in range(0, w + 1, GRID_SPACING):
            surface.draw_line(x, 0, x, h, FRAME_GRID_COLOR, 1)
        for y in range(0, h + 1, GRID_SPACING):
            surface.draw_line(0, y, w, y, FRAME_GRID_COLOR, 1)

        surface.draw_line(0, h / 2, w, h / 2, FRAME_AXIS_COLOR, 2)
        surface.draw_line(w / 2, 0, w / 2, h, FRAME_AXIS_COLOR, 2)

    def draw_trail(self, surface: RasterSurface, trail, y_up: bool) -> None:
        for rank, position in enumerate(trail):
            radius = trail_radius(rank)
            if radius <= 0:
                continue
            if not _finite(position.x, position.y, position.speed):
                continue
            cx, cy = to_canvas(position.x, position.y, surface.width, surface.height, y_up)
            surface.fill_circle(cx, cy, radius, speed_color(position.speed, self.config.max_speed_color))

    def draw_insect(self, surface: RasterSurface, sample, y_up: bool) -> None:
        if not _finite(sample.x, sample.y, sample.vx, sample.vy):
            return
        cx, cy = to_canvas(sample.x, sample.y, surface.width, surface.height, y_up)
        surface.draw_rotated_sprite(cx, cy, heading_degrees(sample.vx, sample.vy), SPRITE_SIZE, self.sprite)
