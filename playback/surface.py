"""
Offscreen raster surface used to compose playback frames.
"""
from PyQt5 import QtCore, QtGui


class RasterSurface:
    """
    Fixed-size drawable target backed by a QImage.

    Drawing calls are only valid inside a `with surface:` block, which holds
    the QPainter. `snapshot()` returns an independent copy that later drawing
    never touches.

    Example:
        surface = RasterSurface(600, 600)
        with surface:
            surface.clear()
            surface.fill_circle(300, 300, 5, QtGui.QColor("red"))
        frame = surface.snapshot()
    """

    def __init__(self, width: int, height: int, background: str = "#FFFFFF"):
        self.width = width
        self.height = height
        self.background = QtGui.QColor(background)
        self.image = QtGui.QImage(width, height, QtGui.QImage.Format_ARGB32_Premultiplied)
        self.image.fill(self.background)
        self.painter = None

    def __enter__(self):
        self.painter = QtGui.QPainter(self.image)
        self.painter.setRenderHint(QtGui.QPainter.Antialiasing)
        self.painter.setRenderHint(QtGui.QPainter.SmoothPixmapTransform)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.painter.end()
        self.painter = None
        return False

    def clear(self) -> None:
        self.painter.save()
        self.painter.setCompositionMode(QtGui.QPainter.CompositionMode_Source)
        self.painter.fillRect(0, 0, self.width, self.height, self.background)
        self.painter.restore()

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1) -> None:
        self.painter.setPen(QtGui.QPen(QtGui.QColor(color), width))
        self.painter.drawLine(QtCore.QPointF(x1, y1), QtCore.QPointF(x2, y2))

    def fill_circle(self, x: float, y: float, radius: float, color: QtGui.QColor) -> None:
        self.painter.setPen(QtCore.Qt.NoPen)
        self.painter.setBrush(color)
        self.painter.drawEllipse(QtCore.QPointF(x, y), radius, radius)

    def draw_rotated_sprite(self, x: float, y: float, angle_deg: float, size: float, sprite: QtGui.QImage) -> None:
        """Draw `sprite` scaled to size x size, centred on (x, y), rotated clockwise."""
        self.painter.save()
        self.painter.translate(x, y)
        self.painter.rotate(angle_deg)
        self.painter.drawImage(QtCore.QRectF(-size / 2, -size / 2, size, size), sprite)
        self.painter.restore()

    def draw_text(self, text: str, x: float, y: float, color: str = "#000000", pixel_size: int = 16) -> None:
        """Draw text with its baseline starting at (x, y)."""
        font = QtGui.QFont("Arial")
        font.setPixelSize(pixel_size)
        self.painter.setFont(font)
        self.painter.setPen(QtGui.QColor(color))
        self.painter.drawText(QtCore.QPointF(x, y), text)

    def snapshot(self) -> QtGui.QImage:
        return self.image.copy()
