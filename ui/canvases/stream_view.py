"""
Widget that shows one stream's current playback frame.
"""
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from ui.styles import ACCENT_BLUE, BG_COLOR_LIGHT, BORDER_COLOR, TEXT_COLOR


class StreamView(QtWidgets.QWidget):
    """
    Paints the last frame handed to it, scaled to fit.

    While the stream is still precomputing a progress bar is painted over
    the (blank) frame instead.
    """

    def __init__(self, width: int, height: int, parent=None):
        super().__init__(parent)
        self.frame: Optional[QtGui.QImage] = None
        self.progress: Optional[int] = None
        self.setMinimumSize(width // 2, height // 2)
        self._size_hint = QtCore.QSize(width, height)

    def sizeHint(self):
        return self._size_hint

    def show_frame(self, frame: QtGui.QImage) -> None:
        self.frame = frame
        self.progress = None
        self.update()

    def show_progress(self, percent: int) -> None:
        if percent == self.progress:
            return
        self.progress = percent
        self.update()

    def paintEvent(self, event):
        p = QtGui.QPainter(self)
        p.fillRect(self.rect(), QtGui.QColor(BG_COLOR_LIGHT))

        if self.frame is not None:
            target = self._fit_rect(self.frame.size())
            p.setRenderHint(QtGui.QPainter.SmoothPixmapTransform)
            p.drawImage(target, self.frame)

        if self.progress is not None:
            self._paint_progress(p)
        p.end()

    def _fit_rect(self, size: QtCore.QSize) -> QtCore.QRectF:
        scaled = size.scaled(self.size(), QtCore.Qt.KeepAspectRatio)
        x = (self.width() - scaled.width()) / 2
        y = (self.height() - scaled.height()) / 2
        return QtCore.QRectF(x, y, scaled.width(), scaled.height())

    def _paint_progress(self, p: QtGui.QPainter) -> None:
        bar_w = self.width() * 0.6
        bar_h = 16
        x = (self.width() - bar_w) / 2
        y = self.height() / 2

        p.setPen(QtGui.QColor(TEXT_COLOR))
        p.drawText(QtCore.QRectF(x, y - 28, bar_w, 20), QtCore.Qt.AlignCenter,
                   f"Precomputing frames... {self.progress}%")

        p.setPen(QtGui.QPen(QtGui.QColor(BORDER_COLOR), 1))
        p.setBrush(QtCore.Qt.NoBrush)
        p.drawRect(QtCore.QRectF(x, y, bar_w, bar_h))
        p.setPen(QtCore.Qt.NoPen)
        p.setBrush(QtGui.QColor(ACCENT_BLUE))
        p.drawRect(QtCore.QRectF(x, y, bar_w * self.progress / 100.0, bar_h))
