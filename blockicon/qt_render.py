"""
blockicon/qt_render.py
Qt backend for render_icon()

QImage painting works without a window, but creating a QPixmap from the
result needs a running QGuiApplication.
"""

from typing import Dict

from PyQt5.QtCore import QRect
from PyQt5.QtGui import QColor, QImage, QPainter

from .colors import to_rgb
from .models import Icon
from .render import render_icon


def to_qcolor(color: str) -> QColor:
    """Resolve a color string to an opaque QColor."""
    r, g, b = to_rgb(color)
    return QColor(r, g, b)


class QtSurface:
    """Surface backed by a QImage."""

    def __init__(self, width: int, height: int):
        self.image = QImage(width, height, QImage.Format_RGB32)
        self._colors: Dict[str, QColor] = {}

    def _qcolor(self, color: str) -> QColor:
        if color not in self._colors:
            self._colors[color] = to_qcolor(color)
        return self._colors[color]

    def fill_all(self, color: str) -> None:
        self.image.fill(self._qcolor(color))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: str) -> None:
        painter = QPainter(self.image)
        try:
            painter.fillRect(QRect(x, y, width, height), self._qcolor(color))
        finally:
            painter.end()


def render_qimage(icon: Icon) -> QImage:
    """Render icon to a new QImage."""
    surface = QtSurface(icon.pixel_size, icon.pixel_size)
    return render_icon(icon, surface).image
