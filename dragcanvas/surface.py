# dragcanvas/surface.py

import logging

from PyQt5.QtCore import Qt, QPointF
from PyQt5.QtGui import QColor, QImage, QPainter

logger = logging.getLogger(__name__)


class Surface:
    """Surface de dessin carrée, redimensionnable, avec son origine à l'écran."""

    def __init__(self, side: int = 0):
        self.side = 0
        self.image = QImage()
        # top-left corner of the surface in screen coordinates
        self.origin = QPointF(0, 0)
        self.resize(side)

    def resize(self, side: int):
        side = max(int(side), 0)
        if side == self.side and not self.image.isNull():
            return
        self.side = side
        if side == 0:
            self.image = QImage()
            return
        self.image = QImage(side, side, QImage.Format_ARGB32_Premultiplied)
        self.image.fill(Qt.transparent)
        logger.debug(f"Surface resized to {side}x{side}")

    def width(self):
        return self.side

    def height(self):
        return self.side

    def clear(self, color):
        if self.image.isNull():
            return
        self.image.fill(Qt.transparent)
        painter = QPainter(self.image)
        painter.fillRect(0, 0, self.side, self.side, QColor(color))
        painter.end()

    def painter(self) -> QPainter:
        """Return an active QPainter on the backing image.

        The caller is responsible for calling ``end()``.
        """
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setRenderHint(QPainter.TextAntialiasing)
        return painter

    def pixel_color(self, x: int, y: int) -> QColor:
        return self.image.pixelColor(x, y)
