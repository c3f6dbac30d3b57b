# dragcanvas/canvas.py
# -*- coding: utf-8 -*-

import logging

from PyQt5.QtCore import QPoint, QPointF, QRect, QSize, Qt
from PyQt5.QtGui import QColor, QPainter
from PyQt5.QtWidgets import QWidget

from .config import PAGE_BACKGROUND_COLOR
from .core import Scene

logger = logging.getLogger(__name__)


class CanvasWidget(QWidget):
    """Vue Qt : affiche la surface de la scène centrée dans le widget."""

    def __init__(self, settings=None, parent=None):
        super().__init__(parent)
        logger.debug("CanvasWidget initialized")
        # the widget itself is the viewport the surface is sized from
        self.scene = Scene(self, settings)
        self.setMouseTracking(True)
        self.setAttribute(Qt.WA_OpaquePaintEvent)
        self.setMinimumSize(200, 200)
        self._frame_connected = False

    def start(self):
        loop = self.scene.run_loop()
        if not self._frame_connected:
            loop.frameRendered.connect(self._on_frame)
            self._frame_connected = True
        return loop

    def stop(self):
        self.scene.stop_loop()

    def surface_offset(self) -> QPoint:
        """Top-left corner of the surface in widget coordinates."""
        side = self.scene.surface.side
        return QPoint((self.width() - side) // 2, (self.height() - side) // 2)

    def surface_rect(self) -> QRect:
        side = self.scene.surface.side
        return QRect(self.surface_offset(), QSize(side, side))

    def sync_surface_origin(self):
        self.scene.surface.origin = QPointF(self.mapToGlobal(self.surface_offset()))

    def _on_frame(self):
        self.sync_surface_origin()
        self.update()

    # -- Events ------------------------------------------------------
    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(PAGE_BACKGROUND_COLOR))
        image = self.scene.surface.image
        if not image.isNull():
            painter.drawImage(self.surface_offset(), image)
        painter.end()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        logger.debug(f"Viewport resized to {self.width()}x{self.height()}")

    def mousePressEvent(self, event):
        event.accept()
        # presses in the margin around the surface never reach the scene
        if not self.surface_rect().contains(event.pos()):
            logger.debug(f"Press outside surface at {event.pos().x()},{event.pos().y()}")
            return
        self.sync_surface_origin()
        shape = self.scene.handle_pointer_down(event)
        if shape is not None:
            self.setCursor(Qt.ClosedHandCursor)

    def mouseMoveEvent(self, event):
        self.scene.pointer.dispatch_move(event)

    def mouseReleaseEvent(self, event):
        self.scene.pointer.dispatch_release(event)
        self.unsetCursor()
