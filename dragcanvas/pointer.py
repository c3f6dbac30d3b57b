# dragcanvas/pointer.py
"""
Abonnements souris « globaux » (déplacement / relâchement) pendant un
glisser-déposer.

Le ``PointerHub`` appartient à la scène : les formes ne s'abonnent jamais
directement aux événements de la fenêtre, elles ouvrent une ``DragSession``
qui se connecte au hub et se déconnecte elle-même au relâchement.
"""

import logging

from PyQt5.QtCore import QObject, QPointF, pyqtSignal

from .utils import relative_position

logger = logging.getLogger(__name__)


class PointerHub(QObject):
    """Re-emits pointer moves and releases in surface coordinates."""

    moved = pyqtSignal(float, float)
    released = pyqtSignal(float, float)

    def __init__(self, surface, parent=None):
        super().__init__(parent)
        self.surface = surface
        self._sessions = []

    def dispatch_move(self, event):
        x, y = relative_position(event.screenPos(), self.surface.origin)
        self.moved.emit(x, y)

    def dispatch_release(self, event):
        x, y = relative_position(event.screenPos(), self.surface.origin)
        logger.debug(f"Pointer release {event.button()} at {x:.1f},{y:.1f}")
        self.released.emit(x, y)

    def listener_count(self) -> int:
        return len(self._sessions)

    def _subscribe(self, session):
        self.moved.connect(session.on_move)
        self.released.connect(session.on_release)
        self._sessions.append(session)

    def _unsubscribe(self, session):
        self.moved.disconnect(session.on_move)
        self.released.disconnect(session.on_release)
        self._sessions.remove(session)


class DragSession:
    """Liaison temporaire entre une forme et les événements du hub."""

    def __init__(self, shape, hub: PointerHub, offset: QPointF):
        self.shape = shape
        self.hub = hub
        self.offset = QPointF(offset)
        self.active = True
        hub._subscribe(self)

    def on_move(self, x: float, y: float):
        self.shape.location = QPointF(x, y) + self.offset
        logger.debug(
            f"{self.shape.name} dragged to "
            f"{self.shape.location.x():.1f},{self.shape.location.y():.1f}"
        )

    def on_release(self, x: float, y: float):
        logger.debug(f"{self.shape.name} released at {x:.1f},{y:.1f}")
        self.shape.end_drag()

    def close(self):
        """Remove exactly the two listeners installed by this session."""
        if not self.active:
            return
        self.active = False
        self.hub._unsubscribe(self)
