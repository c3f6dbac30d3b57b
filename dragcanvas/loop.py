# dragcanvas/loop.py

import logging

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from .config import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class FrameLoop(QObject):
    """Boucle d'animation coopérative qui se reprogramme à chaque image.

    The single-shot timer is re-armed only after ``scene.tick()`` returns,
    so an exception raised during a frame stops the loop.
    """

    frameRendered = pyqtSignal()

    def __init__(self, scene, interval: int = FRAME_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.scene = scene
        self.interval = interval
        self.frame_count = 0
        self._running = False
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    def start(self):
        if self._running:
            return
        self._running = True
        logger.info(f"Frame loop started ({self.interval} ms)")
        self._timer.start(0)

    def stop(self):
        if not self._running:
            return
        self._running = False
        self._timer.stop()
        logger.info(f"Frame loop stopped after {self.frame_count} frames")

    def is_running(self) -> bool:
        return self._running

    def _on_timeout(self):
        if not self._running:
            return
        try:
            self.scene.tick()
        except Exception:
            self._running = False
            self._timer.stop()
            logger.error(f"Frame loop halted at frame {self.frame_count}")
            raise
        self.frame_count += 1
        self.frameRendered.emit()
        if self._running:
            self._timer.start(self.interval)
