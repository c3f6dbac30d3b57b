# dragcanvas/ui/main_window.py
import logging
from PyQt5.QtWidgets import QMainWindow

from ..canvas import CanvasWidget
from ..logger import log_emitter

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Fenêtre principale : le canevas au centre, les logs dans la barre d'état."""

    STATUS_TIMEOUT = 4000

    def __init__(self, settings=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("dragcanvas")
        self.resize(1024, 768)
        self.canvas = CanvasWidget(settings, self)
        self.setCentralWidget(self.canvas)
        log_emitter.log_record.connect(self._show_log)

    @property
    def scene(self):
        return self.canvas.scene

    def _show_log(self, message: str):
        self.statusBar().showMessage(message, self.STATUS_TIMEOUT)

    def showEvent(self, event):
        super().showEvent(event)
        self.canvas.start()

    def closeEvent(self, event):
        self.canvas.stop()
        logger.debug("Main window closed")
        super().closeEvent(event)
