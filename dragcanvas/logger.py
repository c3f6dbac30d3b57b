# dragcanvas/logger.py
"""Configuration des logs : console, fichier optionnel et relais Qt."""

import logging
from PyQt5.QtCore import QObject, pyqtSignal

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class LogEmitter(QObject):
    log_record = pyqtSignal(str)


log_emitter = LogEmitter()


class QtHandler(logging.Handler):
    """Re-emit formatted records through a ``LogEmitter`` signal."""

    def __init__(self, emitter=None, level=logging.INFO):
        super().__init__(level)
        self.emitter = emitter or log_emitter

    def emit(self, record):
        msg = self.format(record)
        self.emitter.log_record.emit(msg)


def setup_logging(level=logging.DEBUG, log_file=None, ui_level=logging.INFO):
    """Configure the ``dragcanvas`` logger once.

    Drag moves are logged at DEBUG for every pointer event, so the Qt relay
    defaults to INFO to keep the status bar readable.
    """
    logger = logging.getLogger("dragcanvas")
    if logger.handlers:
        return logger
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    qt_handler = QtHandler(level=ui_level)
    qt_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(qt_handler)
    return logger
