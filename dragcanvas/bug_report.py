# dragcanvas/bug_report.py
import sys
import os
import logging
import traceback
from datetime import datetime
from PyQt5.QtWidgets import QApplication, QMessageBox

LOG_DIR = os.path.join(os.path.expanduser("~"), "dragcanvas_logs")
LOG_FILE = os.path.join(LOG_DIR, "dragcanvas.log")

logger = logging.getLogger(__name__)


def write_report(exc_type, exc_value, exc_tb, path=LOG_FILE):
    """Append a timestamped traceback to ``path`` and return the path."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"\n=== {datetime.now().isoformat()} ===\n")
        traceback.print_exception(exc_type, exc_value, exc_tb, file=f)
    return path


def _excepthook(exc_type, exc_value, exc_tb):
    """Write the traceback to a log file and show a user-friendly dialog."""
    path = write_report(exc_type, exc_value, exc_tb)
    logger.critical(f"Uncaught {exc_type.__name__}: {exc_value} (report: {path})")

    # The frame loop is no longer re-armed at this point; tell the user why.
    app = QApplication.instance()
    if app is not None:
        try:
            msg = QMessageBox()
            msg.setIcon(QMessageBox.Critical)
            msg.setWindowTitle("dragcanvas - Erreur")
            msg.setText(
                "Une erreur inattendue a interrompu l'animation. "
                f"Un rapport a été enregistré dans:\n{path}"
            )
            details = "".join(
                traceback.format_exception(exc_type, exc_value, exc_tb)
            )
            msg.setDetailedText(details)
            msg.exec_()
        except Exception:
            # Ignore any error while displaying the dialog
            pass

    # Call the default hook to allow default handling (prints to stderr)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def install_excepthook():
    """Install global exception handler that logs uncaught exceptions."""
    sys.excepthook = _excepthook
