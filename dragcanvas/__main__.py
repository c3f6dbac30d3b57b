# dragcanvas/__main__.py
import sys
import logging
from PyQt5.QtWidgets import QApplication
from dragcanvas.bug_report import install_excepthook
from dragcanvas.config import load_settings
from dragcanvas.logger import setup_logging
from dragcanvas.ui.main_window import MainWindow

logger = logging.getLogger("dragcanvas")


def build_demo_scene(scene):
    """Deux rectangles et un cercle, comme la démo d'origine."""
    scene.add_rectangle("red", (40, 40), (200, 200), "Red Rectangle")
    scene.add_rectangle("green", (200, 140), (400, 300), "Now I can set text!")
    scene.add_circle("blue", (100, 300), 80)
    return scene


def main():
    # Ensure uncaught exceptions are logged and reported
    install_excepthook()
    setup_logging()
    app = QApplication(sys.argv)
    win = MainWindow(load_settings())
    build_demo_scene(win.scene)
    logger.info(f"Scene ready with {len(win.scene.shapes)} shapes")
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
