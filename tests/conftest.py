"""
Pytest configuration and fixtures for the dragcanvas test suite.

Qt runs on the offscreen platform so the suite works without a display.
Pointer input is simulated with hand-built QMouseEvent objects.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtCore import QEvent, QPointF, QSize, Qt
from PyQt5.QtGui import QMouseEvent
from PyQt5.QtWidgets import QApplication


def pytest_configure(config):
    """Register the markers used across the suite."""
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: multi-component workflows")
    config.addinivalue_line("markers", "importtest: module import checks")


@pytest.fixture(scope="session")
def qapp():
    """Provide a single QApplication for the whole session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def viewport():
    """A 1000x800 viewport, giving a 680 px square surface."""
    return QSize(1000, 800)


@pytest.fixture
def scene(qapp, viewport):
    from dragcanvas.core import Scene

    return Scene(viewport)


def mouse_event(kind, x, y, button=Qt.LeftButton):
    """Build a QMouseEvent whose screen position is (x, y)."""
    types = {
        "press": QEvent.MouseButtonPress,
        "move": QEvent.MouseMove,
        "release": QEvent.MouseButtonRelease,
    }
    pos = QPointF(x, y)
    if kind == "move":
        button = Qt.NoButton
    return QMouseEvent(types[kind], pos, pos, pos, button, button, Qt.NoModifier)


@pytest.fixture
def make_event():
    """Provide the ``mouse_event`` factory."""
    return mouse_event
