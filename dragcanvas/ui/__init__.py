"""Expose the UI widgets for convenient imports."""

from .main_window import MainWindow

__all__ = [
    "MainWindow",
]
