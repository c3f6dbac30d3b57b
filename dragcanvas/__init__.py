"""Minimal drag-and-drop scene graph on a PyQt5 canvas."""

from .core import Scene
from .shapes import Circle, Rectangle, Shape
from .loop import FrameLoop
from .pointer import DragSession, PointerHub
from .surface import Surface

__version__ = "0.1.0"

__all__ = [
    "Scene",
    "Rectangle",
    "Circle",
    "Shape",
    "FrameLoop",
    "DragSession",
    "PointerHub",
    "Surface",
]
