# dragcanvas/config.py
"""
Constantes du canevas et lecture des préférences utilisateur (QSettings).
"""

from dataclasses import dataclass

from PyQt5.QtCore import QSettings

CANVAS_SCREEN_PROPORTION = 0.85
CANVAS_BACKGROUND_COLOR = "#1f1f1f"
PAGE_BACKGROUND_COLOR = "#3c3c3c"

TEXT_COLOR = "#FFFFFF"
TEXT_SIZE = 24
TEXT_FONT = "Arial"

CIRCLE_OUTLINE_COLOR = "black"
CIRCLE_OUTLINE_WIDTH = 5

# ~60 images/s
FRAME_INTERVAL_MS = 16


@dataclass
class CanvasSettings:
    background: str = CANVAS_BACKGROUND_COLOR
    proportion: float = CANVAS_SCREEN_PROPORTION
    frame_interval: int = FRAME_INTERVAL_MS
    text_font: str = TEXT_FONT
    text_size: int = TEXT_SIZE


def load_settings(settings: QSettings | None = None) -> CanvasSettings:
    """Read user overrides, falling back to the module defaults."""
    if settings is None:
        settings = QSettings("dragcanvas", "dragcanvas")
    return CanvasSettings(
        background=settings.value(
            "background", CANVAS_BACKGROUND_COLOR, type=str
        ),
        proportion=settings.value(
            "proportion", CANVAS_SCREEN_PROPORTION, type=float
        ),
        frame_interval=settings.value(
            "frame_interval", FRAME_INTERVAL_MS, type=int
        ),
        text_font=settings.value("text_font", TEXT_FONT, type=str),
        text_size=settings.value("text_size", TEXT_SIZE, type=int),
    )
