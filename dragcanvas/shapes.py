# dragcanvas/shapes.py

import logging
import time
from typing import Union

from PyQt5.QtCore import Qt, QPointF, QRectF, QSizeF
from PyQt5.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPen

from .config import (
    CIRCLE_OUTLINE_COLOR,
    CIRCLE_OUTLINE_WIDTH,
    TEXT_COLOR,
    TEXT_FONT,
    TEXT_SIZE,
)
from .pointer import DragSession
from .utils import color_to_hex

logger = logging.getLogger(__name__)


_last_priority = 0


def next_priority() -> int:
    """Return a monotonic timestamp, strictly greater than the previous one."""
    global _last_priority
    _last_priority = max(time.monotonic_ns(), _last_priority + 1)
    return _last_priority


class DraggableMixin:
    """Mixin ajoutant la priorité d'affichage et le glisser-déposer."""

    def __init__(self, color, location):
        self.color = color
        self.location = QPointF(*location)
        self.priority = next_priority()
        # non-owning, set by Scene.add_shape
        self.scene = None
        self._session = None

    @property
    def name(self) -> str:
        return f"{type(self).__name__}({color_to_hex(QColor(self.color))})"

    @property
    def is_dragging(self) -> bool:
        return self._session is not None and self._session.active

    def get_priority(self):
        return self.priority

    def handle_press(self, x: float, y: float):
        if self._session is not None:
            logger.debug(f"{self.name} pressed again while dragging")
            self.end_drag()
        self.priority = next_priority()
        offset = self.location - QPointF(x, y)
        self._session = DragSession(self, self.scene.pointer, offset)
        logger.debug(
            f"{self.name} drag started at {x:.1f},{y:.1f} "
            f"offset={offset.x():.1f},{offset.y():.1f}"
        )

    def end_drag(self):
        if self._session is None:
            return
        self._session.close()
        self._session = None

    def __repr__(self):
        return (
            f"<{self.name} at {self.location.x():.1f},{self.location.y():.1f} "
            f"priority={self.priority}>"
        )


class Rectangle(DraggableMixin):
    """Rectangle déplaçable avec un libellé centré optionnel."""

    def __init__(
        self,
        color,
        location,
        dimensions,
        text: str = "",
        font_family: str = TEXT_FONT,
        font_size: int = TEXT_SIZE,
    ):
        super().__init__(color, location)
        self.dimensions = QSizeF(*dimensions)
        self.text = text
        self.font = QFont(font_family)
        self.font.setPixelSize(font_size)

    def set_text(self, text: str):
        self.text = text

    def get_bounds(self):
        x_min, y_min = self.location.x(), self.location.y()
        x_max = x_min + self.dimensions.width()
        y_max = y_min + self.dimensions.height()
        return x_min, x_max, y_min, y_max

    def check_collision(self, x: float, y: float) -> bool:
        x_min, x_max, y_min, y_max = self.get_bounds()
        return x_min <= x <= x_max and y_min <= y <= y_max

    def render(self, painter):
        painter.fillRect(QRectF(self.location, self.dimensions), QColor(self.color))
        self.render_text(painter)

    def text_origin(self) -> QPointF:
        """Baseline origin that centres ``text`` inside the rectangle."""
        # measured on every call so the label stays centred if it changes
        text_width = QFontMetricsF(self.font).horizontalAdvance(self.text)
        x_min, x_max, y_min, y_max = self.get_bounds()
        text_x = x_min + (x_max - x_min) / 2 - text_width / 2
        text_y = y_min + (y_max - y_min) / 2 + self.font.pixelSize() / 3
        return QPointF(text_x, text_y)

    def render_text(self, painter):
        if not self.text:
            return
        painter.setFont(self.font)
        painter.setPen(QColor(TEXT_COLOR))
        painter.drawText(self.text_origin(), self.text)


class Circle(DraggableMixin):
    """Disque déplaçable ; ``location`` est le centre."""

    def __init__(self, color, location, radius: float):
        super().__init__(color, location)
        self.radius = radius

    def check_collision(self, x: float, y: float) -> bool:
        dx = x - self.location.x()
        dy = y - self.location.y()
        return dx ** 2 + dy ** 2 <= self.radius ** 2

    def render(self, painter):
        pen = QPen(QColor(CIRCLE_OUTLINE_COLOR))
        pen.setWidth(CIRCLE_OUTLINE_WIDTH)
        painter.setPen(pen)
        painter.setBrush(QBrush(QColor(self.color)))
        painter.drawEllipse(self.location, self.radius, self.radius)
        painter.setBrush(Qt.NoBrush)


Shape = Union[Rectangle, Circle]
