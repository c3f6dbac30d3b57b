# dragcanvas/core.py

import logging

from PyQt5.QtCore import Qt

from .config import CanvasSettings
from .loop import FrameLoop
from .pointer import PointerHub
from .shapes import Circle, Rectangle
from .surface import Surface
from .utils import relative_position, surface_side

logger = logging.getLogger(__name__)


class Scene:
    """
    Logique du canevas :
    - conserve la liste des formes et la surface de rendu
    - exécute les fonctions de base puis dessine chaque image
    - distribue les clics aux formes, de la plus haute priorité à la plus basse
    """

    def __init__(self, viewport, settings: CanvasSettings | None = None):
        self.viewport = viewport
        self.settings = settings or CanvasSettings()
        self.base_functions: list = []
        self.shapes: list = []
        self.surface = Surface()
        self.pointer = PointerHub(self.surface)
        self.loop = None
        self.resize_surface()

    @property
    def background(self) -> str:
        return self.settings.background

    # -- Shapes ------------------------------------------------------
    def add_shape(self, shape):
        self.shapes.append(shape)
        shape.scene = self
        logger.debug(f"Added {shape.name} ({len(self.shapes)} shapes)")
        return shape

    def add_rectangle(self, color, location, dimensions, text: str = ""):
        rect = Rectangle(
            color,
            location,
            dimensions,
            text,
            font_family=self.settings.text_font,
            font_size=self.settings.text_size,
        )
        return self.add_shape(rect)

    def add_circle(self, color, location, radius):
        return self.add_shape(Circle(color, location, radius))

    def add_base_function(self, function):
        self.base_functions.append(function)

    def sort_shapes(self):
        self.shapes.sort(key=lambda shape: shape.get_priority())

    # -- Frame -------------------------------------------------------
    def resize_surface(self):
        side = surface_side(
            self.viewport.width(), self.viewport.height(), self.settings.proportion
        )
        self.surface.resize(side)

    def run_base_functions(self):
        for function in self.base_functions:
            function()

    def render(self):
        """Repaint the background and every shape, lowest priority first."""
        self.sort_shapes()
        self.surface.clear(self.background)
        if self.surface.side == 0:
            return
        painter = self.surface.painter()
        try:
            for shape in self.shapes:
                shape.render(painter)
        finally:
            painter.end()

    def tick(self):
        self.resize_surface()
        self.run_base_functions()
        self.render()

    def run_loop(self, interval: int | None = None) -> FrameLoop:
        """Start the frame loop; call ``stop()`` on the result to end it."""
        if self.loop is None:
            self.loop = FrameLoop(
                self, interval if interval is not None else self.settings.frame_interval
            )
        elif interval is not None:
            self.loop.interval = interval
        self.loop.start()
        return self.loop

    def stop_loop(self):
        if self.loop is not None:
            self.loop.stop()

    # -- Pointer -----------------------------------------------------
    def handle_pointer_down(self, event):
        if event.button() != Qt.LeftButton:
            logger.debug(f"Ignoring pointer down with button {event.button()}")
            return None
        self.sort_shapes()
        x, y = relative_position(event.screenPos(), self.surface.origin)
        logger.debug(f"Pointer down {event.button()} at {x:.1f},{y:.1f}")
        return self.delegate_press(x, y)

    def delegate_press(self, x: float, y: float):
        for shape in reversed(self.shapes):
            if shape.check_collision(x, y):
                shape.handle_press(x, y)
                return shape
        logger.debug("No shape under pointer")
        return None
