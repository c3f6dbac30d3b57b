# dragcanvas/utils.py
"""
Petites fonctions de géométrie et conversion de couleurs.
"""

from PyQt5.QtCore import QPointF


def color_to_hex(qcolor):
    """Convertit un QColor en chaîne hex."""
    r = qcolor.red()
    g = qcolor.green()
    b = qcolor.blue()
    return f"#{r:02X}{g:02X}{b:02X}"


def surface_side(width: float, height: float, proportion: float) -> int:
    """Side of the square surface for a viewport of ``width`` x ``height``."""
    return int(proportion * min(width, height))


def relative_position(screen_pos: QPointF, origin: QPointF) -> tuple[float, float]:
    """Translate an absolute screen position into surface coordinates."""
    return screen_pos.x() - origin.x(), screen_pos.y() - origin.y()
