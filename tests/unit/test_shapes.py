"""Unit tests for the Rectangle and Circle primitives."""

import pytest
from PyQt5.QtCore import QPointF
from PyQt5.QtGui import QColor, QFontMetricsF

from dragcanvas.shapes import Circle, Rectangle, next_priority


class TestCollision:
    """Point-in-shape tests."""

    @pytest.mark.unit
    @pytest.mark.parametrize("x, y, w, h", [(40, 40, 200, 200), (0, 0, 1, 1), (-30, 12.5, 7, 90)])
    def test_rectangle_bounds_are_inclusive(self, qapp, x, y, w, h):
        rect = Rectangle("red", (x, y), (w, h))
        assert rect.check_collision(x, y)
        assert not rect.check_collision(x - 1, y)
        assert rect.check_collision(x + w, y + h)
        assert not rect.check_collision(x + w + 1, y)
        assert not rect.check_collision(x, y + h + 1)

    @pytest.mark.unit
    def test_rectangle_get_bounds(self, qapp):
        rect = Rectangle("red", (40, 40), (200, 100))
        assert rect.get_bounds() == (40, 240, 40, 140)

    @pytest.mark.unit
    @pytest.mark.parametrize("cx, cy, r", [(100, 300, 80), (0, 0, 5), (12, -4, 1)])
    def test_circle_boundary_is_inclusive(self, qapp, cx, cy, r):
        circle = Circle("blue", (cx, cy), r)
        assert circle.check_collision(cx, cy)
        assert circle.check_collision(cx + r, cy)
        assert circle.check_collision(cx, cy - r)
        assert not circle.check_collision(cx + r + 1, cy)

    @pytest.mark.unit
    def test_circle_corner_of_bounding_box_misses(self, qapp):
        circle = Circle("blue", (100, 100), 50)
        assert not circle.check_collision(149, 149)


class TestPriority:
    """Priority ordering keys."""

    @pytest.mark.unit
    def test_next_priority_strictly_increases(self):
        values = [next_priority() for _ in range(1000)]
        assert values == sorted(set(values))

    @pytest.mark.unit
    def test_later_shape_has_higher_priority(self, qapp):
        first = Rectangle("red", (0, 0), (10, 10))
        second = Circle("blue", (0, 0), 10)
        assert second.get_priority() > first.get_priority()

    @pytest.mark.unit
    def test_press_brings_shape_to_front(self, scene):
        first = scene.add_rectangle("red", (0, 0), (10, 10))
        second = scene.add_rectangle("green", (0, 0), (10, 10))
        first.handle_press(5, 5)
        assert first.get_priority() > second.get_priority()


class TestDrag:
    """Drag session lifecycle driven through the scene's pointer hub."""

    @pytest.mark.unit
    def test_offset_is_preserved(self, scene):
        rect = scene.add_rectangle("red", (40, 40), (200, 200))
        rect.handle_press(100, 120)
        scene.pointer.moved.emit(100 + 33, 120 - 7)
        assert rect.location == QPointF(40 + 33, 40 - 7)
        scene.pointer.moved.emit(300, 300)
        assert rect.location == QPointF(240, 220)

    @pytest.mark.unit
    def test_circle_drag_keeps_offset_from_centre(self, scene):
        circle = scene.add_circle("blue", (100, 300), 80)
        circle.handle_press(120, 310)
        scene.pointer.moved.emit(220, 410)
        assert circle.location == QPointF(200, 400)

    @pytest.mark.unit
    def test_release_ends_drag_without_moving(self, scene):
        rect = scene.add_rectangle("red", (40, 40), (200, 200))
        rect.handle_press(100, 100)
        assert rect.is_dragging
        assert scene.pointer.listener_count() == 1
        scene.pointer.moved.emit(150, 150)
        scene.pointer.released.emit(400, 400)
        assert not rect.is_dragging
        assert scene.pointer.listener_count() == 0
        assert rect.location == QPointF(90, 90)
        scene.pointer.moved.emit(10, 10)
        assert rect.location == QPointF(90, 90)

    @pytest.mark.unit
    def test_second_release_is_harmless(self, scene):
        rect = scene.add_rectangle("red", (40, 40), (200, 200))
        rect.handle_press(100, 100)
        scene.pointer.released.emit(100, 100)
        scene.pointer.released.emit(100, 100)
        rect.end_drag()
        assert not rect.is_dragging
        assert scene.pointer.listener_count() == 0

    @pytest.mark.unit
    def test_repress_replaces_session(self, scene):
        rect = scene.add_rectangle("red", (40, 40), (200, 200))
        rect.handle_press(100, 100)
        rect.handle_press(50, 50)
        assert scene.pointer.listener_count() == 1
        scene.pointer.moved.emit(60, 60)
        assert rect.location == QPointF(50, 50)

    @pytest.mark.unit
    def test_concurrent_drags_are_independent(self, scene):
        rect = scene.add_rectangle("red", (0, 0), (10, 10))
        circle = scene.add_circle("blue", (100, 100), 10)
        rect.handle_press(5, 5)
        circle.handle_press(100, 100)
        assert scene.pointer.listener_count() == 2
        scene.pointer.moved.emit(50, 50)
        assert rect.location == QPointF(45, 45)
        assert circle.location == QPointF(50, 50)
        scene.pointer.released.emit(50, 50)
        assert scene.pointer.listener_count() == 0


class TestRender:
    """Rendering into the scene surface."""

    @pytest.mark.unit
    def test_rectangle_fills_its_bounds(self, scene):
        scene.add_rectangle("red", (40, 40), (200, 200))
        scene.render()
        assert scene.surface.pixel_color(41, 41) == QColor("red")
        assert scene.surface.pixel_color(239, 239) == QColor("red")
        assert scene.surface.pixel_color(30, 30) == QColor(scene.background)

    @pytest.mark.unit
    def test_circle_is_filled_and_outlined(self, scene):
        scene.add_circle("blue", (100, 300), 80)
        scene.render()
        assert scene.surface.pixel_color(100, 300) == QColor("blue")
        assert scene.surface.pixel_color(180, 300) == QColor("black")
        assert scene.surface.pixel_color(100, 390) == QColor(scene.background)

    @pytest.mark.unit
    def test_label_is_centred_on_measured_width(self, qapp):
        rect = Rectangle("red", (40, 40), (200, 200), "Red Rectangle")
        origin = rect.text_origin()
        width = QFontMetricsF(rect.font).horizontalAdvance("Red Rectangle")
        assert origin.x() + width / 2 == pytest.approx(140)
        assert origin.y() == pytest.approx(140 + 24 / 3)

    @pytest.mark.unit
    def test_label_recentres_when_text_changes(self, qapp):
        rect = Rectangle("red", (0, 0), (400, 100), "a")
        before = rect.text_origin()
        rect.set_text("a much longer label")
        after = rect.text_origin()
        width = QFontMetricsF(rect.font).horizontalAdvance("a much longer label")
        assert rect.text == "a much longer label"
        assert after.x() == pytest.approx(200 - width / 2)
        assert after.y() == before.y()
