from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtCore import Qt

from circle_widget.render import QPainterSurface, render
from circle_widget.style import CircleStyle


def test_circle_center_reuses_width(surface):
    style = CircleStyle(fill_color=QColor("red"))
    render(surface, 100, 60, style, None)
    assert len(surface.calls) == 1
    kind, cx, cy, radius, color = surface.calls[0]
    assert kind == "circle"
    assert (cx, cy) == (50, 50)
    assert radius == 30
    assert color == QColor("red")


def test_no_label_draws_only_circle(surface):
    render(surface, 40, 40, CircleStyle(), None)
    assert [c[0] for c in surface.calls] == ["circle"]


def test_label_drawn_after_circle(surface):
    style = CircleStyle(text_size_px=18)
    render(surface, 100, 60, style, "Hi")
    assert [c[0] for c in surface.calls] == ["circle", "text"]
    _, text, x, y, size, color = surface.calls[1]
    assert (text, x, y, size) == ("Hi", 50, 30, 18)
    assert color == QColor(Qt.GlobalColor.white)


def test_empty_label_still_drawn(surface):
    render(surface, 24, 24, CircleStyle(), "")
    assert surface.calls[1][:2] == ("text", "")


def test_odd_sizes_truncate(surface):
    render(surface, 25, 25, CircleStyle(), "x")
    _, cx, cy, radius, _ = surface.calls[0]
    assert (cx, cy, radius) == (12, 12, 12)
    assert surface.calls[1][2:4] == (12, 12)


def test_zero_size_does_not_raise(surface):
    render(surface, 0, 0, CircleStyle(), "A")
    assert surface.calls[0][1:4] == (0, 0, 0)


def test_qpainter_surface_paints_image(qapp):
    image = QImage(80, 80, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.black)

    painter = QPainter(image)
    try:
        surface = QPainterSurface(painter)
        render(surface, 80, 80, CircleStyle(fill_color=QColor(0, 0, 255)), "Hi")
    finally:
        painter.end()

    assert image.pixelColor(40, 10) == QColor(0, 0, 255)
    assert image.pixelColor(1, 1) == QColor(Qt.GlobalColor.black)


def test_negative_sizes_truncate_toward_zero(surface):
    render(surface, -5, -5, CircleStyle(), "A")
    _, cx, cy, radius, _ = surface.calls[0]
    assert (cx, cy, radius) == (-2, -2, -2)
    assert surface.calls[1][2:4] == (-2, -2)
