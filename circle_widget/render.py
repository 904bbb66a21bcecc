# circle_widget/render.py
"""
Drawing routine for the centered text circle.
render() only talks to a drawing surface with two primitives, fill_circle and
draw_centered_text. QPainterSurface provides them on top of a QPainter.
"""
from PyQt6.QtGui import QPainter, QColor, QFont, QFontMetricsF
from PyQt6.QtCore import Qt, QPointF


class QPainterSurface:
    """Drawing surface backed by an active QPainter."""

    def __init__(self, painter: QPainter, font: QFont = None):
        self._painter = painter
        self._font = QFont(font) if font is not None else QFont(painter.font())

    def fill_circle(self, cx, cy, radius, color: QColor):
        painter = self._painter
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawEllipse(QPointF(cx, cy), radius, radius)
        painter.restore()

    def draw_centered_text(self, text, x, y, font_size_px, color: QColor):
        """Draws text horizontally centered on x with its baseline on y."""
        painter = self._painter
        font = QFont(self._font)
        font.setPixelSize(max(1, round(font_size_px)))

        text_width = QFontMetricsF(font).horizontalAdvance(text)

        painter.save()
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setFont(font)
        painter.setPen(color)
        painter.drawText(QPointF(x - text_width / 2.0, y), text)
        painter.restore()


def render(surface, width: int, height: int, style, label):
    """Draws the filled circle, then the title on top of it."""
    # Halves truncate toward zero
    half_width = int(width / 2)
    half_height = int(height / 2)

    radius = half_height
    # Center uses the width on both axes
    surface.fill_circle(half_width, half_width, radius, style.fill_color)

    if label is not None:
        surface.draw_centered_text(label, half_width, half_height, style.text_size_px, style.text_color)
