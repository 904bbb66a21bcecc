# circle_widget/centered_text_circle.py
"""
Custom QWidget that draws a filled circle with its title centered inside.
The widget sizes itself from the title length and the title font size.
"""
from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtGui import QPainter
from PyQt6.QtCore import QSize

from .measure import Exact, AtMost, Unspecified, resolve
from .render import QPainterSurface, render
from .style import CircleConfig, CircleStyle

# Same value as Qt's QWIDGETSIZE_MAX
WIDGET_SIZE_MAX = (1 << 24) - 1


def constraint_for_axis(minimum: int, maximum: int):
    """Maps a widget's min/max size on one axis to a measurement constraint."""
    if minimum == maximum:
        return Exact(maximum)
    if maximum < WIDGET_SIZE_MAX:
        return AtMost(maximum)
    return Unspecified()


class CenteredTextCircle(QWidget):
    """
    A circle with a title drawn in its center.
    The measured size is recomputed on every layout pass (resizeEvent) and
    whenever the title or style changes. paintEvent draws using the last
    measured size.
    """
    def __init__(self, config: CircleConfig = None, parent=None):
        super().__init__(parent)
        config = config or CircleConfig()
        self._circle_style = config.style
        self._title = config.title

        self._measured_size = None
        self._geometry_stale = True

        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Preferred)

    # --- Title ---
    def title(self) -> Optional[str]:
        return self._title

    def setTitle(self, title: Optional[str]):
        if title == self._title:
            return
        self._title = title
        self._geometry_stale = True
        # Redraw with the new text, then recompute size and position
        self.update()
        self.updateGeometry()

    # --- Style ---
    def circleStyle(self) -> CircleStyle:
        return self._circle_style

    def setCircleStyle(self, style: CircleStyle):
        if style == self._circle_style:
            return
        self._circle_style = style
        self._geometry_stale = True
        self.update()
        self.updateGeometry()

    # --- Measurement ---
    def measure(self, width_constraint, height_constraint) -> QSize:
        """Runs one measurement pass and keeps the result for drawing."""
        width, height = resolve(width_constraint, height_constraint,
                                self._title, self._circle_style.text_size_px)
        self._measured_size = QSize(width, height)
        self._geometry_stale = False
        return QSize(self._measured_size)

    def measuredSize(self) -> Optional[QSize]:
        if self._measured_size is None:
            return None
        return QSize(self._measured_size)

    def isGeometryStale(self) -> bool:
        return self._geometry_stale

    def sizeHint(self):
        width_constraint = constraint_for_axis(self.minimumWidth(), self.maximumWidth())
        height_constraint = constraint_for_axis(self.minimumHeight(), self.maximumHeight())
        width, height = resolve(width_constraint, height_constraint,
                                self._title, self._circle_style.text_size_px)
        return QSize(width, height)

    def minimumSizeHint(self):
        return self.sizeHint()

    # --- Events ---
    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = event.size()
        self.measure(Exact(size.width()), Exact(size.height()))

    def paintEvent(self, event):
        if self._geometry_stale or self._measured_size is None:
            self.measure(Exact(self.width()), Exact(self.height()))

        painter = QPainter(self)
        try:
            surface = QPainterSurface(painter, self.font())
            render(surface, self._measured_size.width(), self._measured_size.height(),
                   self._circle_style, self._title)
        finally:
            painter.end()
