# circle_widget/measure.py
"""
Size resolution for the centered text circle.
The preferred size is estimated from the title length instead of real glyph metrics.
"""
from dataclasses import dataclass
from enum import Enum

# Average glyph width relative to the font size.
# Preferred sizes use round(), so exact halves go to the even integer (10.5 -> 10).
GLYPH_WIDTH_FACTOR = 0.6


class MeasureMode(Enum):
    EXACTLY = "exactly"
    AT_MOST = "at_most"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class Constraint:
    """One axis of a measurement request."""
    mode: MeasureMode
    size: int = 0


def Exact(size):
    return Constraint(MeasureMode.EXACTLY, int(size))


def AtMost(size):
    return Constraint(MeasureMode.AT_MOST, int(size))


def Unspecified():
    return Constraint(MeasureMode.UNSPECIFIED)


def preferred_size(label, text_size_px: float) -> int:
    """Approximate width of the label in pixels, 0 when there is no label."""
    if not label:
        return 0
    return round(text_size_px * len(label) * GLYPH_WIDTH_FACTOR)


def resolve_axis(constraint: Constraint, preferred: int) -> int:
    """Resolves one axis. The result is never negative."""
    if constraint.mode is MeasureMode.EXACTLY:
        # The requested size is a lower bound, longer titles still get their room
        size = max(preferred, constraint.size)
    elif constraint.mode is MeasureMode.AT_MOST:
        size = min(preferred, constraint.size)
    else:
        size = preferred
    return max(0, size)


def resolve(width_constraint: Constraint, height_constraint: Constraint, label, text_size_px: float):
    """
    Resolves the widget size for one layout pass.
    Both axes use the same preferred size so the circle stays square when the
    host sends matching constraints. Returns (width, height).
    """
    preferred = preferred_size(label, text_size_px)
    return resolve_axis(width_constraint, preferred), resolve_axis(height_constraint, preferred)
