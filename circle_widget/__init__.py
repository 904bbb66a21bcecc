from .measure import MeasureMode, Constraint, Exact, AtMost, Unspecified, preferred_size, resolve, resolve_axis
from .render import QPainterSurface, render
from .style import CircleStyle, CircleConfig, config_from_attributes, load_circle_configs
from .centered_text_circle import CenteredTextCircle, constraint_for_axis

__all__ = [
    "MeasureMode", "Constraint", "Exact", "AtMost", "Unspecified",
    "preferred_size", "resolve", "resolve_axis",
    "QPainterSurface", "render",
    "CircleStyle", "CircleConfig", "config_from_attributes", "load_circle_configs",
    "CenteredTextCircle", "constraint_for_axis",
]
