# circle_widget/style.py
"""
Style and configuration for CenteredTextCircle.
Attribute names follow the ones used in layout files: backgroundColor (or fillColor), titleSize, title.
"""
import json
from dataclasses import dataclass, field
from typing import List, Optional

from PyQt6.QtGui import QColor
from PyQt6.QtCore import Qt

# --- Defaults ---
DEFAULT_FILL_COLOR = QColor(Qt.GlobalColor.white)
DEFAULT_TEXT_COLOR = QColor(Qt.GlobalColor.white)
DEFAULT_TITLE_SIZE = 20.0


@dataclass(frozen=True)
class CircleStyle:
    """
    Paint settings for the circle and its title.
    Colors are copied on construction. Replace the whole style with
    CenteredTextCircle.setCircleStyle instead of mutating its colors in place.
    """
    fill_color: QColor = field(default_factory=lambda: QColor(DEFAULT_FILL_COLOR))
    text_color: QColor = field(default_factory=lambda: QColor(DEFAULT_TEXT_COLOR))
    text_size_px: float = DEFAULT_TITLE_SIZE

    def __post_init__(self):
        object.__setattr__(self, "fill_color", QColor(self.fill_color))
        object.__setattr__(self, "text_color", QColor(self.text_color))


@dataclass(frozen=True)
class CircleConfig:
    style: CircleStyle = field(default_factory=CircleStyle)
    title: Optional[str] = None


def _parse_color(value):
    if isinstance(value, QColor):
        return QColor(value) if value.isValid() else None
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            color = QColor(*[int(c) for c in value])
        except (TypeError, ValueError):
            return None
        return color if color.isValid() else None
    if isinstance(value, str):
        color = QColor(value)
        return color if color.isValid() else None
    return None


def config_from_attributes(attributes) -> CircleConfig:
    """Builds a CircleConfig from an attribute mapping, using defaults for anything missing or invalid."""
    attributes = attributes or {}

    fill_color = QColor(DEFAULT_FILL_COLOR)
    raw_color = attributes.get("backgroundColor", attributes.get("fillColor"))
    if raw_color is not None:
        parsed = _parse_color(raw_color)
        if parsed is None:
            print(f"Warning: Invalid circle color {raw_color!r}. Using default.")
        else:
            fill_color = parsed

    text_size = DEFAULT_TITLE_SIZE
    raw_size = attributes.get("titleSize")
    if raw_size is not None:
        try:
            text_size = float(raw_size)
            if not text_size > 0:
                raise ValueError("title size must be positive")
        except (TypeError, ValueError) as e:
            print(f"Warning: Invalid title size {raw_size!r} ({e}). Using default {DEFAULT_TITLE_SIZE}.")
            text_size = DEFAULT_TITLE_SIZE

    title = attributes.get("title")
    if title is not None:
        title = str(title)

    style = CircleStyle(fill_color=fill_color, text_size_px=text_size)
    return CircleConfig(style=style, title=title)


def load_circle_configs(filepath) -> List[CircleConfig]:
    """Loads a JSON list of circle attribute mappings."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Warning: Circle config file not found at '{filepath}'.")
        return []
    except (OSError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load circle config from '{filepath}': {e}")
        return []

    if not isinstance(data, list):
        print(f"Warning: Circle config in '{filepath}' must be a list of objects.")
        return []

    configs = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            print(f"Warning: Skipping circle config entry {index}: not an object.")
            continue
        configs.append(config_from_attributes(entry))
    return configs
