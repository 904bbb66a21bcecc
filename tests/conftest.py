import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


class RecordingSurface:
    """Drawing surface that records every primitive call."""

    def __init__(self):
        self.calls = []

    def fill_circle(self, cx, cy, radius, color):
        self.calls.append(("circle", cx, cy, radius, color))

    def draw_centered_text(self, text, x, y, font_size_px, color):
        self.calls.append(("text", text, x, y, font_size_px, color))


@pytest.fixture
def surface():
    return RecordingSurface()
