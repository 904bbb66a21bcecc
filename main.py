import sys
import os

# --- PyQt6 Imports ---
from PyQt6.QtWidgets import QApplication, QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QLabel
from PyQt6.QtCore import Qt

# --- Project Imports ---
from circle_widget import CenteredTextCircle, config_from_attributes, load_circle_configs

# --- Constants ---
SAMPLE_CIRCLES = [
    {"backgroundColor": "#3c78d8", "titleSize": 20, "title": "Hi"},
    {"backgroundColor": "#e06666", "titleSize": 28, "title": "Hello"},
    {"backgroundColor": "#6aa84f", "titleSize": 16},
]


class DemoWindow(QWidget):
    """Shows a row of circles and a field that edits the first circle's title."""
    def __init__(self, configs, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Centered Text Circle")
        self.setStyleSheet("background-color: #353535; color: #dcdcdc;")

        layout = QVBoxLayout(self)

        circle_row = QHBoxLayout()
        circle_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.circles = []
        for config in configs:
            circle = CenteredTextCircle(config)
            circle_row.addWidget(circle)
            self.circles.append(circle)
        layout.addLayout(circle_row)

        if self.circles:
            first = self.circles[0]
            layout.addWidget(QLabel("Title of the first circle:"))
            self.title_edit = QLineEdit(first.title() or "")
            # An empty field clears the title
            self.title_edit.textChanged.connect(lambda text: first.setTitle(text or None))
            layout.addWidget(self.title_edit)

        self.setLayout(layout)


# --- Main Execution ---
if __name__ == "__main__":
    configs = []
    if len(sys.argv) > 1:
        config_path = os.path.abspath(sys.argv[1])
        print(f"Loading circles from: {config_path}")
        configs = load_circle_configs(config_path)

    if not configs:
        print("Using built-in sample circles.")
        configs = [config_from_attributes(attrs) for attrs in SAMPLE_CIRCLES]

    q_app = QApplication(sys.argv)

    window = DemoWindow(configs)
    window.show()

    exit_code = q_app.exec()
    print("\n--- Program End ---")
    sys.exit(exit_code)
