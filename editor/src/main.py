import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import (
    QMainWindow, QApplication, QToolBar, QAction, QStatusBar, QLabel
)
from PyQt5.QtGui import QKeySequence

# Model imports
from models import LayerStore, Viewport

# Component imports
from components.canvas_widget import CanvasWidget
from components.zoom_toolbar import ZoomToolbar

# Action imports
from actions.interaction_controller import InteractionController
from actions.export_actions import ExportActions

# Service imports
from services.config import load_config, default_config_path
from services.rasterizer import PillowRasterizer
from services.export_service import ExportService

# Utility imports
from utils.logger import set_main_window
from constants import APP_TITLE
from version import get_version


class EditorWindow(QMainWindow):
    """Main window: one canvas, one layer store, one export action"""

    def __init__(self, config):
        super().__init__()
        self.setWindowTitle(f"{APP_TITLE} {get_version()}")
        self.resize(1280, 720)
        self.config = config

        # One store and viewport per editing session, handed to every component
        self.store = LayerStore()
        self.viewport = Viewport(config.min_scale, config.max_scale, config.zoom_step)
        self.controller = InteractionController(self.store, self.viewport, config)

        self.rasterizer = PillowRasterizer(self.store, self.viewport)
        self.export_service = ExportService.from_config(self.store, self.rasterizer, config)

        self.canvas_widget = CanvasWidget(self.store, self.viewport, self.controller, self)
        self.setCentralWidget(self.canvas_widget)

        self.status_left = QLabel("Paste an image with Ctrl+V")
        status_bar = QStatusBar()
        status_bar.addWidget(self.status_left, 1)
        self.setStatusBar(status_bar)

        self.export_actions = ExportActions(self.export_service, on_status=self.status_left.setText)

        self._setup_toolbar()
        self.canvas_widget.status_message.connect(self.status_left.setText)
        self.canvas_widget.layers_changed.connect(self._update_status_bar)

        # Initialize global logger with main window reference
        set_main_window(self)
        self.canvas_widget.setFocus()

    def _setup_toolbar(self):
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        paste_action = QAction("Paste", self)
        paste_action.setShortcut(QKeySequence.Paste)
        paste_action.triggered.connect(self.canvas_widget.paste_from_clipboard)
        toolbar.addAction(paste_action)

        self.export_action = QAction("Export", self)
        self.export_action.setShortcut(QKeySequence("Ctrl+E"))
        self.export_action.triggered.connect(self.export_image)
        toolbar.addAction(self.export_action)

        toolbar.addSeparator()
        self.zoom_toolbar = ZoomToolbar()
        self.zoom_toolbar.zoom_in_requested.connect(self.canvas_widget.zoom_in)
        self.zoom_toolbar.zoom_out_requested.connect(self.canvas_widget.zoom_out)
        self.zoom_toolbar.reset_requested.connect(self.canvas_widget.zoom_reset)
        self.canvas_widget.zoom_changed.connect(self.zoom_toolbar.set_zoom_percent)
        toolbar.addWidget(self.zoom_toolbar)

    def export_image(self):
        """Export the composed canvas, disabling the action while it runs"""
        if not self.export_actions.can_export:
            return None
        self.export_action.setEnabled(False)
        try:
            return self.export_actions.export_image()
        finally:
            self.export_action.setEnabled(True)

    def _update_status_bar(self):
        count = self.store.layer_count()
        focused = self.store.focused_layer_id
        focus_text = f", layer {focused} selected" if focused is not None else ""
        self.status_left.setText(f"{count} layer{'s' if count != 1 else ''}{focus_text}")


def main():
    parser = argparse.ArgumentParser(description=f'{APP_TITLE}.')
    parser.add_argument(
        '-c', '--config',
        default=default_config_path(),
        help='Path to config JSON (default: ~/.collage_canvas/config.json).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args()

    config = load_config(args.config)

    # Configure logging
    level = logging.DEBUG if (args.verbose or config.verbose) else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication(sys.argv)
    window = EditorWindow(config)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
