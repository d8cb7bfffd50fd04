"""UI components for Collage Canvas Editor

Qt widgets that sit between the user and the interaction controller:
- canvas_widget: paints the layer store through the viewport, forwards input
- qt_events: Qt event -> typed input event conversion
- zoom_toolbar: zoom buttons and readout

Direct imports for convenience:
"""

from .canvas_widget import CanvasWidget
from .zoom_toolbar import ZoomToolbar

__all__ = [
    'CanvasWidget',
    'ZoomToolbar',
]
