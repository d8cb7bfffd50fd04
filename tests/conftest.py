"""
Shared fixtures for Collage Canvas Editor tests.

Provides fresh stores, viewports, controllers and small in-memory images.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture
def store():
    """Fresh empty layer store"""
    from models import LayerStore
    return LayerStore()


@pytest.fixture
def viewport():
    """Viewport at 100% with no pan"""
    from models import Viewport
    return Viewport()


@pytest.fixture
def config(tmp_path):
    """Default config exporting into a temp directory"""
    from services.config import EditorConfig
    return EditorConfig(export_dir=str(tmp_path))


@pytest.fixture
def controller(store, viewport, config):
    from actions.interaction_controller import InteractionController
    return InteractionController(store, viewport, config)


@pytest.fixture
def make_image():
    """Factory for solid-colour RGBA PIL images"""
    from PIL import Image

    def _make(width=10, height=10, color=(255, 0, 0, 255)):
        return Image.new('RGBA', (width, height), color)
    return _make


@pytest.fixture
def layers_with_z(store):
    """Factory: add one layer per z value and force its z_index

    Returns the new layer ids in order.
    """
    def _make(*z_values):
        ids = []
        for z in z_values:
            layer_id = store.add_layer(f"img{len(ids)}", 10, 10)
            store.get_layer(layer_id).z_index = z
            ids.append(layer_id)
        return ids
    return _make
