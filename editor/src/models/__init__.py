"""
Collage Canvas Editor - Data Models

This module contains the data model classes for the canvas.
This is the MODEL in MVC architecture.

Public API: Import LayerStore, Layer, Viewport and friends from models.
"""

from .transform import Vec2, ContentBounds
from .layer import Layer
from .viewport import Viewport
from .layer_store import LayerStore

__all__ = ['Vec2', 'ContentBounds', 'Layer', 'Viewport', 'LayerStore']
