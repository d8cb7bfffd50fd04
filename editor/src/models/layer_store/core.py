"""
Collage Canvas Editor - Layer Store

THE MODEL of the editor. Owns the ordered layer collection plus focus, drag
and keyboard-moving state.

This class handles:
- Layer creation (paste), position updates and deletion
- Focus / drag / keyboard-moving state
- Z-order operations (ZOrderMixin)
- Read-only queries and content bounds (LayerQueryMixin)

The store is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No I/O

One store is created per editing session and handed to every component that
needs it. Unknown layer ids are silently ignored by every operation: ids are
generated here, so a stale id only means a harmless race such as a drag
release arriving after a delete.

Usage:
    store = LayerStore()
    layer_id = store.add_layer(image, 640, 480)
    store.update_layer_position(layer_id, 10, -5)
    store.bring_to_front(layer_id)
    bounds = store.content_bounds
"""

import logging
from typing import Any, Dict, List, Optional

from models.layer import Layer
from .z_order_mixin import ZOrderMixin
from .query_mixin import LayerQueryMixin
from constants import DEFAULT_LAYER_X, DEFAULT_LAYER_Y, FIRST_LAYER_ID


class LayerStore(ZOrderMixin, LayerQueryMixin):
    """Layer collection with focus/drag state and mutation API
    
    Properties:
        layers: Tuple of layers in insertion order
        focused_layer_id: Focused layer id or None
        dragging_layer_id: Dragged layer id or None
        is_keyboard_moving: True while movement keys are held
    """
    
    def __init__(self):
        """Create an empty store"""
        self._logger = logging.getLogger('LayerStore')
        
        self._layers: List[Layer] = []
        self._by_id: Dict[int, Layer] = {}
        self._next_layer_id = FIRST_LAYER_ID
        
        self._focused_layer_id: Optional[int] = None
        self._dragging_layer_id: Optional[int] = None
        self._keyboard_moving = False
    
    # ========================================
    # State properties
    # ========================================
    
    @property
    def layers(self):
        """All layers in insertion order (read-only view)"""
        return tuple(self._layers)
    
    @property
    def focused_layer_id(self) -> Optional[int]:
        return self._focused_layer_id
    
    @property
    def dragging_layer_id(self) -> Optional[int]:
        return self._dragging_layer_id
    
    @property
    def is_keyboard_moving(self) -> bool:
        return self._keyboard_moving
    
    # ========================================
    # Layer CRUD
    # ========================================
    
    def add_layer(self, image_ref: Any, width: float, height: float,
                  x: float = DEFAULT_LAYER_X, y: float = DEFAULT_LAYER_Y) -> int:
        """Add a new layer above all existing layers and focus it
        
        Args:
            image_ref: Opaque image reference
            width: Intrinsic pixel width of the image
            height: Intrinsic pixel height of the image
            x: Top-left X in content space
            y: Top-left Y in content space
            
        Returns:
            Id of the new layer
        """
        layer = Layer(
            id=self._next_layer_id,
            image_ref=image_ref,
            x=x,
            y=y,
            width=width,
            height=height,
            z_index=self.max_z_index + 1,
        )
        self._next_layer_id += 1
        
        self._layers.append(layer)
        self._by_id[layer.id] = layer
        self._focused_layer_id = layer.id
        
        self._logger.debug(f"Added layer {layer.id} at ({x}, {y}) z={layer.z_index}")
        return layer.id
    
    def update_layer_position(self, layer_id: int, dx: float, dy: float):
        """Move a layer by a content-space delta
        
        Additive so repeated calls accumulate regardless of event frequency.
        """
        layer = self._by_id.get(layer_id)
        if layer is None:
            return
        layer.x += dx
        layer.y += dy
    
    def delete_layer(self, layer_id: int):
        """Remove a layer, clearing focus and drag state that pointed at it"""
        layer = self._by_id.pop(layer_id, None)
        if layer is None:
            return
        
        self._layers.remove(layer)
        if self._focused_layer_id == layer_id:
            self._focused_layer_id = None
        if self._dragging_layer_id == layer_id:
            self._dragging_layer_id = None
        
        self._logger.debug(f"Deleted layer {layer_id}")
    
    def clear(self):
        """Remove every layer and reset interaction state
        
        Ids keep counting up; they are never reused within a session.
        """
        self._layers.clear()
        self._by_id.clear()
        self._focused_layer_id = None
        self._dragging_layer_id = None
        self._keyboard_moving = False
        self._logger.debug("Cleared all layers")
    
    # ========================================
    # State setters
    # ========================================
    
    def set_focus(self, layer_id: Optional[int]):
        self._focused_layer_id = layer_id
    
    def set_dragging(self, layer_id: Optional[int]):
        """Set the dragged layer. Callers only drag the focused layer."""
        self._dragging_layer_id = layer_id
    
    def set_keyboard_moving(self, is_moving: bool):
        self._keyboard_moving = bool(is_moving)
