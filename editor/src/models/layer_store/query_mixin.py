"""
Layer Store Query Mixin

Read-only access to the layer collection. Nothing here mutates state.

Methods:
    - get_layer
    - has_layer
    - layer_count
    - focused_layer
    - layers_in_paint_order
    - layer_at
    - max_z_index / min_z_index
    - content_bounds
"""

from typing import List, Optional

from models.layer import Layer
from models.transform import ContentBounds
from services.bounds import compute_bounds
from constants import EMPTY_STORE_Z_INDEX


class LayerQueryMixin:
    """Mixin providing query operations for LayerStore
    
    This mixin assumes the parent class has:
        - self._layers: list of Layer in insertion order
        - self._by_id: dict of id -> Layer
        - self._focused_layer_id
    """
    
    def get_layer(self, layer_id: int) -> Optional[Layer]:
        return self._by_id.get(layer_id)
    
    def has_layer(self, layer_id: int) -> bool:
        return layer_id in self._by_id
    
    def layer_count(self) -> int:
        return len(self._layers)
    
    def focused_layer(self) -> Optional[Layer]:
        if self._focused_layer_id is None:
            return None
        return self._by_id.get(self._focused_layer_id)
    
    def layers_in_paint_order(self) -> List[Layer]:
        """Layers sorted back to front
        
        Ties on z_index keep insertion order (sorted() is stable), which is
        also how the canvas resolves equal depths.
        """
        return sorted(self._layers, key=lambda layer: layer.z_index)
    
    def layer_at(self, content_point) -> Optional[Layer]:
        """Topmost layer containing a content-space point
        
        Args:
            content_point: Vec2 in content space
            
        Returns:
            Layer or None if the point is over empty canvas
        """
        for layer in reversed(self.layers_in_paint_order()):
            if layer.contains(content_point):
                return layer
        return None
    
    @property
    def max_z_index(self) -> int:
        """Highest z_index in use (0 when the store is empty)"""
        if not self._layers:
            return EMPTY_STORE_Z_INDEX
        return max(layer.z_index for layer in self._layers)
    
    @property
    def min_z_index(self) -> int:
        """Lowest z_index in use (0 when the store is empty)"""
        if not self._layers:
            return EMPTY_STORE_Z_INDEX
        return min(layer.z_index for layer in self._layers)
    
    @property
    def content_bounds(self) -> ContentBounds:
        """Bounding box of all layers, recomputed on every access"""
        return compute_bounds(self._layers)
