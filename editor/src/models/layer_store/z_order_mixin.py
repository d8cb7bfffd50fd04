"""
Layer Store Z-Order Mixin

Applies the z-order plans computed by services/z_order.py to the store's
layers.

Methods:
    - bring_to_front
    - send_to_back
    - move_layer_up
    - move_layer_down

Each returns True if any z_index changed and False otherwise. Unknown ids are
no-ops.
"""

from services import z_order


class ZOrderMixin:
    """Mixin providing z-order operations for LayerStore
    
    This mixin assumes the parent class has:
        - self._layers: list of Layer
        - self._by_id: dict of id -> Layer
        - self._logger: logging.Logger instance
    """
    
    def bring_to_front(self, layer_id: int) -> bool:
        """Paint a layer above every other layer
        
        Always assigns max + 1, so calling it twice keeps the layer on top
        while its value keeps growing.
        """
        layer = self._by_id.get(layer_id)
        if layer is None:
            return False
        layer.z_index = z_order.front_value(l.z_index for l in self._layers)
        self._logger.debug(f"Layer {layer_id} to front (z={layer.z_index})")
        return True
    
    def send_to_back(self, layer_id: int) -> bool:
        """Paint a layer below every other layer (min - 1)"""
        layer = self._by_id.get(layer_id)
        if layer is None:
            return False
        layer.z_index = z_order.back_value(l.z_index for l in self._layers)
        self._logger.debug(f"Layer {layer_id} to back (z={layer.z_index})")
        return True
    
    def move_layer_up(self, layer_id: int) -> bool:
        """Swap a layer with the next distinct depth above it"""
        return self._apply_step(layer_id, z_order.UP)
    
    def move_layer_down(self, layer_id: int) -> bool:
        """Swap a layer with the next distinct depth below it"""
        return self._apply_step(layer_id, z_order.DOWN)
    
    def _apply_step(self, layer_id, direction):
        z_by_id = {layer.id: layer.z_index for layer in self._layers}
        changes = z_order.plan_step(z_by_id, layer_id, direction)
        if not changes:
            return False
        
        for changed_id, new_z in changes.items():
            self._by_id[changed_id].z_index = new_z
        
        self._logger.debug(f"Layer {layer_id} stepped {'up' if direction > 0 else 'down'}: {changes}")
        return True
