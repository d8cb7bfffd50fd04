"""Content bounding box calculation used to frame exports."""

from models.transform import ContentBounds


def compute_bounds(layers):
    """Compute the minimal axis-aligned box enclosing all layers
    
    Single pass over the layers; recomputed on every call so it can never be
    stale.
    
    Args:
        layers: Iterable of Layer objects (anything with x, y, width, height)
        
    Returns:
        ContentBounds; (0, 0, 0, 0) when there are no layers
    """
    min_x = min_y = float('inf')
    max_x = max_y = float('-inf')
    seen = False
    
    for layer in layers:
        seen = True
        min_x = min(min_x, layer.x)
        min_y = min(min_y, layer.y)
        max_x = max(max_x, layer.x + layer.width)
        max_y = max(max_y, layer.y + layer.height)
    
    if not seen:
        return ContentBounds(0.0, 0.0, 0.0, 0.0)
    
    return ContentBounds(min_x, min_y, max_x - min_x, max_y - min_y)
