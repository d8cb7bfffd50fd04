"""Layer data structure: one placed image on the canvas."""
from dataclasses import dataclass
from typing import Any

from models.transform import Vec2


@dataclass(eq=False)
class Layer:
    """One positioned, sized, depth-ordered image element.
    
    Position is the top-left corner in content space. Size is fixed at
    creation from the source image's pixel dimensions. The image reference is
    opaque to the engine (PIL image, QPixmap, file path...) and never mutated.
    
    Layers compare by identity: two layers with equal fields are still
    different layers.
    """
    id: int
    image_ref: Any
    x: float
    y: float
    width: float
    height: float
    z_index: int
    
    @property
    def right(self):
        return self.x + self.width
    
    @property
    def bottom(self):
        return self.y + self.height
    
    @property
    def position(self):
        return Vec2(self.x, self.y)
    
    def contains(self, point):
        """Check whether a content-space point falls inside this layer.
        
        Args:
            point: Vec2 in content space
        """
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom
