"""Transform data structures for coordinate and bounds representation."""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs.
    
    Used for any x/y pair across the two coordinate spaces:
    - Screen pixels (pointer and wheel positions, viewport offset)
    - Content space (layer positions, unscaled and unpanned)
    """
    x: float
    y: float
    
    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))
    
    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)
    
    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)
    
    def scaled(self, factor):
        """Return a copy multiplied by a scalar."""
        return Vec2(self.x * factor, self.y * factor)
    
    def length(self):
        return (self.x * self.x + self.y * self.y) ** 0.5


@dataclass(frozen=True)
class ContentBounds:
    """Axis-aligned box spanning all layers in content space.
    
    Derived on demand from the layer set; (0, 0, 0, 0) means no layers.
    """
    min_x: float = 0.0
    min_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    
    @property
    def max_x(self):
        return self.min_x + self.width
    
    @property
    def max_y(self):
        return self.min_y + self.height
    
    @property
    def is_empty(self):
        """True when the box has no area (nothing worth exporting)."""
        return self.width <= 0 or self.height <= 0
    
    def as_dict(self):
        return {
            'minX': self.min_x,
            'minY': self.min_y,
            'width': self.width,
            'height': self.height,
        }
