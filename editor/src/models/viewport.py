"""Viewport transform: pan offset and zoom scale.

Provides viewport navigation including:
- Focal-point-preserving zoom in fixed steps
- Pan by screen-space deltas
- Screen <-> content coordinate conversion

Coordinate spaces:
- Screen: widget pixels, as reported by pointer and wheel events
- Content: unscaled, unpanned space where layer positions are stored

screen = content * scale + offset
"""
import logging

from models.transform import Vec2
from constants import ZOOM_STEP, MIN_SCALE, MAX_SCALE, DEFAULT_SCALE, SCALE_PRECISION


class Viewport:
    """Affine view transform applied uniformly to all layers for display.
    
    Never touches stored layer coordinates.
    """
    
    def __init__(self, min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE,
                 zoom_step: float = ZOOM_STEP):
        if min_scale <= 0 or min_scale > max_scale:
            raise ValueError(f"Invalid scale range [{min_scale}, {max_scale}]")
        self._logger = logging.getLogger('Viewport')
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.zoom_step = zoom_step
        self.scale = DEFAULT_SCALE
        self.offset = Vec2(0.0, 0.0)
    
    # ========================================
    # Zoom
    # ========================================
    
    def zoom(self, focal_screen_point: Vec2, direction: float) -> bool:
        """Step the scale in or out, keeping the focal point fixed on screen.
        
        Args:
            focal_screen_point: Vec2 in screen pixels (usually the cursor)
            direction: > 0 zooms in, < 0 zooms out, 0 does nothing
            
        Returns:
            True if the scale changed, False if clamped at a limit
        """
        if direction == 0:
            return False
        step = self.zoom_step if direction > 0 else -self.zoom_step
        return self._apply_scale(self.scale + step, focal_screen_point)
    
    def zoom_in(self, focal_screen_point: Vec2 = None) -> bool:
        return self.zoom(focal_screen_point or Vec2(0.0, 0.0), 1)
    
    def zoom_out(self, focal_screen_point: Vec2 = None) -> bool:
        return self.zoom(focal_screen_point or Vec2(0.0, 0.0), -1)
    
    def set_zoom_percent(self, zoom_percent: float, focal_screen_point: Vec2 = None) -> bool:
        """Set zoom to a specific percentage (clamped)."""
        return self._apply_scale(zoom_percent / 100.0, focal_screen_point or Vec2(0.0, 0.0))
    
    @property
    def zoom_percent(self) -> int:
        """Current zoom as an integer percentage."""
        return int(round(self.scale * 100))
    
    def reset(self):
        """Reset to 100% with no pan."""
        self.scale = DEFAULT_SCALE
        self.offset = Vec2(0.0, 0.0)
    
    def _apply_scale(self, requested_scale, focal):
        new_scale = round(max(self.min_scale, min(self.max_scale, requested_scale)), SCALE_PRECISION)
        old_scale = self.scale
        if new_scale == old_scale:
            return False
        
        # offset' = (offset - focal) * (new/old) + focal
        ratio = new_scale / old_scale
        self.offset = (self.offset - focal).scaled(ratio) + focal
        self.scale = new_scale
        self._logger.debug(f"Zoom {old_scale} -> {new_scale} around ({focal.x}, {focal.y})")
        return True
    
    # ========================================
    # Pan
    # ========================================
    
    def pan(self, dx: float, dy: float):
        """Shift the view by a screen-space delta."""
        self.offset = Vec2(self.offset.x + dx, self.offset.y + dy)
    
    # ========================================
    # Conversions
    # ========================================
    
    def screen_to_content(self, screen_point: Vec2) -> Vec2:
        """Convert screen pixels to content space: (p - offset) / scale."""
        return (screen_point - self.offset).scaled(1.0 / self.scale)
    
    def content_to_screen(self, content_point: Vec2) -> Vec2:
        """Convert content space to screen pixels: p * scale + offset."""
        return content_point.scaled(self.scale) + self.offset
    
    def screen_delta_to_content(self, dx: float, dy: float) -> Vec2:
        """Convert a screen-space movement into content space (pan is irrelevant)."""
        return Vec2(dx / self.scale, dy / self.scale)
