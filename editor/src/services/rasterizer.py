"""Rasterizer Service.

Turns a rectangular region of the composed canvas into a bitmap. The export
path only depends on the Rasterizer interface; PillowRasterizer is the
implementation the editor ships with.

Output is a PIL image covering the requested region at 1:1 content scale
once the viewport transform has been flattened.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, UnidentifiedImageError

from constants import FOCUS_INDICATOR, FOCUS_INDICATOR_COLOR, FOCUS_INDICATOR_WIDTH

logger = logging.getLogger(__name__)


class RasterizerError(Exception):
    """Capture failed (unreadable or untrusted image source, encoder error...)"""


@dataclass(frozen=True)
class CaptureRegion:
    """Region to capture, in content coordinates."""
    x: float
    y: float
    width: float
    height: float
    
    @classmethod
    def from_bounds(cls, bounds):
        return cls(bounds.min_x, bounds.min_y, bounds.width, bounds.height)


class Rasterizer(ABC):
    """Capture contract used by the export path."""
    
    def is_ready(self):
        """Whether the rasterizer can capture right now"""
        return True
    
    @abstractmethod
    def capture(self, region, exclude=None, style_overrides=None):
        """Render a region of the canvas
        
        Args:
            region: CaptureRegion in content coordinates
            exclude: Predicate over decoration names; True drops the decoration
            style_overrides: Style tweaks applied for the capture only, e.g.
                {'transform': 'identity'} to flatten the viewport
                
        Returns:
            PIL.Image.Image of the region
        """


def load_image(image_ref):
    """Resolve an opaque image reference into a PIL image
    
    Accepts PIL images as-is and opens file paths. Anything else is rejected.
    """
    if isinstance(image_ref, Image.Image):
        return image_ref
    if isinstance(image_ref, (str, Path)):
        try:
            with Image.open(image_ref) as img:
                img.load()
                return img.copy()
        except (OSError, UnidentifiedImageError) as e:
            raise RasterizerError(f"Cannot read image source {image_ref}: {e}") from e
    raise RasterizerError(f"Unsupported image source: {type(image_ref).__name__}")


class PillowRasterizer(Rasterizer):
    """Composes the store's layers with Pillow.
    
    Layers paint back to front. The focused layer gets an outline decoration
    named FOCUS_INDICATOR unless the exclude predicate drops it. Without an
    identity transform override, the region is rendered at the viewport's
    current scale, like an on-screen grab.
    """
    
    def __init__(self, store, viewport=None, image_loader=load_image):
        self.store = store
        self.viewport = viewport
        self.image_loader = image_loader
    
    def capture(self, region, exclude=None, style_overrides=None):
        exclude = exclude or (lambda name: False)
        style_overrides = style_overrides or {}
        
        scale = 1.0
        if self.viewport is not None and style_overrides.get('transform') != 'identity':
            scale = self.viewport.scale
        
        size = (max(1, round(region.width * scale)), max(1, round(region.height * scale)))
        canvas = Image.new('RGBA', size, (0, 0, 0, 0))
        
        for layer in self.store.layers_in_paint_order():
            source = self.image_loader(layer.image_ref).convert('RGBA')
            target_size = (max(1, round(layer.width * scale)), max(1, round(layer.height * scale)))
            if source.size != target_size:
                source = source.resize(target_size)
            dest = (round((layer.x - region.x) * scale), round((layer.y - region.y) * scale))
            # Paste onto a transparent sheet first so partially visible layers clip cleanly
            sheet = Image.new('RGBA', size, (0, 0, 0, 0))
            sheet.paste(source, dest)
            canvas = Image.alpha_composite(canvas, sheet)

        focused = self.store.focused_layer()
        if focused is not None and not exclude(FOCUS_INDICATOR):
            self._draw_focus_indicator(canvas, focused, region, scale)

        logger.debug(f"Captured region {region} at scale {scale} -> {size}")
        return canvas

    @staticmethod
    def _draw_focus_indicator(canvas, layer, region, scale):
        draw = ImageDraw.Draw(canvas)
        left = (layer.x - region.x) * scale
        top = (layer.y - region.y) * scale
        right = left + layer.width * scale - 1
        bottom = top + layer.height * scale - 1
        draw.rectangle([left, top, right, bottom], outline=FOCUS_INDICATOR_COLOR, width=FOCUS_INDICATOR_WIDTH)
