"""Export Service.

Frames the content bounding box, asks the rasterizer for a bitmap of it and
encodes the result to a lossy image file named
<app>-export-<unix-epoch-ms>.<ext> in the export directory.

This is the only fallible operation in the editor; every failure surfaces as
an ExportError subclass so callers can decide how to report it.
"""

import os
import time
import logging

from PIL import Image

from services.rasterizer import CaptureRegion
from constants import (
    APP_NAME, EXPORT_FORMAT, EXPORT_EXTENSION, EXPORT_QUALITY,
    EXPORT_BACKGROUND, FOCUS_INDICATOR, IDENTITY_TRANSFORM_OVERRIDE
)

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Base class for export failures"""


class ExportPreconditionError(ExportError):
    """Nothing to export (no layers or zero-area bounds)"""


class RasterizerUnavailableError(ExportError):
    """No rasterizer loaded, or it reports it is not ready"""


class RasterizerFailedError(ExportError):
    """The rasterizer or the encoder raised during capture"""


def build_export_filename(app_name=APP_NAME, extension=EXPORT_EXTENSION, timestamp_ms=None):
    """Build '<app>-export-<unix-epoch-ms>.<ext>'"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{app_name}-export-{timestamp_ms}.{extension}"


def exclude_focus_indicator(name):
    """Exclusion predicate that drops focus decoration from captures"""
    return name == FOCUS_INDICATOR


class ExportService:
    """Runs one export at a time.

    is_exporting is set while a capture is in flight and always cleared
    afterwards, whether the capture succeeded or not. A second export
    requested while one is running is refused.
    """

    def __init__(self, store, rasterizer=None, export_dir=None, app_name=APP_NAME,
                 image_format=EXPORT_FORMAT, extension=EXPORT_EXTENSION,
                 quality=EXPORT_QUALITY, clock=time.time):
        self.store = store
        self.rasterizer = rasterizer
        self.export_dir = export_dir or os.getcwd()
        self.app_name = app_name
        self.image_format = image_format
        self.extension = extension
        self.quality = quality
        self._clock = clock
        self.is_exporting = False

    @classmethod
    def from_config(cls, store, rasterizer, config):
        return cls(
            store, rasterizer,
            export_dir=config.export_dir,
            app_name=config.app_name,
            image_format=config.export_format,
            extension=config.export_extension,
            quality=config.export_quality,
        )

    def check_preconditions(self):
        """Validate that an export can run

        Returns:
            ContentBounds to capture

        Raises:
            ExportPreconditionError: No layers or zero-area bounds
            RasterizerUnavailableError: Rasterizer missing or not ready
        """
        if self.store.layer_count() == 0:
            raise ExportPreconditionError("There are no layers to export.")

        bounds = self.store.content_bounds
        if bounds.is_empty:
            raise ExportPreconditionError(
                f"Content has no area to export ({bounds.width} x {bounds.height})."
            )

        if self.rasterizer is None or not self.rasterizer.is_ready():
            raise RasterizerUnavailableError("The image renderer is not ready yet.")

        return bounds

    def export(self):
        """Capture the content bounds and write the encoded image

        Returns:
            Path of the written file, or None if an export is already running

        Raises:
            ExportError subclasses (see module docstring)
        """
        if self.is_exporting:
            logger.debug("Export already in progress, ignoring request")
            return None

        bounds = self.check_preconditions()
        region = CaptureRegion.from_bounds(bounds)
        filename = build_export_filename(self.app_name, self.extension, int(self._clock() * 1000))
        path = os.path.join(self.export_dir, filename)

        self.is_exporting = True
        try:
            image = self.rasterizer.capture(
                region,
                exclude=exclude_focus_indicator,
                style_overrides=dict(IDENTITY_TRANSFORM_OVERRIDE),
            )
            self._encode(image, path)
        except ExportError:
            raise
        except Exception as e:
            raise RasterizerFailedError(str(e)) from e
        finally:
            self.is_exporting = False

        logger.info(f"Exported {region.width}x{region.height} content to {path}")
        return path

    def _encode(self, image, path):
        if image.mode != 'RGB':
            # JPEG has no alpha; flatten onto a solid background
            rgba = image.convert('RGBA')
            flattened = Image.new('RGB', rgba.size, EXPORT_BACKGROUND)
            flattened.paste(rgba, mask=rgba.getchannel('A'))
            image = flattened
        os.makedirs(self.export_dir, exist_ok=True)
        image.save(path, self.image_format, quality=self.quality)
