"""Export action - runs the export service and reports the outcome to the user"""
import os
import logging

from services.export_service import (
	ExportPreconditionError, RasterizerUnavailableError, RasterizerFailedError
)
from utils.logger import report_warning, report_error

logger = logging.getLogger(__name__)

FAILURE_GUIDANCE = (
	"The canvas could not be captured. Use images pasted from the clipboard or "
	"image files that can be read locally, then try again."
)


class ExportActions:
	"""Handles the Export menu/button"""

	def __init__(self, export_service, on_status=None):
		"""Initialize with the session's export service

		Args:
			export_service: ExportService
			on_status: Optional callable(str) for status bar messages
		"""
		self.export_service = export_service
		self.on_status = on_status

	@property
	def can_export(self):
		"""False while an export is in flight (the action is disabled)"""
		return not self.export_service.is_exporting

	def export_image(self):
		"""Export the composed canvas

		Returns:
			Path of the written file, or None if nothing was written
		"""
		try:
			path = self.export_service.export()
		except ExportPreconditionError as e:
			report_warning("Nothing to Export", str(e))
			return None
		except RasterizerUnavailableError as e:
			report_error("Export Unavailable", str(e))
			return None
		except RasterizerFailedError as e:
			logger.exception("Rasterizer failed during export")
			report_error("Export Failed", f"{FAILURE_GUIDANCE}\n\nDetails: {e}")
			return None

		if path and self.on_status:
			self.on_status(f"Exported to {os.path.basename(path)}")
		return path
