# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QApplication, QSizePolicy
from PyQt5.QtCore import Qt, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor

import logging

from models.events import PointerKind, KeyKind, PasteImageEvent
from models.transform import Vec2
from components.qt_events import (
	pointer_event_from_qt, key_event_from_qt, wheel_event_from_qt
)
from utils.qt_image import qimage_to_pil, pil_to_qpixmap
from constants import FOCUS_INDICATOR_COLOR, FOCUS_INDICATOR_WIDTH

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = QColor(48, 48, 48)


class CanvasWidget(QWidget):
	"""Paints the layer store through the viewport and forwards input.

	Hit testing lives here (the rendering side knows what is under the
	pointer); everything else is the InteractionController's job.
	"""

	zoom_changed = pyqtSignal(int)  # Zoom percentage
	layers_changed = pyqtSignal()
	status_message = pyqtSignal(str)

	def __init__(self, store, viewport, controller, parent=None):
		super().__init__(parent)
		self.store = store
		self.viewport = viewport
		self.controller = controller
		self._pixmaps = {}  # layer id -> QPixmap
		self._pan_cursor = False

		self.setFocusPolicy(Qt.StrongFocus)
		self.setMouseTracking(True)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumSize(320, 240)

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.fillRect(self.rect(), BACKGROUND_COLOR)
		painter.setRenderHint(QPainter.SmoothPixmapTransform)

		painter.translate(self.viewport.offset.x, self.viewport.offset.y)
		painter.scale(self.viewport.scale, self.viewport.scale)

		for layer in self.store.layers_in_paint_order():
			target = QRectF(layer.x, layer.y, layer.width, layer.height)
			pixmap = self._pixmap_for(layer)
			painter.drawPixmap(target, pixmap, QRectF(pixmap.rect()))

		focused = self.store.focused_layer()
		if focused is not None:
			pen = QPen(QColor(*FOCUS_INDICATOR_COLOR))
			pen.setWidth(FOCUS_INDICATOR_WIDTH)
			pen.setCosmetic(True)  # Same thickness at every zoom
			painter.setPen(pen)
			painter.drawRect(QRectF(focused.x, focused.y, focused.width, focused.height))
		painter.end()

	def _pixmap_for(self, layer):
		pixmap = self._pixmaps.get(layer.id)
		if pixmap is None:
			pixmap = pil_to_qpixmap(layer.image_ref)
			self._pixmaps[layer.id] = pixmap
		return pixmap

	def _prune_pixmaps(self):
		for layer_id in list(self._pixmaps):
			if not self.store.has_layer(layer_id):
				del self._pixmaps[layer_id]

	def _after_change(self):
		self._prune_pixmaps()
		self.layers_changed.emit()
		self.update()

	# ========================================
	# Clipboard
	# ========================================

	def paste_from_clipboard(self):
		"""Add the clipboard image as a new layer in the middle of the view

		Returns:
			New layer id, or None if the clipboard holds no image
		"""
		qimage = QApplication.clipboard().image()
		if qimage.isNull():
			self.status_message.emit("Clipboard does not contain an image")
			return None

		image = qimage_to_pil(qimage)
		event = PasteImageEvent(image, image.width, image.height)
		layer_id = self.controller.handle_paste(event, viewport_size=(self.width(), self.height()))
		self._after_change()
		return layer_id

	# ========================================
	# Mouse Event Handlers
	# ========================================

	def _hit_test(self, event):
		content_pos = self.viewport.screen_to_content(Vec2(event.x(), event.y()))
		layer = self.store.layer_at(content_pos)
		return layer.id if layer is not None else None

	def mousePressEvent(self, event):
		self.setFocus()
		typed = pointer_event_from_qt(PointerKind.PRESS, event, self._hit_test(event))
		if self.controller.handle_pointer(typed):
			self._update_cursor()
			self.update()
			event.accept()
		else:
			super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		typed = pointer_event_from_qt(PointerKind.MOVE, event)
		if self.controller.handle_pointer(typed):
			self.update()
		self._update_cursor()

	def mouseReleaseEvent(self, event):
		typed = pointer_event_from_qt(PointerKind.RELEASE, event)
		if self.controller.handle_pointer(typed):
			self._update_cursor()
			self.update()
			event.accept()
		else:
			super().mouseReleaseEvent(event)

	def _update_cursor(self):
		ctx = self.controller.drag_context
		panning = ctx is not None and ctx.operation == 'pan'
		if panning == self._pan_cursor:
			return
		self._pan_cursor = panning
		self.setCursor(Qt.ClosedHandCursor if panning else Qt.ArrowCursor)

	def wheelEvent(self, event):
		if self.controller.handle_wheel(wheel_event_from_qt(event)):
			self.zoom_changed.emit(self.viewport.zoom_percent)
			self.update()
			event.accept()
		else:
			event.ignore()

	# ========================================
	# Keyboard Event Handlers
	# ========================================

	def keyPressEvent(self, event):
		# Ctrl+V for paste
		if event.key() == Qt.Key_V and event.modifiers() & Qt.ControlModifier:
			self.paste_from_clipboard()
			event.accept()
			return

		typed = key_event_from_qt(KeyKind.DOWN, event)
		if typed is not None and self.controller.handle_key(typed):
			self._after_change()
			event.accept()
		else:
			super().keyPressEvent(event)

	def keyReleaseEvent(self, event):
		# Auto-repeat sends release/press pairs while a key is held
		if event.isAutoRepeat():
			event.accept()
			return
		typed = key_event_from_qt(KeyKind.UP, event)
		if typed is not None and self.controller.handle_key(typed):
			event.accept()
		else:
			super().keyReleaseEvent(event)

	def focusOutEvent(self, event):
		self.controller.cancel_gesture()
		self._update_cursor()
		super().focusOutEvent(event)

	# ========================================
	# Zoom helpers (toolbar)
	# ========================================

	def _view_centre(self):
		return Vec2(self.width() / 2, self.height() / 2)

	def zoom_in(self):
		if self.viewport.zoom(self._view_centre(), 1):
			self.zoom_changed.emit(self.viewport.zoom_percent)
			self.update()

	def zoom_out(self):
		if self.viewport.zoom(self._view_centre(), -1):
			self.zoom_changed.emit(self.viewport.zoom_percent)
			self.update()

	def zoom_reset(self):
		self.viewport.reset()
		self.zoom_changed.emit(self.viewport.zoom_percent)
		self.update()
