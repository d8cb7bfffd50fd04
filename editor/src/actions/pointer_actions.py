"""Pointer and wheel handling for the interaction controller"""
import logging

from models.events import PointerKind, PointerButton
from models.transform import Vec2
from actions.drag_context import DragContext
from constants import RESERVED_WHEEL_MODIFIERS

logger = logging.getLogger(__name__)


class PointerActionsMixin:
	"""Pointer gestures: click/drag layers, middle-button pan, wheel zoom.

	Drag start is threshold-gated: a press focuses the layer straight away,
	but the drag state and any position change wait until the pointer has
	moved more than drag_threshold screen pixels from the press point. A
	release before that is a plain click.

	Requires the following from the parent class:
	- self.store (LayerStore)
	- self.viewport (Viewport)
	- self.config (EditorConfig)
	- self.drag_context (DragContext or None)
	"""

	def handle_pointer(self, event):
		"""Dispatch a PointerEvent. Returns True if the event was consumed."""
		if event.kind == PointerKind.PRESS:
			return self._handle_press(event)
		elif event.kind == PointerKind.MOVE:
			return self._handle_move(event)
		elif event.kind == PointerKind.RELEASE:
			return self._handle_release(event)
		return False

	def handle_wheel(self, event):
		"""Zoom around the pointer. Ignored with platform-reserved modifiers held."""
		if event.modifiers & RESERVED_WHEEL_MODIFIERS:
			return False
		if event.delta == 0:
			return False
		direction = 1 if event.delta > 0 else -1
		return self.viewport.zoom(Vec2(event.x, event.y), direction)

	# ========================================
	# Press / move / release
	# ========================================

	def _handle_press(self, event):
		pos = Vec2(event.x, event.y)

		if event.button == PointerButton.MIDDLE:
			if self._layer_gesture_open():
				# One gesture at a time; the layer drag keeps the pointer
				return False
			self.drag_context = DragContext('pan', pos, pos, dragging=True, modifiers=event.modifiers)
			return True

		if event.button != PointerButton.PRIMARY:
			return False

		if event.layer_id is None or not self.store.has_layer(event.layer_id):
			# Background click: nothing above the canvas root took the event
			self.store.set_focus(None)
			self.drag_context = None
			return True

		self.store.set_focus(event.layer_id)
		self.drag_context = DragContext('layer', pos, pos, layer_id=event.layer_id, modifiers=event.modifiers)
		return True

	def _handle_move(self, event):
		ctx = self.drag_context
		if ctx is None:
			return False
		pos = Vec2(event.x, event.y)

		if ctx.operation == 'pan':
			delta = pos - ctx.last_pos
			self.viewport.pan(delta.x, delta.y)
			ctx.last_pos = pos
			return True

		if not self.store.has_layer(ctx.layer_id):
			# Layer deleted mid-gesture (e.g. from the keyboard)
			self.end_layer_gesture()
			return False

		if not ctx.dragging:
			if ctx.distance_from_press(pos) <= self.config.drag_threshold:
				return False
			# Threshold crossed: apply everything since the press in one go
			ctx.dragging = True
			self.store.set_dragging(ctx.layer_id)
			ctx.last_pos = ctx.press_pos
			logger.debug(f"Drag started on layer {ctx.layer_id}")

		delta = self.viewport.screen_delta_to_content(pos.x - ctx.last_pos.x, pos.y - ctx.last_pos.y)
		self.store.update_layer_position(ctx.layer_id, delta.x, delta.y)
		ctx.last_pos = pos
		return True

	def _handle_release(self, event):
		ctx = self.drag_context
		if ctx is None:
			return False

		if ctx.operation == 'pan':
			if event.button != PointerButton.MIDDLE:
				return False
		elif event.button != PointerButton.PRIMARY:
			return False

		if ctx.operation == 'layer':
			self.end_layer_gesture()
		else:
			self.drag_context = None
		return True

	def end_layer_gesture(self):
		"""Close a layer click/drag gesture and clear the store's drag state"""
		if self._layer_gesture_open():
			self.drag_context = None
			self.store.set_dragging(None)

	def _layer_gesture_open(self):
		return self.drag_context is not None and self.drag_context.operation == 'layer'

	@property
	def is_dragging(self):
		return self.drag_context is not None and self.drag_context.dragging
