"""Interaction controller - turns input events into store/viewport mutations"""
import logging

from models.events import PasteImageEvent, PointerEvent, KeyEvent, WheelEvent
from models.transform import Vec2
from actions.pointer_actions import PointerActionsMixin
from actions.keyboard_actions import KeyboardActionsMixin
from services.config import EditorConfig

logger = logging.getLogger(__name__)


class InteractionController(PointerActionsMixin, KeyboardActionsMixin):
	"""Single entry point for the Input Source.

	Holds no layer data of its own: everything goes through the LayerStore and
	Viewport it was given. Only gesture bookkeeping (the current DragContext
	and the set of held movement keys) lives here.
	"""

	def __init__(self, store, viewport, config=None):
		"""Initialize with the session's store and viewport

		Args:
			store: LayerStore for this editing session
			viewport: Viewport shared with the canvas
			config: EditorConfig (defaults if None)
		"""
		self.store = store
		self.viewport = viewport
		self.config = config or EditorConfig()
		self.drag_context = None
		self.held_movement_keys = set()

	def handle_event(self, event):
		"""Route any typed input event. Returns True if consumed."""
		if isinstance(event, PointerEvent):
			return self.handle_pointer(event)
		elif isinstance(event, KeyEvent):
			return self.handle_key(event)
		elif isinstance(event, WheelEvent):
			return self.handle_wheel(event)
		elif isinstance(event, PasteImageEvent):
			return self.handle_paste(event) is not None
		raise TypeError(f"Unsupported input event: {type(event).__name__}")

	def handle_paste(self, event, viewport_size=None):
		"""Add a pasted image as a new, focused top layer

		Without explicit coordinates the image is centred on the middle of the
		visible area, whatever the current pan/zoom.

		Args:
			event: PasteImageEvent
			viewport_size: (width, height) of the visible canvas in screen pixels

		Returns:
			Id of the new layer
		"""
		if event.x is not None and event.y is not None:
			x, y = event.x, event.y
		elif viewport_size is not None:
			centre = self.viewport.screen_to_content(Vec2(viewport_size[0] / 2, viewport_size[1] / 2))
			x = centre.x - event.width / 2
			y = centre.y - event.height / 2
		else:
			layer_id = self.store.add_layer(event.image_ref, event.width, event.height)
			logger.debug(f"Pasted layer {layer_id} at default position")
			return layer_id

		layer_id = self.store.add_layer(event.image_ref, event.width, event.height, x, y)
		logger.debug(f"Pasted layer {layer_id} at ({x}, {y})")
		return layer_id

	def cancel_gesture(self):
		"""Drop any gesture in progress (e.g. the widget lost focus)"""
		self.end_layer_gesture()
		self.drag_context = None
		if self.held_movement_keys:
			self.held_movement_keys.clear()
			self.store.set_keyboard_moving(False)
