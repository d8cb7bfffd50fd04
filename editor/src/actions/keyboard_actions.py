"""Keyboard handling for the interaction controller"""
import logging

from models.events import KeyKind
from constants import (
	DELETE_KEYS, KEYBOARD_FAST_MODIFIER,
	KEY_LAYER_UP, KEY_LAYER_DOWN, KEY_FRONT_ALT, KEY_BACK_ALT,
	ZORDER_EXTREME_MODIFIER
)

logger = logging.getLogger(__name__)


class KeyboardActionsMixin:
	"""Delete, movement and z-order shortcuts for the focused layer.

	Movement is applied in content space and is never scaled by zoom. The
	keyboard-moving flag goes up with the first held movement key and comes
	down only when every tracked movement key has been released, so key
	auto-repeat and overlapping keys don't make it flicker.

	Requires the following from the parent class:
	- self.store (LayerStore)
	- self.config (EditorConfig)
	- self.held_movement_keys (set)
	- self.drag_context and self.end_layer_gesture() (PointerActionsMixin)
	"""

	def handle_key(self, event):
		"""Dispatch a KeyEvent. Returns True if the event was consumed."""
		if event.kind == KeyKind.UP:
			return self._handle_key_up(event)
		return self._handle_key_down(event)

	def _handle_key_down(self, event):
		layer_id = self.store.focused_layer_id
		if layer_id is None or not self.store.has_layer(layer_id):
			return False

		# Delete wins over everything else for this event
		if event.key in DELETE_KEYS:
			self.store.delete_layer(layer_id)
			if self.drag_context is not None and self.drag_context.layer_id == layer_id:
				self.end_layer_gesture()
			logger.debug(f"Deleted focused layer {layer_id} from keyboard")
			return True

		key = self._movement_key(event.key)
		if key is not None:
			self._move_focused(layer_id, key, event.modifiers)
			return True

		return self._handle_z_order_key(layer_id, event)

	def _handle_key_up(self, event):
		key = self._movement_key(event.key)
		if key is None or key not in self.held_movement_keys:
			return False
		self.held_movement_keys.discard(key)
		if not self.held_movement_keys:
			self.store.set_keyboard_moving(False)
		return True

	def _move_focused(self, layer_id, key, modifiers):
		if not self.held_movement_keys:
			self.store.set_keyboard_moving(True)
		self.held_movement_keys.add(key)

		dx, dy = self.config.movement_keys[key]
		step = self.config.keyboard_fast_step if KEYBOARD_FAST_MODIFIER in modifiers else self.config.keyboard_step
		self.store.update_layer_position(layer_id, dx * step, dy * step)

	def _handle_z_order_key(self, layer_id, event):
		extreme = ZORDER_EXTREME_MODIFIER in event.modifiers

		if event.key == KEY_LAYER_UP:
			if extreme:
				self.store.bring_to_front(layer_id)
			else:
				self.store.move_layer_up(layer_id)
			return True
		elif event.key == KEY_LAYER_DOWN:
			if extreme:
				self.store.send_to_back(layer_id)
			else:
				self.store.move_layer_down(layer_id)
			return True
		elif event.key == KEY_FRONT_ALT:
			self.store.bring_to_front(layer_id)
			return True
		elif event.key == KEY_BACK_ALT:
			self.store.send_to_back(layer_id)
			return True
		return False

	def _movement_key(self, key):
		"""Normalise a key identifier to a configured movement key, or None"""
		if key in self.config.movement_keys:
			return key
		lowered = key.lower()
		if lowered in self.config.movement_keys:
			return lowered
		return None
