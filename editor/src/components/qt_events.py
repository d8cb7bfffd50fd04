"""Qt -> typed input event conversion.

The interaction controller never sees Qt objects; these helpers translate
QMouseEvent / QKeyEvent / QWheelEvent into the records in models/events.py.
"""

from PyQt5.QtCore import Qt

from models.events import PointerEvent, PointerButton, KeyEvent, WheelEvent

_BUTTONS = {
	Qt.LeftButton: PointerButton.PRIMARY,
	Qt.MiddleButton: PointerButton.MIDDLE,
	Qt.RightButton: PointerButton.SECONDARY,
}

# Qt key codes -> key identifiers used by the controller
_NAMED_KEYS = {
	Qt.Key_Up: 'ArrowUp',
	Qt.Key_Down: 'ArrowDown',
	Qt.Key_Left: 'ArrowLeft',
	Qt.Key_Right: 'ArrowRight',
	Qt.Key_PageUp: 'PageUp',
	Qt.Key_PageDown: 'PageDown',
	Qt.Key_Delete: 'Delete',
	Qt.Key_Backspace: 'Backspace',
}


def modifiers_from_qt(qt_modifiers):
	"""Convert Qt.KeyboardModifiers to a frozenset of modifier names"""
	names = set()
	if qt_modifiers & Qt.ShiftModifier:
		names.add('shift')
	if qt_modifiers & Qt.AltModifier:
		names.add('alt')
	if qt_modifiers & Qt.ControlModifier:
		names.add('ctrl')
	if qt_modifiers & Qt.MetaModifier:
		names.add('meta')
	return frozenset(names)


def key_name(qt_key, text=''):
	"""Key identifier for a Qt key code ('ArrowUp', 'w', ...) or None"""
	if qt_key in _NAMED_KEYS:
		return _NAMED_KEYS[qt_key]
	if Qt.Key_A <= qt_key <= Qt.Key_Z:
		return chr(qt_key).lower()
	return text or None


def pointer_event_from_qt(kind, event, layer_id=None):
	"""Build a PointerEvent from a QMouseEvent

	Args:
		kind: PointerKind
		event: QMouseEvent
		layer_id: Layer hit-tested under the pointer, None for background
	"""
	button = _BUTTONS.get(event.button(), PointerButton.NONE)
	return PointerEvent(
		kind=kind,
		x=float(event.x()),
		y=float(event.y()),
		button=button,
		layer_id=layer_id,
		modifiers=modifiers_from_qt(event.modifiers()),
	)


def key_event_from_qt(kind, event):
	"""Build a KeyEvent from a QKeyEvent, or None for keys we don't name"""
	name = key_name(event.key(), event.text())
	if name is None:
		return None
	return KeyEvent(
		kind=kind,
		key=name,
		modifiers=modifiers_from_qt(event.modifiers()),
		is_repeat=event.isAutoRepeat(),
	)


def wheel_event_from_qt(event):
	"""Build a WheelEvent from a QWheelEvent (positive delta = away from user)"""
	pos = event.pos()
	return WheelEvent(
		delta=float(event.angleDelta().y()),
		x=float(pos.x()),
		y=float(pos.y()),
		modifiers=modifiers_from_qt(event.modifiers()),
	)
