"""Drag context dataclass for pointer gestures.

One object per gesture instead of a handful of loose flags.
"""

from dataclasses import dataclass, field

from models.transform import Vec2


@dataclass
class DragContext:
	"""State of the pointer gesture in progress.
	
	operation is 'layer' for a press on a layer (click or drag candidate)
	or 'pan' for a middle-button viewport pan.
	"""
	operation: str
	press_pos: Vec2
	last_pos: Vec2
	layer_id: int = None
	dragging: bool = False  # Threshold crossed (layer) / always True for pan
	modifiers: frozenset = field(default_factory=frozenset)
	
	def distance_from_press(self, pos):
		"""Screen distance between pos and the press point"""
		return (pos - self.press_pos).length()
