"""Typed input events delivered by the Input Source.

The interaction controller only ever sees these records, never toolkit event
objects. components/qt_events.py builds them from Qt events; tests build them
directly.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Optional


class PointerKind(Enum):
    PRESS = 'press'
    MOVE = 'move'
    RELEASE = 'release'


class PointerButton(Enum):
    NONE = 'none'  # Move events with no button change
    PRIMARY = 'primary'
    MIDDLE = 'middle'
    SECONDARY = 'secondary'


class KeyKind(Enum):
    DOWN = 'down'
    UP = 'up'


@dataclass(frozen=True)
class PasteImageEvent:
    """Image pasted from the clipboard.
    
    x/y are optional content-space coordinates for the top-left corner; when
    omitted the controller centres the image in the visible viewport.
    """
    image_ref: Any
    width: float
    height: float
    x: Optional[float] = None
    y: Optional[float] = None


@dataclass(frozen=True)
class PointerEvent:
    """Pointer press/move/release in screen coordinates.
    
    layer_id is the layer the rendering layer hit-tested under the pointer,
    or None when the pointer is over the canvas background.
    """
    kind: PointerKind
    x: float
    y: float
    button: PointerButton = PointerButton.NONE
    layer_id: Optional[int] = None
    modifiers: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class KeyEvent:
    """Key down/up with a key identifier ('w', 'ArrowUp', 'Delete'...)."""
    kind: KeyKind
    key: str
    modifiers: FrozenSet[str] = field(default_factory=frozenset)
    is_repeat: bool = False


@dataclass(frozen=True)
class WheelEvent:
    """Wheel step at a screen position. Positive delta zooms in."""
    delta: float
    x: float
    y: float
    modifiers: FrozenSet[str] = field(default_factory=frozenset)
