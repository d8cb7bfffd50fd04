"""
Collage Canvas Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Default layer placement
- Zoom limits and step size
- Pointer and keyboard interaction settings
- Export format settings

Values here are defaults; services/config.py lets a user config file override
the ones that make sense to tune.
"""

# ======================================================================
# APPLICATION
# ======================================================================

APP_NAME = 'collage'
APP_TITLE = 'Collage Canvas Editor'

# Config file location (relative to the user's home directory)
CONFIG_DIR_NAME = '.collage_canvas'
CONFIG_FILE_NAME = 'config.json'

# ======================================================================
# LAYER PLACEMENT
# ======================================================================

# Position used when a layer is added without explicit coordinates
DEFAULT_LAYER_X = 50.0
DEFAULT_LAYER_Y = 50.0

# z_index reported for an empty store (first layer lands at 1)
EMPTY_STORE_Z_INDEX = 0

# First id handed out by a fresh store
FIRST_LAYER_ID = 1

# ======================================================================
# ZOOM / PAN
# ======================================================================

ZOOM_STEP = 0.1
MIN_SCALE = 0.1
MAX_SCALE = 5.0
DEFAULT_SCALE = 1.0

# Scale is rounded after each step so +step/-step round trips stay exact
SCALE_PRECISION = 4

# ======================================================================
# POINTER INTERACTION
# ======================================================================

# Screen pixels the pointer must travel before a press becomes a drag
DRAG_THRESHOLD_PX = 5.0

# Modifiers that belong to the platform (native zoom etc.); wheel is ignored
RESERVED_WHEEL_MODIFIERS = frozenset({'ctrl', 'meta'})

# ======================================================================
# KEYBOARD INTERACTION
# ======================================================================

# Content units per movement key press
KEYBOARD_MOVE_NORMAL = 1.0
KEYBOARD_MOVE_FAST = 10.0  # With Shift held
KEYBOARD_FAST_MODIFIER = 'shift'

# Movement key -> (dx, dy) direction
DEFAULT_MOVEMENT_KEYS = {
    'w': (0, -1),
    'a': (-1, 0),
    's': (0, 1),
    'd': (1, 0),
}

# Z-order keys
KEY_LAYER_UP = 'ArrowUp'
KEY_LAYER_DOWN = 'ArrowDown'
KEY_FRONT_ALT = 'PageUp'
KEY_BACK_ALT = 'PageDown'
ZORDER_EXTREME_MODIFIER = 'alt'

DELETE_KEYS = frozenset({'Delete', 'Backspace'})

# ======================================================================
# EXPORT
# ======================================================================

# Pillow format name, file extension and lossy quality (0-100)
EXPORT_FORMAT = 'JPEG'
EXPORT_EXTENSION = 'jpg'
EXPORT_QUALITY = 90

# Background used when flattening transparent layers into a lossy format
EXPORT_BACKGROUND = (255, 255, 255)

# Decoration name the export excludes from capture
FOCUS_INDICATOR = 'focus-indicator'
FOCUS_INDICATOR_COLOR = (64, 156, 255, 255)
FOCUS_INDICATOR_WIDTH = 2

# Style override that flattens the viewport transform before capture
IDENTITY_TRANSFORM_OVERRIDE = {'transform': 'identity'}
