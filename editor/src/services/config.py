"""Editor configuration: defaults from constants.py, overrides from a JSON file"""

import os
import json
import logging
from dataclasses import dataclass, field, fields, asdict
from typing import Dict, Tuple

from utils.logger import loggerRaise
from constants import (
    APP_NAME, CONFIG_DIR_NAME, CONFIG_FILE_NAME,
    ZOOM_STEP, MIN_SCALE, MAX_SCALE,
    DRAG_THRESHOLD_PX,
    KEYBOARD_MOVE_NORMAL, KEYBOARD_MOVE_FAST, DEFAULT_MOVEMENT_KEYS,
    EXPORT_FORMAT, EXPORT_EXTENSION, EXPORT_QUALITY,
)

logger = logging.getLogger(__name__)


def default_config_path():
    """~/.collage_canvas/config.json"""
    return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


@dataclass
class EditorConfig:
    """User-tunable settings. Every field has a default from constants.py."""
    app_name: str = APP_NAME
    zoom_step: float = ZOOM_STEP
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    drag_threshold: float = DRAG_THRESHOLD_PX
    keyboard_step: float = KEYBOARD_MOVE_NORMAL
    keyboard_fast_step: float = KEYBOARD_MOVE_FAST
    movement_keys: Dict[str, Tuple[int, int]] = field(default_factory=lambda: dict(DEFAULT_MOVEMENT_KEYS))
    export_format: str = EXPORT_FORMAT
    export_extension: str = EXPORT_EXTENSION
    export_quality: int = EXPORT_QUALITY
    export_dir: str = field(default_factory=os.getcwd)
    verbose: bool = False
    
    @classmethod
    def from_dict(cls, data):
        """Build a config from a dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        
        values = {k: v for k, v in data.items() if k in known}
        if 'movement_keys' in values:
            # JSON has no tuples
            values['movement_keys'] = {k: tuple(v) for k, v in values['movement_keys'].items()}
        return cls(**values)
    
    def to_dict(self):
        data = asdict(self)
        data['movement_keys'] = {k: list(v) for k, v in self.movement_keys.items()}
        return data


def load_config(path=None):
    """Load config from JSON, falling back to defaults if the file is missing
    
    Args:
        path: Config file path (default: ~/.collage_canvas/config.json)
        
    Returns:
        EditorConfig
    """
    path = path or default_config_path()
    if not os.path.exists(path):
        logger.debug(f"No config at {path}, using defaults")
        return EditorConfig()
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be an object, got {type(data).__name__}")
        return EditorConfig.from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        loggerRaise(e, f"Error loading config from {path}")


def save_config(config, path=None):
    """Write config as JSON, creating the config directory if needed"""
    path = path or default_config_path()
    try:
        os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
    except OSError as e:
        loggerRaise(e, f"Error saving config to {path}")
