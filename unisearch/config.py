"""
Settings - Load Unisearch configuration from TOML.

Values in the settings file override the defaults below section by
section; missing keys keep their defaults.

Example settings.toml:
    [catalog]
    ranges = [[32, 2047], [8192, 11263]]

    [storage]
    db_path = "~/.local/share/unisearch/usage.db"
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "unisearch" / "settings.toml"

DEFAULTS: Dict[str, Any] = {
    "catalog": {
        "ranges": [[0x0020, 0x2FFFF]],
    },
    "storage": {
        "db_path": "~/.local/share/unisearch/usage.db",
    },
    "search": {
        "max_results": 100,
    },
    "lookup": {
        "base_url": "https://unicode-table.com/en/",
        "timeout": 1.0,
    },
}


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a TOML file.

    Args:
        settings_path: File to read; defaults to ~/.config/unisearch/settings.toml

    Returns:
        Dictionary containing settings with defaults applied
    """
    defaults = copy.deepcopy(DEFAULTS)
    settings_path = Path(settings_path or DEFAULT_SETTINGS_PATH).expanduser()

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}. Using defaults")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
