"""Configuration management for td.

The main entry points are:
- get_config(): Get the global configuration instance
- reset_config(): Clear the cached configuration
- load_config(): Load configuration from file
- save_config(): Save configuration to file
"""

from __future__ import annotations

from .io import load_config, save_config
from .models import (
    DEFAULT_HOME,
    DEFAULT_JSON_INDENT,
    DEFAULT_LIST_FILENAME,
    DEFAULT_LOG_LEVEL,
    Config,
)
from .parsers import (
    # Internal parser functions (exported for testing)
    _parse_json_indent,
    _parse_log_level,
    LOG_LEVELS,
    expand_path,
    get_config_path,
    get_default_home,
)
from .utils import (
    CONFIGURABLE_SETTINGS,
    get_config_value,
    list_config_settings,
    set_config_value,
)

# Singleton config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads config on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the cached configuration (useful for testing)."""
    global _config
    _config = None


__all__ = [
    "CONFIGURABLE_SETTINGS",
    "DEFAULT_HOME",
    "DEFAULT_JSON_INDENT",
    "DEFAULT_LIST_FILENAME",
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVELS",
    "Config",
    "_parse_json_indent",
    "_parse_log_level",
    "expand_path",
    "get_config",
    "get_config_path",
    "get_config_value",
    "get_default_home",
    "list_config_settings",
    "load_config",
    "reset_config",
    "save_config",
    "set_config_value",
]
