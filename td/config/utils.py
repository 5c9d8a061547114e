"""Configuration utility functions for td."""

from __future__ import annotations

from typing import Any

from .parsers import _parse_json_indent, _parse_log_level, expand_path

# Configurable settings with descriptions
CONFIGURABLE_SETTINGS = {
    "list_file": "Todo list file (default: <home>/todo-list.json, TD_LIST_FILE overrides)",
    "env_file": "Custom .env file path (default: <home>/.env)",
    "json_indent": "Indentation of the saved list file (default 2)",
    "log_level": "Diagnostics level on stderr (DEBUG, INFO, WARNING, ERROR)",
}


def get_config_value(key: str) -> Any:
    """Get a config value by key.

    Returns:
        The configuration value, or None if the key is not known.

    """
    # Import here to avoid circular imports
    from . import get_config

    config = get_config()

    if key == "list_file":
        return str(config.list_path)
    elif key == "env_file":
        return str(config.env_file) if config.env_file else None
    elif key == "json_indent":
        return config.json_indent
    elif key == "log_level":
        return config.log_level
    elif key == "home":
        return str(config.home)
    return None


def set_config_value(key: str, value: str) -> bool:
    """Set a config value by key and save the config file.

    Args:
        key: Configuration key (e.g., 'list_file', 'json_indent')
        value: Value to set (use empty string or 'none' to clear a path)

    Returns:
        True if successful, False if key not recognized.

    Raises:
        ValueError: If the value is invalid for the setting type.

    """
    # Import here to avoid circular imports
    from . import get_config
    from .io import save_config

    config = get_config()

    if key == "list_file":
        if value.lower() in ("", "none"):
            config.list_file = None
        else:
            config.list_file = expand_path(value)
    elif key == "env_file":
        if value.lower() in ("", "none"):
            config.env_file = None
        else:
            config.env_file = expand_path(value)
    elif key == "json_indent":
        config.json_indent = _parse_json_indent(value)
    elif key == "log_level":
        config.log_level = _parse_log_level(value)
    else:
        return False

    save_config(config)
    return True


def list_config_settings() -> dict[str, tuple[str, Any]]:
    """List all configurable settings with their current values.

    Returns:
        Dict mapping key to (description, current_value).

    """
    return {
        key: (description, get_config_value(key))
        for key, description in CONFIGURABLE_SETTINGS.items()
    }
