"""Configuration parsing functions for td."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .models import DEFAULT_HOME, DEFAULT_JSON_INDENT, DEFAULT_LOG_LEVEL

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def expand_path(path: str | Path) -> Path:
    """Expand ~ and environment variables in a path."""
    path_str = str(path)
    # Expand environment variables
    path_str = os.path.expandvars(path_str)
    # Expand ~
    return Path(path_str).expanduser()


def get_default_home() -> Path:
    """Get the default td home directory."""
    env_home = os.environ.get("TD_HOME")
    if env_home:
        return expand_path(env_home)
    return DEFAULT_HOME


def get_config_path(home: Path | None = None) -> Path:
    """Get the path to the config file."""
    if home is None:
        home = get_default_home()
    return home / "config.yaml"


def _parse_json_indent(value: Any) -> int:
    """Parse the json_indent setting.

    Raises:
        ValueError: If the value is not a non-negative integer.

    """
    if value is None:
        return DEFAULT_JSON_INDENT
    try:
        indent = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"json_indent must be an integer, got '{value}'") from None
    if indent < 0:
        raise ValueError("json_indent must not be negative")
    return indent


def _parse_log_level(value: Any) -> str:
    """Parse the log_level setting.

    Raises:
        ValueError: If the value is not a known level name.

    """
    if value is None:
        return DEFAULT_LOG_LEVEL
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
    return level
