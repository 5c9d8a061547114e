"""Configuration dataclass models for td."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LIST_FILENAME = "todo-list.json"
DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Application configuration.

    ``list_file_override`` holds ``TD_LIST_FILE`` from the environment. It
    wins over ``list_file`` in ``list_path`` but is never written back to
    the config file.
    """

    home: Path
    list_file: Path | None = None  # Todo list file (default: <home>/todo-list.json)
    env_file: Path | None = None  # Custom .env file path (default: <home>/.env)
    json_indent: int = DEFAULT_JSON_INDENT  # Indentation of the saved list file
    log_level: str = DEFAULT_LOG_LEVEL  # DEBUG, INFO, WARNING or ERROR
    list_file_override: Path | None = None  # From TD_LIST_FILE, not persisted

    @property
    def config_path(self) -> Path:
        """Return path to config file."""
        return self.home / "config.yaml"

    @property
    def list_path(self) -> Path:
        """Return path to the todo list file."""
        if self.list_file_override is not None:
            return self.list_file_override
        if self.list_file is not None:
            return self.list_file
        return self.home / DEFAULT_LIST_FILENAME


# Default configuration values
DEFAULT_HOME = Path.home() / ".td"
