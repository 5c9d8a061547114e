"""Configuration I/O functions for td."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .models import DEFAULT_LOG_LEVEL, Config
from .parsers import (
    _parse_json_indent,
    _parse_log_level,
    expand_path,
    get_config_path,
)

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file.

    A missing config file yields the defaults.

    Environment variables are loaded in this priority order (first wins):
    1. Shell environment variables (already set before td runs)
    2. Custom env_file specified in config (if set)
    3. Default <home>/.env file

    ``TD_LIST_FILE`` overrides the ``list_file`` setting for this run only;
    it is kept in ``list_file_override`` so ``save_config`` never persists it.

    Raises:
        ValueError: If the config file holds invalid values.

    """
    if config_path is None:
        config_path = get_config_path()
    home = config_path.parent

    if config_path.exists():
        with config_path.open(encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{config_path} is not valid YAML: {e}") from None
        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a mapping of settings")
    else:
        data = {}

    # Using override=False means existing env vars are NOT overwritten
    custom_env_file: Path | None = None
    if data.get("env_file"):
        custom_env_file = expand_path(data["env_file"])
        if custom_env_file.exists():
            load_dotenv(custom_env_file, override=False)

    default_env_file = home / ".env"
    if default_env_file.exists():
        load_dotenv(default_env_file, override=False)

    list_file = expand_path(data["list_file"]) if data.get("list_file") else None
    env_list_file = os.environ.get("TD_LIST_FILE")

    config = Config(
        home=home,
        list_file=list_file,
        env_file=custom_env_file,
        json_indent=_parse_json_indent(data.get("json_indent")),
        log_level=_parse_log_level(data.get("log_level")),
        list_file_override=expand_path(env_list_file) if env_list_file else None,
    )
    logger.debug("Loaded config from %s", config_path)
    return config


def save_config(config: Config) -> None:
    """Save configuration to YAML file.

    Only settings that differ from their defaults are written, apart from
    json_indent and log_level which are always present.
    """
    data: dict[str, Any] = {}
    if config.list_file is not None:
        data["list_file"] = str(config.list_file)
    if config.env_file is not None:
        data["env_file"] = str(config.env_file)
    data["json_indent"] = config.json_indent
    data["log_level"] = config.log_level or DEFAULT_LOG_LEVEL

    config.config_path.parent.mkdir(parents=True, exist_ok=True)
    with config.config_path.open("w", encoding="utf-8") as f:
        f.write("# td configuration\n\n")
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
