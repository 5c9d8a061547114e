"""Shared fixtures for td tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from td import config as config_module
from td.config import Config
from td.core.storage import load_list
from td.core.todo_list import TodoList


@pytest.fixture
def temp_home(tmp_path: Path) -> Path:
    """Create a temporary td home directory."""
    home = tmp_path / "td-home"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def temp_config(temp_home: Path) -> Generator[Config]:
    """Create a temporary configuration for testing."""
    cfg = Config(home=temp_home)

    yield cfg

    # Reset global singleton after test to avoid interference
    config_module.reset_config()


@pytest.fixture
def mock_config(temp_config: Config, monkeypatch: pytest.MonkeyPatch) -> Config:
    """Make get_config() return temp_config everywhere."""
    config_module.reset_config()
    monkeypatch.setenv("TD_HOME", str(temp_config.home))
    monkeypatch.setenv("TD_LIST_FILE", "")
    monkeypatch.delenv("TD_LIST_FILE")
    monkeypatch.setattr(config_module, "_config", temp_config)
    return temp_config


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture
def write_list(mock_config: Config) -> Callable[[dict[str, Any]], Path]:
    """Factory fixture to write a persisted todo list document.

    Usage:
        def test_something(write_list):
            write_list({"Items": {"write": {"code": True}}})
    """

    def _write(document: dict[str, Any]) -> Path:
        path = mock_config.list_path
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def read_list(mock_config: Config) -> Callable[[], TodoList]:
    """Factory fixture to read the todo list back from disk."""

    def _read() -> TodoList:
        return load_list(mock_config.list_path)

    return _read


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """A persisted todo list with two primaries and a format."""
    return {
        "Items": {
            "write": {"code": False, "tests": True},
            "sleep": {},
        },
        "PrimaryFormats": {
            "sleep": {"Color": "blue", "Thickness": True},
        },
    }
