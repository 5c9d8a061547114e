"""Shared utilities for CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from td.config import get_config
from td.core.storage import open_list
from td.core.todo_list import TodoList, TodoListError

# Main console for stdout (user-facing output)
console = Console(highlight=False)

# Stderr console for errors and diagnostics (doesn't interfere with piped output)
stderr_console = Console(stderr=True, highlight=False)


def setup_logging(level: str | int) -> None:
    """Send td log records at ``level`` and above to stderr."""
    logger = logging.getLogger("td")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(
            console=stderr_console,
            show_time=False,
            show_path=False,
            markup=False,
        )
    )


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    stderr_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)


def resolve_list_path(ctx: click.Context | None = None) -> Path:
    """Return the todo list file for this invocation.

    ``--file`` on the root command wins over the configured list file.
    """
    if ctx is not None:
        list_file = ctx.find_root().params.get("list_file")
        if list_file:
            return Path(list_file)
    return get_config().list_path


@contextmanager
def edit_list(ctx: click.Context | None = None) -> Iterator[TodoList]:
    """Open the todo list for a command and save it if it changed.

    Todo list errors are printed and end the command with exit status 1.
    """
    path = resolve_list_path(ctx)
    try:
        with open_list(path, indent=get_config().json_indent) as todo_list:
            yield todo_list
    except TodoListError as e:
        print_error(str(e))
        raise SystemExit(1) from None
