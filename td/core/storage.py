"""Reading and writing the todo list file."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from td.core.todo_list import TodoList

logger = logging.getLogger(__name__)


def load_list(path: Path) -> TodoList:
    """Load the todo list stored at ``path``.

    A missing file yields an empty list.

    Raises:
        MalformedStateError: If the file content cannot be parsed.

    """
    if not path.exists():
        logger.debug("No todo list at %s, starting empty", path)
        return TodoList()

    text = path.read_text(encoding="utf-8")
    todo_list = TodoList.load(text)
    logger.debug("Loaded %d primary items from %s", len(todo_list), path)
    return todo_list


def save_list(todo_list: TodoList, path: Path, indent: int | None = 2) -> None:
    """Write ``todo_list`` to ``path``.

    The file is written to a temporary sibling and moved into place.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = todo_list.dump(indent=indent) + "\n"

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        Path(tmp_name).replace(path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    todo_list.changed = False
    logger.debug("Saved %d primary items to %s", len(todo_list), path)


@contextmanager
def open_list(path: Path, indent: int | None = 2) -> Iterator[TodoList]:
    """Load the todo list, yield it, and save it back if it changed.

    Usage:
        with open_list(path) as todo_list:
            todo_list.add_item("write", "tests")

    Nothing is written when the body raises.
    """
    todo_list = load_list(path)
    yield todo_list
    if todo_list.changed:
        save_list(todo_list, path, indent=indent)
