"""Two-level todo list store.

The list maps primary names to ``PrimaryItem`` entries, each holding a set of
secondary names and an optional display format. All operations mutate the
list in memory and set ``changed``; persisting is left to the caller
(see ``td.core.storage``).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any, Literal

from rich.text import Text

from td.core.styles import Format, InvalidAttributeError, apply_tokens
from td.models import PrimaryItem

logger = logging.getLogger(__name__)

SECONDARY_INDENT = "  "

# Keys of the persisted JSON document
ITEMS_KEY = "Items"
FORMATS_KEY = "PrimaryFormats"


class TodoListError(Exception):
    """Base exception for todo list operations."""

    pass


class DuplicatePrimaryError(TodoListError):
    """Raised when adding a primary item that already exists."""

    def __init__(self, primary: str) -> None:
        super().__init__(f'primary item "{primary}" already exists')


class DuplicateSecondaryError(TodoListError):
    """Raised when adding a secondary item that already exists."""

    def __init__(self, primary: str, secondary: str) -> None:
        super().__init__(f'item "{primary}", "{secondary}" already exists')


class EmptyListError(TodoListError):
    """Raised when deleting from a list with no primary items."""

    def __init__(self) -> None:
        super().__init__("can't delete from empty list")


class UnknownPrimaryError(TodoListError):
    """Raised when a primary item does not exist."""

    def __init__(self, primary: str) -> None:
        super().__init__(f'Primary item "{primary}" does not exist')


class UnknownSecondaryError(TodoListError):
    """Raised when a secondary item does not exist."""

    def __init__(self, secondary: str) -> None:
        super().__init__(f'Secondary item "{secondary}" does not exist')


class PrimaryHasChildrenError(TodoListError):
    """Raised when deleting a primary item that still has secondary items."""

    def __init__(self) -> None:
        super().__init__("Can't delete primary item that still has secondary items")


class InvalidStyleAttributeError(TodoListError):
    """Raised when a style token is not recognized."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid attribute: {token}")


class MalformedStateError(TodoListError):
    """Raised when the persisted todo list cannot be parsed."""

    pass


class TodoList:
    """A set of primary items, each holding secondary items and a format."""

    def __init__(self, primaries: dict[str, PrimaryItem] | None = None) -> None:
        self.primaries: dict[str, PrimaryItem] = primaries if primaries else {}
        self.changed = False

    def __len__(self) -> int:
        return len(self.primaries)

    def __contains__(self, primary: object) -> bool:
        return primary in self.primaries

    # =========================================================================
    # Operations
    # =========================================================================

    def add_item(self, primary: str, secondary: str | None = None) -> None:
        """Add a primary item, or a secondary item under a primary.

        Adding a secondary creates its primary if needed. Adding a bare
        primary that already exists is an error.

        Raises:
            DuplicatePrimaryError: If ``secondary`` is None and ``primary`` exists.
            DuplicateSecondaryError: If ``secondary`` already exists under ``primary``.

        """
        item = self.primaries.get(primary)
        created = item is None

        if secondary is None:
            if not created:
                raise DuplicatePrimaryError(primary)
            self.primaries[primary] = PrimaryItem(name=primary)
            logger.debug("Added primary %r", primary)
            self.changed = True
            return

        if item is not None and secondary in item.secondaries:
            raise DuplicateSecondaryError(primary, secondary)

        if item is None:
            item = self.primaries[primary] = PrimaryItem(name=primary)
            logger.debug("Added primary %r", primary)
        item.secondaries.add(secondary)
        logger.debug("Added secondary %r under %r", secondary, primary)
        self.changed = True

    def delete_item(self, primary: str, secondary: str | None = None) -> None:
        """Delete a secondary item, or a primary item with no secondaries.

        Raises:
            EmptyListError: If the list has no primary items.
            UnknownPrimaryError: If ``primary`` does not exist.
            UnknownSecondaryError: If ``secondary`` does not exist under ``primary``.
            PrimaryHasChildrenError: If deleting a primary that has secondaries.

        """
        if not self.primaries:
            raise EmptyListError()

        item = self.primaries.get(primary)
        if item is None:
            raise UnknownPrimaryError(primary)

        if secondary is not None:
            if secondary not in item.secondaries:
                raise UnknownSecondaryError(secondary)
            item.secondaries.discard(secondary)
            logger.debug("Deleted secondary %r under %r", secondary, primary)
            self.changed = True
            return

        if item.has_secondaries:
            raise PrimaryHasChildrenError()

        del self.primaries[primary]
        logger.debug("Deleted primary %r", primary)
        self.changed = True

    def list_items(self) -> list[Text]:
        """Render the list as lines of text.

        Primaries are sorted and rendered with their format, each followed by
        its sorted secondaries indented by two spaces.
        """
        lines: list[Text] = []
        for name in sorted(self.primaries):
            item = self.primaries[name]
            if item.format is None:
                lines.append(Text(name))
            else:
                lines.append(item.format.render(name))
            for secondary in item.sorted_secondaries():
                lines.append(Text(f"{SECONDARY_INDENT}{secondary}"))
        return lines

    def set_format(self, primary: str, tokens: Iterable[str]) -> Format:
        """Apply style tokens to a primary item's format.

        Tokens are validated before any is applied; on error the format and
        the changed flag are left as they were. The changed flag is only set
        when the resulting format differs from the current one.

        Raises:
            UnknownPrimaryError: If ``primary`` does not exist.
            InvalidStyleAttributeError: On the first unrecognized token.
            ValueError: If no tokens are given.

        """
        tokens = list(tokens)
        if not tokens:
            raise ValueError("at least one style token is required")

        item = self.primaries.get(primary)
        if item is None:
            raise UnknownPrimaryError(primary)

        fmt = Format() if item.format is None else replace(item.format)
        try:
            apply_tokens(fmt, tokens)
        except InvalidAttributeError as e:
            raise InvalidStyleAttributeError(e.token) from None

        new_format = None if fmt.is_empty else fmt
        if new_format == item.format:
            return fmt

        item.format = new_format
        logger.debug("Set format of %r to %s", primary, fmt.to_dict())
        self.changed = True
        return fmt

    def clear_format(self, primary: str) -> bool:
        """Remove a primary item's format.

        Returns:
            True if a format was removed, False if there was none.

        Raises:
            UnknownPrimaryError: If ``primary`` does not exist.

        """
        item = self.primaries.get(primary)
        if item is None:
            raise UnknownPrimaryError(primary)
        if item.format is None:
            return False
        item.format = None
        self.changed = True
        return True

    # =========================================================================
    # Queries
    # =========================================================================

    def primary_names(self) -> set[str]:
        """Return all primary names."""
        return set(self.primaries)

    def secondary_names(self, primary: str) -> set[str]:
        """Return the secondary names under ``primary`` (empty if unknown)."""
        item = self.primaries.get(primary)
        if item is None:
            return set()
        return set(item.secondaries)

    def to_items(self) -> dict[str, set[str]]:
        """Return a plain mapping of primary names to secondary name sets."""
        return {name: set(item.secondaries) for name, item in self.primaries.items()}

    # =========================================================================
    # Persistence
    # =========================================================================

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TodoList:
        """Build a TodoList from the persisted document shape.

        Raises:
            MalformedStateError: If the document does not have the expected shape.

        """
        if not isinstance(data, dict):
            raise MalformedStateError(
                f"failed to parse todo list json: expected an object, got {type(data).__name__}"
            )

        raw_items = data.get(ITEMS_KEY) or {}
        raw_formats = data.get(FORMATS_KEY) or {}
        if not isinstance(raw_items, dict) or not isinstance(raw_formats, dict):
            raise MalformedStateError(
                f"failed to parse todo list json: {ITEMS_KEY} and {FORMATS_KEY} must be objects"
            )

        primaries: dict[str, PrimaryItem] = {}
        for name, raw_secondaries in raw_items.items():
            if raw_secondaries is None:
                raw_secondaries = {}
            if not isinstance(raw_secondaries, (dict, list)) or not all(
                isinstance(s, str) for s in raw_secondaries
            ):
                raise MalformedStateError(
                    f"failed to parse todo list json: secondary items of {name!r} must be an object or list"
                )
            primaries[name] = PrimaryItem(name=name, secondaries=set(raw_secondaries))

        for name, raw_format in raw_formats.items():
            item = primaries.get(name)
            if item is None:
                logger.debug("Dropping format for unknown primary %r", name)
                continue
            if raw_format is None:
                continue
            try:
                fmt = Format.from_dict(raw_format)
            except ValueError as e:
                raise MalformedStateError(
                    f"failed to parse todo list json: format of {name!r}: {e}"
                ) from None
            item.format = None if fmt.is_empty else fmt

        return cls(primaries)

    @classmethod
    def load(cls, text: str | None) -> TodoList:
        """Load a TodoList from its JSON text.

        Empty text yields an empty list.

        Raises:
            MalformedStateError: If the text is not valid JSON of the expected shape.

        """
        if text is None or not text.strip():
            return cls()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedStateError(f"failed to parse todo list json: {e}") from None
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted document shape."""
        items = {
            name: {secondary: True for secondary in item.sorted_secondaries()}
            for name, item in sorted(self.primaries.items())
        }
        formats = {
            name: item.format.to_dict()
            for name, item in sorted(self.primaries.items())
            if item.format is not None
        }
        return {ITEMS_KEY: items, FORMATS_KEY: formats}

    def dump(self, indent: int | None = 2) -> str:
        """Serialize to JSON text."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def complete(
    todo_list: TodoList,
    field: Literal["primary", "secondary"],
    primary: str | None = None,
) -> set[str]:
    """Return completion candidates for a primary or secondary argument.

    Secondary candidates need the selected ``primary``; without one there
    are none.
    """
    if field == "primary":
        return todo_list.primary_names()
    if field == "secondary":
        if primary is None:
            return set()
        return todo_list.secondary_names(primary)
    raise ValueError(f"unknown completion field: {field}")
