"""Display formats for primary items.

A ``Format`` is a small bag of text attributes (color, background, thickness,
underline, italic) that is edited by style tokens on the command line and
rendered through rich. Tokens are resolved before any of them is applied, so
a bad token leaves the format untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields
from typing import Any

from rich.color import Color, ColorParseError
from rich.style import Style
from rich.text import Text

THICKNESS_VALUES = ("bold", "faint")

# Keyword tokens understood by apply_tokens (colors are parsed separately)
STYLE_KEYWORDS = {
    "bold": "Bold text",
    "faint": "Faint (dim) text",
    "dim": "Alias for faint",
    "shy": "Regular thickness",
    "underline": "Underlined text",
    "nounderline": "Remove underline",
    "italic": "Italic text",
    "noitalic": "Remove italic",
    "plain": "Clear every attribute",
}

# Colors offered during completion; any color rich can parse is accepted
COMPLETION_COLORS = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)

BACKGROUND_PREFIX = "on_"


class InvalidAttributeError(ValueError):
    """Raised when a style token is not recognized."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid attribute: {token}")


@dataclass
class Format:
    """Display attributes for a primary item."""

    color: str | None = None
    background: str | None = None
    thickness: str | None = None  # "bold", "faint" or None
    underline: bool = False
    italic: bool = False

    @property
    def is_empty(self) -> bool:
        """True if no attribute is set."""
        return self == Format()

    @property
    def style(self) -> Style:
        """Return the rich Style for this format."""
        return Style(
            color=self.color,
            bgcolor=self.background,
            bold=True if self.thickness == "bold" else None,
            dim=True if self.thickness == "faint" else None,
            underline=self.underline or None,
            italic=self.italic or None,
        )

    def render(self, value: str) -> Text:
        """Render ``value`` with this format."""
        if self.is_empty:
            return Text(value)
        return Text(value, style=self.style)

    def clear(self) -> None:
        """Reset every attribute."""
        for _field in fields(self):
            setattr(self, _field.name, getattr(Format(), _field.name))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted shape (only set attributes)."""
        data: dict[str, Any] = {}
        if self.color is not None:
            data["Color"] = self.color
        if self.background is not None:
            data["Background"] = self.background
        if self.thickness is not None:
            data["Thickness"] = self.thickness
        if self.underline:
            data["Underline"] = True
        if self.italic:
            data["Italic"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Format:
        """Build a Format from its persisted shape.

        ``Thickness`` may be a boolean (``true`` meaning bold) or one of
        ``"bold"``/``"faint"``.

        Raises:
            ValueError: If a value cannot be interpreted.

        """
        if not isinstance(data, dict):
            raise ValueError(f"format must be an object, got {type(data).__name__}")

        thickness = data.get("Thickness")
        if thickness is True:
            thickness = "bold"
        elif thickness is False or thickness in ("", None):
            thickness = None
        elif thickness not in THICKNESS_VALUES:
            raise ValueError(f"unknown thickness: {thickness!r}")

        return cls(
            color=_checked_color(data.get("Color")),
            background=_checked_color(data.get("Background")),
            thickness=thickness,
            underline=_checked_flag(data, "Underline"),
            italic=_checked_flag(data, "Italic"),
        )


def _checked_flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _checked_color(value: Any) -> str | None:
    if value in (None, ""):
        return None
    if not isinstance(value, str) or not is_color(value):
        raise ValueError(f"unknown color: {value!r}")
    return value.lower()


def is_color(value: str) -> bool:
    """Check if rich can parse ``value`` as a color."""
    try:
        Color.parse(value)
    except ColorParseError:
        return False
    return True


def _set(name: str, value: Any) -> Callable[[Format], None]:
    def apply(fmt: Format) -> None:
        setattr(fmt, name, value)

    return apply


def resolve_token(token: str) -> Callable[[Format], None]:
    """Resolve a style token into a function that applies it to a Format.

    Raises:
        InvalidAttributeError: If the token is not a keyword or a color.

    """
    key = token.strip().lower()

    if key == "bold":
        return _set("thickness", "bold")
    if key in ("faint", "dim"):
        return _set("thickness", "faint")
    if key == "shy":
        return _set("thickness", None)
    if key == "underline":
        return _set("underline", True)
    if key == "nounderline":
        return _set("underline", False)
    if key == "italic":
        return _set("italic", True)
    if key == "noitalic":
        return _set("italic", False)
    if key == "plain":
        return Format.clear

    if key.startswith(BACKGROUND_PREFIX):
        background = key[len(BACKGROUND_PREFIX) :]
        if background and is_color(background):
            return _set("background", background)
        raise InvalidAttributeError(token)

    if key and is_color(key):
        return _set("color", key)

    raise InvalidAttributeError(token)


def apply_tokens(fmt: Format, tokens: Iterable[str]) -> None:
    """Apply style tokens to ``fmt`` in order.

    Every token is resolved before the first one is applied.

    Raises:
        InvalidAttributeError: On the first unrecognized token.

    """
    operations = [resolve_token(token) for token in tokens]
    for operation in operations:
        operation(fmt)
