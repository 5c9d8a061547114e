"""Tests for td.core.styles module."""

from __future__ import annotations

import pytest

from td.core.styles import (
    Format,
    InvalidAttributeError,
    apply_tokens,
    is_color,
    resolve_token,
)


class TestApplyTokens:
    """Tests for style token parsing."""

    @pytest.mark.parametrize(
        ("tokens", "expected"),
        [
            (["bold"], Format(thickness="bold")),
            (["faint"], Format(thickness="faint")),
            (["dim"], Format(thickness="faint")),
            (["bold", "shy"], Format()),
            (["underline", "italic"], Format(underline=True, italic=True)),
            (["underline", "nounderline"], Format()),
            (["italic", "noitalic"], Format()),
            (["red"], Format(color="red")),
            (["RED"], Format(color="red")),
            (["bright_blue"], Format(color="bright_blue")),
            (["#FF8800"], Format(color="#ff8800")),
            (["on_yellow"], Format(background="yellow")),
            (["red", "green"], Format(color="green")),
            (["bold", "red", "plain"], Format()),
        ],
    )
    def test_tokens(self, tokens, expected):
        fmt = Format()

        apply_tokens(fmt, tokens)

        assert fmt == expected

    @pytest.mark.parametrize("token", ["crazy", "on_", "on_crazy", "", "boldly"])
    def test_invalid_token(self, token):
        with pytest.raises(InvalidAttributeError) as exc_info:
            resolve_token(token)

        assert str(exc_info.value) == f"invalid attribute: {token}"
        assert exc_info.value.token == token

    def test_invalid_token_leaves_format_untouched(self):
        fmt = Format(color="blue")

        with pytest.raises(InvalidAttributeError):
            apply_tokens(fmt, ["bold", "crazy"])

        assert fmt == Format(color="blue")

    def test_updates_existing_format(self):
        fmt = Format(color="red", thickness="bold")

        apply_tokens(fmt, ["shy", "green"])

        assert fmt == Format(color="green")


class TestFormat:
    """Tests for the Format dataclass."""

    def test_empty_format_renders_plain(self):
        text = Format().render("write")

        assert text.plain == "write"
        assert text.style == ""

    def test_render_with_style(self):
        text = Format(
            color="red", background="blue", thickness="bold", underline=True
        ).render("write")

        assert text.plain == "write"
        assert text.style.color.name == "red"
        assert text.style.bgcolor.name == "blue"
        assert text.style.bold is True
        assert text.style.underline is True

    def test_faint_maps_to_dim(self):
        assert Format(thickness="faint").style.dim is True

    def test_is_empty(self):
        assert Format().is_empty is True
        assert Format(italic=True).is_empty is False

    def test_to_dict_skips_unset(self):
        assert Format().to_dict() == {}
        assert Format(color="red", thickness="bold", italic=True).to_dict() == {
            "Color": "red",
            "Thickness": "bold",
            "Italic": True,
        }

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"Color": "red", "Thickness": True}, Format(color="red", thickness="bold")),
            ({"Thickness": False}, Format()),
            ({"Thickness": "faint"}, Format(thickness="faint")),
            ({"Background": "blue", "Underline": True}, Format(background="blue", underline=True)),
            ({"Underline": False, "Italic": False}, Format()),
            ({}, Format()),
        ],
    )
    def test_from_dict(self, data, expected):
        assert Format.from_dict(data) == expected

    @pytest.mark.parametrize(
        "data",
        [
            {"Color": "crazy"},
            {"Color": 3},
            {"Thickness": "heavy"},
            {"Underline": "false"},
            {"Italic": 1},
            ["red"],
        ],
    )
    def test_from_dict_invalid(self, data):
        with pytest.raises(ValueError):
            Format.from_dict(data)


class TestIsColor:
    """Tests for is_color."""

    def test_named_and_hex_colors(self):
        assert is_color("red")
        assert is_color("bright_magenta")
        assert is_color("#ff5500")

    def test_not_colors(self):
        assert not is_color("bold")
        assert not is_color("crazy")
