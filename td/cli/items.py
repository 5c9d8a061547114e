"""Todo item CLI commands."""

from __future__ import annotations

import click

from td.cli.completion import (
    complete_primary,
    complete_secondary,
    complete_style_token,
)
from td.cli.utils import console, edit_list


def register_item_commands(cli: click.Group) -> None:
    """Register all item-related commands with the CLI."""
    cli.add_command(list_cmd)
    cli.add_command(add_cmd)
    cli.add_command(delete_cmd)
    cli.add_command(format_cmd)


@click.command("list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """List primary items and their secondary items.

    Primary items are sorted and shown with their format; secondary items
    follow, sorted and indented.
    """
    with edit_list(ctx) as todo_list:
        lines = todo_list.list_items()

    for line in lines:
        console.print(line, soft_wrap=True)


@click.command("add")
@click.argument("primary", shell_complete=complete_primary)
@click.argument("secondary", required=False)
@click.pass_context
def add_cmd(ctx: click.Context, primary: str, secondary: str | None) -> None:
    """Add a primary item, or a secondary item under PRIMARY.

    \b
    Examples:
      td a write            Add the primary item "write"
      td a write tests      Add "tests" under "write" (creating "write")
    """
    with edit_list(ctx) as todo_list:
        todo_list.add_item(primary, secondary)


@click.command("delete")
@click.argument("primary", shell_complete=complete_primary)
@click.argument("secondary", required=False, shell_complete=complete_secondary)
@click.pass_context
def delete_cmd(ctx: click.Context, primary: str, secondary: str | None) -> None:
    """Delete a secondary item, or a primary item with no secondary items.

    \b
    Examples:
      td d write tests      Delete "tests" from "write"
      td d write            Delete "write" (must have no secondary items)
    """
    with edit_list(ctx) as todo_list:
        todo_list.delete_item(primary, secondary)


@click.command("format")
@click.argument("primary", shell_complete=complete_primary)
@click.argument("tokens", nargs=-1, shell_complete=complete_style_token)
@click.option("--clear", is_flag=True, help="Remove the format before applying tokens")
@click.pass_context
def format_cmd(
        ctx: click.Context, primary: str, tokens: tuple[str, ...], clear: bool
) -> None:
    """Set the display format of a primary item.

    Tokens are applied in order; later tokens override earlier ones. If any
    token is invalid nothing is changed.

    The primary item must already exist; add it first with 'td a'.

    \b
    Tokens:
      bold, faint, shy       Thickness (shy resets it)
      underline, italic      Attributes (nounderline, noitalic remove them)
      plain                  Clear every attribute
      <color>                Foreground color (red, bright_blue, #ff8800, ...)
      on_<color>             Background color

    \b
    Examples:
      td f write bold red
      td f write shy green
      td f write --clear
    """
    if not tokens and not clear:
        raise click.UsageError("Give at least one style token or --clear.")

    with edit_list(ctx) as todo_list:
        if clear:
            todo_list.clear_format(primary)
        if tokens:
            todo_list.set_format(primary, tokens)
