"""CLI package for td."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import ClassVar

# Ensure stdout handles Unicode when piped (e.g., `td | less`)
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

import click

from td import __version__
from td.cli.completion import handle_powershell_completion, register_completion_commands
from td.cli.config_cmd import register_config_commands
from td.cli.items import list_cmd, register_item_commands
from td.cli.utils import print_error, setup_logging


class AliasedGroup(click.Group):
    """Click group that resolves the single-letter verbs and other aliases."""

    ALIASES: ClassVar[dict[str, str]] = {
        "a": "add",
        "d": "delete",
        "rm": "delete",
        "f": "format",
        "ls": "list",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        # Try original command first
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv

        if cmd_name in self.ALIASES:
            return super().get_command(ctx, self.ALIASES[cmd_name])

        return None


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="td")
@click.option(
    "--file",
    "-F",
    "list_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TD_LIST_FILE",
    help="Todo list file to use instead of the configured one",
)
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr")
@click.pass_context
def cli(ctx: click.Context, list_file: Path | None, verbose: bool) -> None:
    """A two-level todo list.

    Run 'td' without arguments to list all items.

    \b
    Verbs:
      td a PRIMARY [SECONDARY]     Add an item
      td d PRIMARY [SECONDARY]     Delete an item
      td f PRIMARY TOKEN...        Format a primary item
    """
    from td.config import get_config

    try:
        config = get_config()
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        raise SystemExit(1) from None

    setup_logging("DEBUG" if verbose else config.log_level)

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_cmd)


# Register all command groups
register_item_commands(cli)
register_config_commands(cli)
register_completion_commands(cli)


def main() -> None:
    """Entry point for the CLI."""
    if not handle_powershell_completion(cli):
        cli()


__all__ = ["cli", "main"]
