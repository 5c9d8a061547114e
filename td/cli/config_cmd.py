"""Config-related CLI commands."""

from __future__ import annotations

import click

from td.cli.utils import console, print_error, resolve_list_path
from td.config import get_config


def register_config_commands(cli: click.Group) -> None:
    """Register all config-related commands with the CLI."""
    cli.add_command(config_cmd)


@click.group("config", invoke_without_command=True)
@click.pass_context
def config_cmd(ctx: click.Context) -> None:
    """Manage configuration settings.

    When called without a subcommand, lists all settings.

    \b
    Subcommands:
      get <key>           Get a configuration value
      set <key> <value>   Set a configuration value
      list                List all configurable settings
      path                Show the config and todo list file locations

    \b
    Examples:
      td config get list_file
      td config set json_indent 4
      td config set list_file ~/Dropbox/todo-list.json
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(config_list)


@config_cmd.command("get")
@click.argument("key")
def config_get(key: str) -> None:
    """Get a configuration value.

    \b
    Keys:
      list_file, env_file, json_indent, log_level, home
    """
    from td.config import get_config_value

    value = get_config_value(key)
    if value is None:
        print_error(f"Unknown setting: {key}")
        console.print("[dim]Use 'td config list' to see available settings.[/dim]")
        raise SystemExit(1)

    console.print(f"{key} = {value}")


@config_cmd.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Set a configuration value.

    \b
    Examples:
      td config set json_indent 4
      td config set log_level DEBUG
      td config set list_file none     Back to the default location
    """
    from td.config import set_config_value

    try:
        if set_config_value(key, value):
            console.print(f"[green]Set[/green] {key} = {value}")
        else:
            print_error(f"Unknown setting: {key}")
            console.print("[dim]Use 'td config list' to see available settings.[/dim]")
            raise SystemExit(1)
    except ValueError as e:
        print_error(f"Error: {e}")
        raise SystemExit(1) from None


@config_cmd.command("list")
def config_list() -> None:
    """List all configurable settings."""
    from td.config import list_config_settings

    settings = list_config_settings()

    console.print("\n[bold]Configurable Settings[/bold]\n")
    for key, (description, value) in settings.items():
        value_str = str(value) if value is not None else "[dim]<not set>[/dim]"
        console.print(f"  [cyan]{key}[/cyan]")
        console.print(f"    {description}")
        console.print(f"    Current: {value_str}")
        console.print()


@config_cmd.command("path")
@click.pass_context
def config_path(ctx: click.Context) -> None:
    """Show the config file and todo list file locations."""
    config = get_config()
    console.print(f"config: {config.config_path}", soft_wrap=True)
    console.print(f"list:   {resolve_list_path(ctx)}", soft_wrap=True)
