"""Shell completion CLI commands and completers."""

from __future__ import annotations

import click
from click.shell_completion import CompletionItem

from td.core.styles import BACKGROUND_PREFIX, COMPLETION_COLORS, STYLE_KEYWORDS


def register_completion_commands(cli: click.Group) -> None:
    """Register all completion-related commands with the CLI."""
    cli.add_command(completion_cmd)


# =============================================================================
# Custom Completers
# =============================================================================


def _load_for_completion(ctx: click.Context):
    from td.cli.utils import resolve_list_path
    from td.core.storage import load_list

    return load_list(resolve_list_path(ctx))


def complete_primary(
        ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete primary item names from the todo list."""
    try:
        from td.core.todo_list import complete

        todo_list = _load_for_completion(ctx)
        names = complete(todo_list, "primary")
        return [
            CompletionItem(
                name, help=f"{len(todo_list.secondary_names(name))} items"
            )
            for name in sorted(names)
            if name.startswith(incomplete)
        ]
    except Exception:
        return []


def complete_secondary(
        ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete secondary item names under the primary already typed."""
    try:
        from td.core.todo_list import complete

        todo_list = _load_for_completion(ctx)
        names = complete(todo_list, "secondary", ctx.params.get("primary"))
        return [
            CompletionItem(name, help="secondary")
            for name in sorted(names)
            if name.startswith(incomplete)
        ]
    except Exception:
        return []


def complete_style_token(
        ctx: click.Context, param: click.Parameter, incomplete: str
) -> list[CompletionItem]:
    """Complete style keywords and color names."""
    items = [
        CompletionItem(keyword, help=description)
        for keyword, description in STYLE_KEYWORDS.items()
    ]
    items.extend(CompletionItem(color, help="color") for color in COMPLETION_COLORS)
    items.extend(
        CompletionItem(f"{BACKGROUND_PREFIX}{color}", help="background")
        for color in COMPLETION_COLORS
    )
    return [item for item in items if item.value.startswith(incomplete)]


def _get_powershell_source() -> str:
    """Generate PowerShell completion script for td."""
    return """\
Register-ArgumentCompleter -Native -CommandName td -ScriptBlock {
    param($wordToComplete, $commandAst, $cursorPosition)
    $env:_TD_COMPLETE = "powershell_complete"
    $env:_TD_COMPLETE_ARGS = $commandAst.ToString()
    $env:_TD_COMPLETE_WORD = $wordToComplete
    td | ForEach-Object {
        $type, $value, $help = $_ -split "`t", 3
        [System.Management.Automation.CompletionResult]::new(
            $value,
            $value,
            "ParameterValue",
            $(if ($help) { $help } else { $value })
        )
    }
    Remove-Item Env:_TD_COMPLETE
    Remove-Item Env:_TD_COMPLETE_ARGS
    Remove-Item Env:_TD_COMPLETE_WORD
}
"""


def handle_powershell_completion(cli: click.Group) -> bool:
    """Handle PowerShell completion if requested via env var. Returns True if handled."""
    import os
    import shlex

    complete_var = os.environ.get("_TD_COMPLETE")
    if complete_var != "powershell_complete":
        return False

    args_str = os.environ.get("_TD_COMPLETE_ARGS", "")
    word = os.environ.get("_TD_COMPLETE_WORD", "")

    try:
        # Remove the 'td' command name
        parts = shlex.split(args_str)
        if parts and parts[0] == "td":
            parts = parts[1:]
    except ValueError:
        parts = []

    # The word being completed is passed separately
    if word and parts and parts[-1] == word:
        parts = parts[:-1]

    from click.shell_completion import ShellComplete

    comp = ShellComplete(cli, {}, "td", "_TD_COMPLETE")
    completions = comp.get_completions(parts, word)

    for item in completions:
        # Output format: type\tvalue\thelp
        help_text = item.help or ""
        click.echo(f"{item.type}\t{item.value}\t{help_text}")

    return True


@click.command("completion")
@click.option(
    "--shell",
    "-s",
    type=click.Choice(["powershell", "bash", "zsh", "fish"]),
    default="bash",
    help="Shell to generate completion for",
)
@click.pass_context
def completion_cmd(ctx: click.Context, shell: str) -> None:
    """Generate shell completion script.

    \b
    For Bash, add to ~/.bashrc:
        eval "$(td completion -s bash)"

    \b
    For Zsh, add to ~/.zshrc:
        eval "$(td completion -s zsh)"

    \b
    For Fish, add to ~/.config/fish/completions/td.fish:
        td completion -s fish > ~/.config/fish/completions/td.fish

    \b
    For PowerShell, add this to your $PROFILE:
        td completion -s powershell | Out-String | Invoke-Expression
    """
    import click.shell_completion as shell_completion

    root_cli = ctx.find_root().command

    if shell == "powershell":
        click.echo(_get_powershell_source())
    else:
        shell_map = {
            "bash": shell_completion.BashComplete,
            "zsh": shell_completion.ZshComplete,
            "fish": shell_completion.FishComplete,
        }
        cls = shell_map[shell]
        comp = cls(root_cli, {}, "td", "_TD_COMPLETE")
        click.echo(comp.source())
