"""pageactions validate — Check action strings without opening a browser.

Reads action strings from a config file and/or --action options and reports
any that no registered action can resolve.  Zero cost: nothing is executed.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from pageactions.config import PageActionsConfig, PageActionsConfigError
from pageactions.engine.dispatcher import is_valid_action
from pageactions.models import DEFAULT_CONFIG_FILE

console = Console(stderr=True)


def _collect_actions(config: Path | None, action: list[str] | None) -> list[str]:
    """Gather action strings from the config file (if any) then the CLI."""
    commands: list[str] = []
    if config is not None:
        commands.extend(PageActionsConfig.from_file(config).actions)
    elif Path(DEFAULT_CONFIG_FILE).is_file() and not action:
        commands.extend(PageActionsConfig.from_file(Path(DEFAULT_CONFIG_FILE)).actions)
    commands.extend(action or [])
    return commands


def validate(
    config: Path | None = typer.Argument(
        None,
        help=f"YAML config with an 'actions' list (default: ./{DEFAULT_CONFIG_FILE}).",
    ),
    action: list[str] | None = typer.Option(
        None,
        "--action",
        "-a",
        help='Action string to check, e.g. "click .button". Repeatable.',
    ),
) -> None:
    """Validate that every action string resolves to a registered action."""
    try:
        commands = _collect_actions(config, action)
    except PageActionsConfigError as exc:
        console.print(Panel(f"[red]{escape(str(exc))}[/red]", title="[red]Config Error[/red]", border_style="red"))
        raise typer.Exit(code=2)

    if not commands:
        console.print("[yellow]No actions to validate.[/yellow]")
        raise typer.Exit(code=0)

    invalid = 0
    for command in commands:
        if is_valid_action(command):
            console.print(f"  [green]✓[/green] {escape(command)}")
        else:
            invalid += 1
            console.print(f"  [red]✗[/red] {escape(command)}  [dim red]cannot be resolved[/dim red]")

    console.print()
    if invalid:
        console.print(f"[bold red]{invalid} of {len(commands)} action(s) invalid[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]All {len(commands)} action(s) valid[/bold green]")
