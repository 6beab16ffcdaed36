"""pageactions list — Show the registered actions in match order."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pageactions.engine.registry import get_default_registry

console = Console()


def list_actions() -> None:
    """Print every registered action with its pattern, in priority order."""
    table = Table(title="Registered actions", show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="bold cyan")
    table.add_column("Pattern")

    for i, action in enumerate(get_default_registry(), start=1):
        table.add_row(str(i), escape(action.name), escape(action.match.pattern))

    console.print(table)
