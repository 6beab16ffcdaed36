"""PageActions CLI — Main Typer entry point.

Registers all subcommands and provides --version / --verbose global options.
"""

from __future__ import annotations

import typer
from rich.console import Console

from pageactions import __version__

TAGLINE = "Drive a browser page with plain-English action strings."

console = Console()

# ── Version callback ──────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]pageactions[/bold cyan] v{__version__}")
        console.print(f"  {TAGLINE}", style="dim")
        raise typer.Exit()


# ── Main app ──────────────────────────────────────────────────────────────

app = typer.Typer(
    name="pageactions",
    help=TAGLINE,
    rich_markup_mode="rich",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show PageActions version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
) -> None:
    """PageActions -- run action strings like "click .button" against a web page."""
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s  %(message)s")


# ── Register subcommands ──────────────────────────────────────────────────

from pageactions.cli.list_cmd import list_actions  # noqa: E402
from pageactions.cli.run import run  # noqa: E402
from pageactions.cli.validate import validate  # noqa: E402

app.command(name="run", help="Open a URL in Chromium and run action strings against it.")(run)
app.command(name="validate", help="Check action strings resolve, without a browser (zero cost).")(validate)
app.command(name="list", help="List the registered actions and their patterns.")(list_actions)
