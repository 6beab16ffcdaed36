"""pageactions run — Open a page in Chromium and run action strings against it.

Resolves config (YAML file merged with CLI options), launches Playwright
Chromium, navigates to the URL, then runs each action in order.  The run
stops at the first failing action and exits 1.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from pageactions.config import PageActionsConfig, PageActionsConfigError
from pageactions.engine.dispatcher import ActionDispatcher
from pageactions.engine.errors import PageActionError
from pageactions.engine.page import PlaywrightPage
from pageactions.engine.protocols import RunOptions
from pageactions.models import DEFAULT_CONFIG_FILE

console = Console(stderr=True)

logger = logging.getLogger("pageactions.cli.run")


# ── Shared error printer ──────────────────────────────────────────────────


def _print_error(message: str, title: str = "Error") -> None:
    console.print(Panel(f"[red]{escape(message)}[/red]", title=f"[red]{title}[/red]", border_style="red"))


# ── Config builder ────────────────────────────────────────────────────────


def _build_config(
    config_path: Path | None,
    url: str | None,
    actions: list[str] | None,
    headed: bool,
    timeout: int | None,
) -> PageActionsConfig:
    """Build a PageActionsConfig from CLI options, merging with the config file if present."""
    if config_path is None and Path(DEFAULT_CONFIG_FILE).is_file():
        config_path = Path(DEFAULT_CONFIG_FILE)

    config = PageActionsConfig.from_file(config_path) if config_path is not None else PageActionsConfig()

    # CLI options override config file values
    if url:
        config.url = url
    if actions:
        config.actions = list(actions)
    if headed:
        config.headless = False
    if timeout is not None:
        config.timeout = timeout

    if not config.url:
        raise PageActionsConfigError("No URL to open. Pass --url or set 'url' in the config file.")
    return config


# ── Browser session ───────────────────────────────────────────────────────


async def _run_in_browser(config: PageActionsConfig, dispatcher: ActionDispatcher) -> list[str]:
    """Launch Chromium, open ``config.url`` and run every action.

    Returns the actions that completed.  The first failing action's error
    propagates after the browser is closed.
    """
    from playwright.async_api import async_playwright

    completed: list[str] = []
    options = RunOptions()

    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=config.headless)
        try:
            context = await browser.new_context(
                viewport={"width": config.viewport[0], "height": config.viewport[1]},
            )
            page = await context.new_page()
            page.set_default_timeout(config.timeout)
            logger.info("Navigating to %s", config.url)
            await page.goto(config.url)

            handle = PlaywrightPage(page)
            for command in config.actions:
                start = time.monotonic()
                await dispatcher.run(handle, options, command)
                completed.append(command)
                console.print(
                    f"  [bold green]✓[/bold green] {escape(command)}  [dim]{time.monotonic() - start:.1f}s[/dim]"
                )
        finally:
            await browser.close()

    return completed


def run(
    config: Path | None = typer.Argument(
        None,
        help=f"YAML config with 'url' and 'actions' (default: ./{DEFAULT_CONFIG_FILE}).",
    ),
    url: str | None = typer.Option(None, "--url", "-u", help="URL to open before running actions."),
    action: list[str] | None = typer.Option(
        None,
        "--action",
        "-a",
        help='Action string to run, e.g. "click .button". Repeatable; replaces config actions.',
    ),
    headed: bool = typer.Option(False, "--headed", help="Show the browser window."),
    timeout: int | None = typer.Option(None, "--timeout", help="Default page timeout in milliseconds."),
) -> None:
    """Run action strings against a page."""
    try:
        cfg = _build_config(config, url, action, headed, timeout)
    except PageActionsConfigError as exc:
        _print_error(str(exc), "Config Error")
        raise typer.Exit(code=2)

    dispatcher = ActionDispatcher()
    unresolved = [c for c in cfg.actions if not dispatcher.is_valid_action(c)]
    if unresolved:
        _print_error("\n".join(f'"{c}" cannot be resolved' for c in unresolved), "Invalid Actions")
        raise typer.Exit(code=2)

    console.print(
        Panel(
            f"[bold]URL:[/bold]       {escape(cfg.url)}\n"
            f"[bold]Actions:[/bold]   {len(cfg.actions)}\n"
            f"[bold]Viewport:[/bold]  {cfg.viewport[0]}x{cfg.viewport[1]}\n"
            f"[bold]Headless:[/bold]  {cfg.headless}",
            title="[bold cyan]PageActions Run[/bold cyan]",
            border_style="cyan",
        )
    )

    try:
        completed = asyncio.run(_run_in_browser(cfg, dispatcher))
    except PageActionError as exc:
        _print_error(str(exc), "Action Failed")
        raise typer.Exit(code=1)
    except Exception as exc:
        # Playwright errors (launch failures, navigation and wait timeouts)
        logger.debug("Run failed", exc_info=True)
        _print_error(f"{type(exc).__name__}: {exc}", "Run Failed")
        raise typer.Exit(code=1)

    console.print(f"\n[bold green]{len(completed)} action(s) complete[/bold green]")
