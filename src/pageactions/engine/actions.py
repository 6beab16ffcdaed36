"""PageActions built-in actions — Map action strings to page interactions.

Each action pairs a case-insensitive pattern with an async handler.  The
dispatcher hands a handler the page, the run options and the capture set
produced by the pattern: ``matches[0]`` is the whole command, ``matches[1:]``
are the groups (``None`` when an optional group did not match).

Supported strings::

    click [element] <selector>
    set [field] <selector> to <value>
    (check|uncheck) [field] <selector>
    wait for (fragment|hash|path|url) [to [not] be] <value>
"""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import Awaitable, Callable, Optional, Sequence

from pageactions.engine.errors import ActionFailedError
from pageactions.engine.protocols import PageHandle, RunOptions
from pageactions.engine.scripts import CHECK_FIELD_SCRIPT, WAIT_FOR_LOCATION_SCRIPT

logger = logging.getLogger("pageactions.engine.actions")

Matches = Sequence[Optional[str]]
ActionHandler = Callable[[PageHandle, RunOptions, Matches], Awaitable[None]]


@dataclasses.dataclass(frozen=True)
class ActionDefinition:
    """A named action string pattern and the handler that runs it."""

    name: str
    match: re.Pattern[str]
    run: ActionHandler

    def matches(self, command: str) -> bool:
        return self.match.search(command) is not None

    def captures(self, command: str) -> tuple[Optional[str], ...] | None:
        """Return ``(whole_match, *groups)`` for ``command``, or None."""
        found = self.match.search(command)
        if found is None:
            return None
        return (found.group(0), *found.groups())


# -- Handlers ----------------------------------------------------------------


async def click_element(page: PageHandle, options: RunOptions, matches: Matches) -> None:
    """Click the element matching the selector, e.g. "click .sign-in-button"."""
    selector = matches[2]
    try:
        await page.click(selector)
    except Exception as exc:
        logger.debug("click on %r failed: %s", selector, exc)
        raise ActionFailedError(selector) from None


async def set_field_value(page: PageHandle, options: RunOptions, matches: Matches) -> None:
    """Focus a field and type a value into it, e.g. "set field #username to example"."""
    selector = matches[2]
    value = matches[3]
    try:
        await page.focus(selector)
        await page.type(value)
    except Exception as exc:
        logger.debug("setting %r failed: %s", selector, exc)
        raise ActionFailedError(selector) from None


async def check_field(page: PageHandle, options: RunOptions, matches: Matches) -> None:
    """Check or uncheck a checkbox/radio input, e.g. "uncheck field #terms"."""
    # Verb compared case-insensitively, like the pattern itself
    checked = matches[1].lower() != "uncheck"
    selector = matches[3]
    try:
        await page.evaluate(CHECK_FIELD_SCRIPT, {"selector": selector, "checked": checked})
    except Exception as exc:
        logger.debug("checking %r failed: %s", selector, exc)
        raise ActionFailedError(selector) from None


# "fragment" and "hash" are synonyms; anything else is the full URL
_LOCATION_PROPERTIES = {
    "fragment": "hash",
    "hash": "hash",
    "path": "pathname",
}


async def wait_for_url(page: PageHandle, options: RunOptions, matches: Matches) -> None:
    """Wait for the URL, path or fragment to become (or stop being) a value.

    E.g. "wait for path to be /example", "wait for url to not be https://example.com/".
    Timeouts come from the page and propagate unchanged.
    """
    expected = matches[4]
    negated = matches[3] is not None
    # Subject compared case-insensitively, like the pattern itself
    prop = _LOCATION_PROPERTIES.get(matches[1].lower(), "href")

    await page.wait_for_function(
        WAIT_FOR_LOCATION_SCRIPT,
        {"property": prop, "expected": expected, "negated": negated},
    )


# -- Built-in table ----------------------------------------------------------
# Order is match priority: the first pattern that matches wins.
# Captures stop at line terminators and patterns end at \Z, so a trailing
# newline never resolves.

_REST = r"[^\n\r\u2028\u2029]+"

BUILTIN_ACTIONS: tuple[ActionDefinition, ...] = (
    ActionDefinition(
        name="click-element",
        match=re.compile(rf"^click( element)? ({_REST})\Z", re.IGNORECASE),
        run=click_element,
    ),
    ActionDefinition(
        name="set-field-value",
        match=re.compile(rf"^set( field)? ({_REST}) to ({_REST})\Z", re.IGNORECASE),
        run=set_field_value,
    ),
    ActionDefinition(
        name="check-field",
        match=re.compile(rf"^(check|uncheck)( field)? ({_REST})\Z", re.IGNORECASE),
        run=check_field,
    ),
    ActionDefinition(
        name="wait-for-url",
        match=re.compile(rf"^wait for (fragment|hash|path|url)( to (not )?be)? ({_REST})\Z", re.IGNORECASE),
        run=wait_for_url,
    ),
)
