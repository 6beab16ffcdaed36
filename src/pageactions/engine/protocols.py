"""Page-control protocols.

These protocols define the contract between the action handlers and the
page they drive.  Hosts inject their own PageHandle (PlaywrightPage for a
real browser, a mock in tests) and the dispatcher handles the rest.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PageHandle(Protocol):
    """Controllable web page -- the only surface action handlers touch.

    PlaywrightPage maps this to ``playwright.async_api.Page``.
    """

    async def click(self, selector: str) -> Any: ...

    async def focus(self, selector: str) -> Any: ...

    async def type(self, text: str) -> Any:
        """Type into whatever element currently has focus."""
        ...

    async def evaluate(self, script: str, arg: Any = None) -> Any: ...

    async def wait_for_function(self, script: str, arg: Any = None, **options: Any) -> Any: ...


@runtime_checkable
class DebugLog(Protocol):
    """Anything with a ``debug(message)`` method (``logging.Logger`` qualifies)."""

    def debug(self, msg: str, *args: Any) -> Any: ...


def _default_log() -> logging.Logger:
    return logging.getLogger("pageactions.engine.dispatcher")


@dataclasses.dataclass
class RunOptions:
    """Options passed through the dispatcher to every action handler."""

    log: DebugLog = dataclasses.field(default_factory=_default_log)
