"""Playwright adapter for the PageHandle protocol."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger("pageactions.engine.page")


class PlaywrightPage:
    """Exposes a ``playwright.async_api.Page`` as a PageHandle.

    ``type()`` goes through the keyboard so text lands in whichever element
    currently has focus, matching how ``set field`` focuses then types.
    """

    def __init__(self, page: Page) -> None:
        self._page = page

    @property
    def page(self) -> Page:
        return self._page

    async def click(self, selector: str) -> None:
        await self._page.click(selector)

    async def focus(self, selector: str) -> None:
        await self._page.focus(selector)

    async def type(self, text: str) -> None:
        await self._page.keyboard.type(text)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        return await self._page.evaluate(script, arg)

    async def wait_for_function(self, script: str, arg: Any = None, **options: Any) -> Any:
        # Only forward options that were actually given so Playwright's
        # page-level default timeout applies otherwise.
        kwargs = {k: v for k, v in options.items() if v is not None}
        logger.debug("Waiting for function with options %s", kwargs)
        return await self._page.wait_for_function(script, arg=arg, **kwargs)
