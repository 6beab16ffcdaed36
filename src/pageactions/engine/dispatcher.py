"""PageActions Dispatcher — Resolve an action string and run its handler.

The dispatcher walks the registry in order, runs the first action whose
pattern matches the command, and lets any handler error propagate exactly as
raised.  Commands matching nothing raise ``UnresolvedActionError``.
"""

from __future__ import annotations

from typing import Iterable

from pageactions.engine.errors import UnresolvedActionError
from pageactions.engine.protocols import PageHandle, RunOptions
from pageactions.engine.registry import ActionRegistry, get_default_registry
from pageactions.models import ACTION_COMPLETE_MESSAGE, RUNNING_ACTION_MESSAGE


class ActionDispatcher:
    """Runs action strings against a page.

    Args:
        registry: Actions to match against.  When omitted, the process-wide
            default registry is read at the start of each call.
    """

    def __init__(self, registry: ActionRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> ActionRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    async def run(self, page: PageHandle, options: RunOptions, command: str) -> None:
        """Run a single action string. Resolves with None."""
        registry = self.registry
        action = registry.find(command)
        if action is None:
            raise UnresolvedActionError(command)

        options.log.debug(RUNNING_ACTION_MESSAGE.format(command=command))
        await action.run(page, options, action.captures(command))
        options.log.debug(ACTION_COMPLETE_MESSAGE)

    async def run_all(self, page: PageHandle, options: RunOptions, commands: Iterable[str]) -> None:
        """Run action strings one after another, stopping at the first failure."""
        for command in commands:
            await self.run(page, options, command)

    def is_valid_action(self, command: str) -> bool:
        """Return whether any registered action matches ``command``."""
        if not isinstance(command, str):
            return False
        return self.registry.find(command) is not None


# -- Module-level conveniences ----------------------------------------------


async def run_action(
    page: PageHandle,
    options: RunOptions,
    command: str,
    registry: ActionRegistry | None = None,
) -> None:
    """Run one action string with ``registry`` (default registry if None)."""
    await ActionDispatcher(registry).run(page, options, command)


async def run_actions(
    page: PageHandle,
    options: RunOptions,
    commands: Iterable[str],
    registry: ActionRegistry | None = None,
) -> None:
    """Run several action strings in order; the first failure stops the run."""
    await ActionDispatcher(registry).run_all(page, options, commands)


def is_valid_action(command: str, registry: ActionRegistry | None = None) -> bool:
    """Return whether ``command`` matches an action in ``registry``."""
    return ActionDispatcher(registry).is_valid_action(command)
