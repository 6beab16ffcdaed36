"""PageActions engine — action registry and dispatch.

- ActionDispatcher: resolves an action string and runs the first matching action
- ActionRegistry: ordered action definitions; order is match priority
- ActionDefinition: a named pattern + async handler
- PlaywrightPage: adapts a Playwright async Page to the PageHandle protocol
- RunOptions: options (debug log) passed through to every handler
"""

from pageactions.engine.actions import BUILTIN_ACTIONS, ActionDefinition
from pageactions.engine.dispatcher import ActionDispatcher, is_valid_action, run_action, run_actions
from pageactions.engine.errors import ActionFailedError, PageActionError, UnresolvedActionError
from pageactions.engine.page import PlaywrightPage
from pageactions.engine.protocols import PageHandle, RunOptions
from pageactions.engine.registry import (
    ActionRegistry,
    get_default_registry,
    reset_default_registry,
    set_default_registry,
)

__all__ = [
    "BUILTIN_ACTIONS",
    "ActionDefinition",
    "ActionDispatcher",
    "ActionFailedError",
    "ActionRegistry",
    "PageActionError",
    "PageHandle",
    "PlaywrightPage",
    "RunOptions",
    "UnresolvedActionError",
    "get_default_registry",
    "is_valid_action",
    "reset_default_registry",
    "run_action",
    "run_actions",
    "set_default_registry",
]
