"""Ordered action registry and the process-wide default."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from pageactions.engine.actions import BUILTIN_ACTIONS, ActionDefinition

logger = logging.getLogger("pageactions.engine.registry")


class ActionRegistry:
    """Immutable, ordered collection of action definitions.

    Registration order is match priority: ``find()`` returns the first
    definition whose pattern matches, so a specific pattern must come before
    a general one that would also match.
    """

    def __init__(self, actions: Iterable[ActionDefinition] = ()) -> None:
        self._actions: tuple[ActionDefinition, ...] = tuple(actions)

    def __iter__(self) -> Iterator[ActionDefinition]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        names = ", ".join(a.name for a in self._actions)
        return f"ActionRegistry([{names}])"

    @property
    def actions(self) -> tuple[ActionDefinition, ...]:
        return self._actions

    def find(self, command: str) -> ActionDefinition | None:
        """Return the first action matching ``command``, or None."""
        for action in self._actions:
            if action.matches(command):
                return action
        return None

    def get(self, name: str) -> ActionDefinition:
        """Look up an action by name. Raises KeyError when unknown."""
        for action in self._actions:
            if action.name == name:
                return action
        raise KeyError(name)

    def with_actions(self, *actions: ActionDefinition, prepend: bool = False) -> ActionRegistry:
        """Return a new registry with ``actions`` added at the end (or the front)."""
        if prepend:
            return ActionRegistry((*actions, *self._actions))
        return ActionRegistry((*self._actions, *actions))


# -- Process-wide default ----------------------------------------------------

_default_registry = ActionRegistry(BUILTIN_ACTIONS)


def get_default_registry() -> ActionRegistry:
    """Return the registry used when a dispatcher is not given one."""
    return _default_registry


def set_default_registry(registry: ActionRegistry) -> None:
    """Replace the process-wide default registry."""
    global _default_registry
    logger.debug("Replacing default action registry with %r", registry)
    _default_registry = registry


def reset_default_registry() -> None:
    """Restore the built-in actions as the default registry."""
    set_default_registry(ActionRegistry(BUILTIN_ACTIONS))
