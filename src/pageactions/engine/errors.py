"""Exceptions raised while resolving and running action strings."""

from __future__ import annotations


class PageActionError(Exception):
    """Base class for action dispatch failures."""

    pass


class UnresolvedActionError(PageActionError):
    """Raised when no registered action matches a command string."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f'Failed action: "{command}" cannot be resolved')


class ActionFailedError(PageActionError):
    """Raised when an action cannot find (or act on) its target element.

    Every low-level page failure is reported as a missing element; the
    underlying error is not kept.
    """

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f'Failed action: no element matching selector "{selector}"')
