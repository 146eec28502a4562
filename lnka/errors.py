"""Exception hierarchy shared by the selection UI, resolver, and session layer."""

from __future__ import annotations


class LnkaError(Exception):
    """Base class for errors raised by lnka itself."""


class PathResolutionError(LnkaError, ValueError):
    """A link target could not be computed for one item."""


class EmptySelectionError(LnkaError):
    """The selection list was launched without any items to show."""


class UserAbortError(LnkaError):
    """The user left an interactive prompt with a quit key.

    Not a failure: callers skip the remaining work instead of reporting it.
    """

    def __init__(self, message: str = "user aborted") -> None:
        super().__init__(message)
