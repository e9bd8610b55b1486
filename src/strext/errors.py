"""Error kinds raised by the string helpers.

Both subclass :class:`ValueError`, so callers that already guard string
handling with ``except ValueError`` keep working.
"""

from __future__ import annotations


class StrextError(ValueError):
    """Base class for every error raised by :mod:`strext`."""


class InvalidArgument(StrextError):
    """A call argument is outside the range the helper accepts."""

    def __init__(self, message: str, argument: str) -> None:
        super().__init__(message)
        self.argument = argument


class InvalidPattern(StrextError):
    """A wildcard pattern does not translate to a usable expression."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"Invalid pattern: {pattern}")
        self.pattern = pattern
