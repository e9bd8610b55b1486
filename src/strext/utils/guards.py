"""Null-safety predicates and fallback helpers.

``None`` and ``""`` are both treated as "no value". Whitespace-only
strings are values.
"""

from __future__ import annotations

from typing import Any, Optional

from ..errors import InvalidArgument

NA_PLACEHOLDER = "N/A"


def is_blank(value: Optional[str]) -> bool:
    """Return True when *value* is ``None`` or empty."""
    return value is None or len(value) == 0


def is_present(value: Optional[str]) -> bool:
    return not is_blank(value)


def with_default(value: Optional[str], fallback: Optional[str]) -> Optional[str]:
    """Return *value* when present, otherwise *fallback*."""
    return value if is_present(value) else fallback


def with_na_default(value: Optional[str]) -> Optional[str]:
    return with_default(value, NA_PLACEHOLDER)


def not_contains(source: Any, *candidates: Any) -> bool:
    """Return True when *source* equals none of *candidates*.

    Raises :class:`InvalidArgument` for a ``None`` source, since "is None
    absent from the list" is almost always a caller bug.
    """
    if source is None:
        raise InvalidArgument("source may not be None", "source")
    return source not in candidates
