"""Wildcard matching in the style of VB's ``Like`` operator.

Supported syntax:

- ``?``      any single character
- ``*``      zero or more characters
- ``#``      a single digit
- ``[abc]``  a character class (ranges such as ``[a-z]`` work)
- ``[!abc]`` a negated character class

Every other character matches itself. Matching is case-sensitive and
always covers the whole subject string.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Callable, Optional, Pattern

from ..config import Settings, get_settings, validate_settings
from ..errors import InvalidPattern
from .guards import is_blank

logger = logging.getLogger(__name__)

# Applied to the re.escape()d pattern, in this order. "\[!" must run
# before "\[" or negated classes would come out as "[!".
_ESCAPED_TOKENS = (
    (r"\[!", "[^"),
    (r"\[", "["),
    (r"\]", "]"),
    (r"\?", "."),
    (r"\*", ".*"),
    (r"\#", r"\d"),
    # re.escape also escapes "-"; undo it so class ranges keep working.
    (r"\-", "-"),
)


def translate_wildcard(pattern: str) -> str:
    """Translate a wildcard *pattern* into a regular expression string.

    The result is unanchored; :func:`is_like` matches it against the full
    subject.
    """
    regex = re.escape(pattern)
    for escaped, replacement in _ESCAPED_TOKENS:
        regex = regex.replace(escaped, replacement)
    return regex


def _compile(pattern: str) -> Pattern[str]:
    regex = translate_wildcard(pattern)
    logger.debug("Translated wildcard %r to %r", pattern, regex)
    try:
        return re.compile(regex)
    except re.error as exc:
        raise InvalidPattern(pattern) from exc


_cached_compile: Optional[Callable[[str], Pattern[str]]] = None


def configure_pattern_cache(settings: Optional[Settings] = None):
    """(Re)build the compiled-pattern cache, sized by ``wildcard_cache_size``.

    :func:`is_like` calls this on first use with :func:`get_settings`, so a
    bad ``STREXT_WILDCARD_CACHE_SIZE`` surfaces there as a ``ValueError``
    naming the variable. Returns the cached compile function.
    """
    global _cached_compile
    settings = validate_settings(settings or get_settings())
    _cached_compile = lru_cache(maxsize=settings.wildcard_cache_size)(_compile)
    return _cached_compile


def is_like(text: Optional[str], pattern: Optional[str]) -> bool:
    """Return True when the whole of *text* matches the wildcard *pattern*.

    ``None`` text and blank patterns never match. Raises
    :class:`~strext.errors.InvalidPattern` when the pattern cannot be
    compiled, e.g. an unclosed ``[``.
    """
    if text is None or is_blank(pattern):
        return False
    compile_pattern = _cached_compile or configure_pattern_cache()
    return compile_pattern(pattern).fullmatch(text) is not None
