"""Text-processing helpers: truncation, whitespace and tag removal.

The HTML handling here is regex based and deliberately does not parse
markup. Nested tags, comments and ``>`` inside attribute values can be
stripped incorrectly; callers needing a faithful result should use a real
HTML parser instead.
"""

from __future__ import annotations

import re
from typing import Optional

from ..errors import InvalidArgument
from .guards import is_blank

ELLIPSIS = "..."

_NBSP_ENTITY = "&nbsp;"
_MULTI_WS_RE = re.compile(r"\s\s+")
# Non-greedy and without DOTALL, so a tag split across lines is left in
# place. Accepted limitation of the regex approach; see
# test_tag_spanning_newline_is_left.
_TAG_RE = re.compile(r"</?.+?>")


def truncate(
    text: Optional[str], max_length: int, include_ellipsis: bool = True
) -> Optional[str]:
    """Cut *text* down to *max_length* characters.

    When the text was actually shortened and *include_ellipsis* is set,
    trailing whitespace is dropped from the cut and ``"..."`` is appended,
    so the result can be up to three characters longer than *max_length*.

    Blank input is returned unchanged before *max_length* is checked.
    """
    if is_blank(text):
        return text
    if max_length < 1:
        raise InvalidArgument("max_length may not be less than 1", "max_length")

    truncated = text[: min(len(text), max_length)]
    if include_ellipsis and len(text) > max_length:
        truncated = truncated.rstrip() + ELLIPSIS
    return truncated


def remove_extra_spaces(text: Optional[str]) -> Optional[str]:
    """Turn ``&nbsp;`` into spaces and collapse whitespace runs to one space.

    Example: ``"This is  some    Text"`` becomes ``"This is some Text"``.
    Leading and trailing whitespace is kept (collapsed, not trimmed).
    """
    if text is None:
        return None
    return _MULTI_WS_RE.sub(" ", text.replace(_NBSP_ENTITY, " "))


def strip_html(text: Optional[str]) -> Optional[str]:
    """Remove HTML tags without encoding or unescaping anything."""
    if text is None:
        return None
    return _TAG_RE.sub("", text)
