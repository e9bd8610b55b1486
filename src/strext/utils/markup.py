"""Lightweight markup helpers: image sources and anchor rendering."""

from __future__ import annotations

import re
from typing import List, Optional

from ..schemas import Hyperlink
from .guards import is_blank

# src value may be quoted with ' or " or not at all, and must be followed
# by a space or a closing quote.
_IMG_SRC_RE = re.compile(
    r"""<img[^>]*?src\s*=\s*["']?([^'" >]+?)[ '"][^>]*?>""",
    re.IGNORECASE | re.DOTALL,
)


def first_image_src(html_source: Optional[str]) -> str:
    """Return the ``src`` of the first ``<img>`` tag, or ``""`` if none."""
    if is_blank(html_source):
        return ""
    match = _IMG_SRC_RE.search(html_source)
    if match is None:
        return ""
    return match.group(1)


def image_srcs(html_source: Optional[str]) -> List[str]:
    """Return every ``<img>`` ``src`` value in document order."""
    if is_blank(html_source):
        return []
    return [match.group(1) for match in _IMG_SRC_RE.finditer(html_source)]


def to_hyperlink_html(
    link: Optional[str],
    text: Optional[str] = "",
    open_in_new_tab: bool = False,
) -> str:
    """Render ``<a href='link'>text</a>``, falling back to *link* as the text.

    No escaping is applied to either value.
    """
    return Hyperlink(
        href=link or "",
        text=text or "",
        open_in_new_tab=open_in_new_tab,
    ).to_html()
