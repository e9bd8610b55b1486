"""Stateless string helpers.

Submodules:
- ``utils.guards``: blank checks and default-value fallbacks
- ``utils.text``: truncation, whitespace collapsing, tag stripping
- ``utils.markup``: ``<img>`` source extraction and anchor rendering
- ``utils.wildcard``: ``?``/``*``/``#``/``[...]`` wildcard matching
"""

from .errors import InvalidArgument, InvalidPattern, StrextError
from .schemas import Hyperlink
from .utils.guards import (
    NA_PLACEHOLDER,
    is_blank,
    is_present,
    not_contains,
    with_default,
    with_na_default,
)
from .utils.markup import first_image_src, image_srcs, to_hyperlink_html
from .utils.text import ELLIPSIS, remove_extra_spaces, strip_html, truncate
from .utils.wildcard import configure_pattern_cache, is_like, translate_wildcard

__all__ = [
    "ELLIPSIS",
    "NA_PLACEHOLDER",
    "Hyperlink",
    "InvalidArgument",
    "InvalidPattern",
    "StrextError",
    "configure_pattern_cache",
    "first_image_src",
    "image_srcs",
    "is_blank",
    "is_like",
    "is_present",
    "not_contains",
    "remove_extra_spaces",
    "strip_html",
    "to_hyperlink_html",
    "translate_wildcard",
    "truncate",
    "with_default",
    "with_na_default",
]
