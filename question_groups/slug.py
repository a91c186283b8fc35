"""Slugs for question identifiers."""

from __future__ import annotations

import re

from slugify import slugify as _slugify

# Symbols spelled out as words before slugging
CHAR_MAP = [
    ("&", "and"),
    ("$", "dollar"),
    ("%", "percent"),
    ("<", "less"),
    (">", "greater"),
    ("|", "or"),
    ("¢", "cent"),
    ("£", "pound"),
    ("¥", "yen"),
    ("€", "euro"),
    ("©", "(c)"),
    ("®", "(r)"),
    ("™", "tm"),
]

# Dropped outright, so "foo?bar" stays one word
_REMOVED = re.compile(r"[^\w\s*+~.()'\"!:@&$%<>|¢£¥€©®™-]+")

# Anything outside this set becomes a separator
_SEPARATORS = r"[^-A-Za-z0-9_*+~.()\"!:@]+"


def slugify(text: str, lower: bool = True) -> str:
    """Convert free text into a URL-safe slug.

    Accents are folded to ASCII, a few symbols are spelled out and runs of
    whitespace or hyphens collapse to a single hyphen.

    Example:
        >>> slugify("Node.js - what is it?")
        'node.js-what-is-it'
        >>> slugify("Tom & Jerry")
        'tom-and-jerry'
    """
    return _slugify(
        _REMOVED.sub("", text),
        replacements=CHAR_MAP,
        regex_pattern=_SEPARATORS,
        lowercase=lower,
    )
