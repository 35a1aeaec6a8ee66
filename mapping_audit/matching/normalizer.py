"""
Title normalization.

The canonical form produced here is used for equality checks only. It is
shown next to the original title, never in place of it.
"""

from __future__ import annotations

import re

# Anything that is not a Unicode letter or digit. \W excludes underscore,
# so it is added explicitly.
NON_ALNUM_PATTERN = re.compile(r"[\W_]+")
WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_title(value: str) -> str:
    """Return the canonical form of a title.

    Lowercases and strips the text, replaces every run of characters that
    are neither letters nor digits with a single space, then collapses
    whitespace and strips again.

    Args:
        value: The title text.

    Returns:
        Lowercase words separated by single spaces.

    Examples:
        >>> normalize_title("  Hello,  World!! ")
        'hello world'
        >>> normalize_title("Café — 2 Bedrooms")
        'café 2 bedrooms'
        >>> normalize_title("")
        ''
    """
    lowered = value.lower().strip()
    replaced = NON_ALNUM_PATTERN.sub(" ", lowered)
    return WHITESPACE_PATTERN.sub(" ", replaced).strip()
