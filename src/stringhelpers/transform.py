"""
String transformations.

Every function returns a new string; case handling is ASCII only.
"""

from __future__ import annotations

from stringhelpers import chars
from stringhelpers.align import multiply
from stringhelpers.defaults import STRIP_CHARS
from stringhelpers.keys import Key, key_text


def capitalize(text: str) -> str:
    """
    Upper-case the first character of ``text``.

    Unlike ``str.capitalize`` the rest of the string is left alone.

    Examples:
        >>> capitalize("test")
        'Test'
        >>> capitalize("")
        ''
    """
    if not text:
        return text
    return chars.to_upper(text[0]) + text[1:]


def strip(text: str) -> str:
    """Remove leading and trailing spaces, tabs and newlines."""
    return text.strip(STRIP_CHARS)


def swap_cases(text: str) -> str:
    """
    Invert the case of every ASCII letter.

    Examples:
        >>> swap_cases("TeSt1")
        'tEsT1'
    """
    return chars.swap_case(text)


def replace(text: str, old: Key, new: Key) -> str:
    """
    Replace every non-overlapping occurrence of ``old`` with ``new``.

    Matches are taken left to right and scanning resumes after each
    inserted replacement, so a ``new`` containing ``old`` is never
    re-matched. An empty ``old`` yields ``new`` repeated once per
    character of ``text``.

    Examples:
        >>> replace("test", "t", "x")
        'xesx'
        >>> replace("test", "", "x")
        'xxxx'
    """
    old = key_text(old)
    new = key_text(new)

    if not old:
        return multiply(new, len(text))

    return text.replace(old, new)


def remove_nums(text: str) -> str:
    """Delete every ASCII digit from ``text``."""
    return "".join(ch for ch in text if not chars.is_digit(ch))


def remove_alphabetical(text: str) -> str:
    """Delete every ASCII letter from ``text``."""
    return "".join(ch for ch in text if not chars.is_alpha(ch))
