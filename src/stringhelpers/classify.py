"""
Whole-string classification predicates.

Each predicate is true only when every character belongs to its ASCII
class. The empty string is rejected rather than treated as vacuously
true.
"""

from __future__ import annotations

from collections.abc import Callable

from stringhelpers import chars
from stringhelpers.keys import require_text


def _all(text: str, predicate: Callable[[str], bool]) -> bool:
    require_text(text)
    return all(predicate(ch) for ch in text)


def all_nums(text: str) -> bool:
    """
    Check that every character is an ASCII digit.

    Raises:
        InvalidArgument: If ``text`` is empty
    """
    return _all(text, chars.is_digit)


def all_alphabetical(text: str) -> bool:
    """
    Check that every character is an ASCII letter.

    Raises:
        InvalidArgument: If ``text`` is empty
    """
    return _all(text, chars.is_alpha)


def all_lowercase(text: str) -> bool:
    """Check that every character is a lowercase ASCII letter."""
    return _all(text, chars.is_lower)


def all_uppercase(text: str) -> bool:
    """Check that every character is an uppercase ASCII letter."""
    return _all(text, chars.is_upper)


def all_spaces(text: str) -> bool:
    """Check that every character is ASCII whitespace."""
    return _all(text, chars.is_space)
