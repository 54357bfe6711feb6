"""
Substring search and counting.

All matching is non-overlapping: after a match, scanning resumes at the
end of that match, so ``count("aaaa", "aa") == 2``. Offsets are 0-based
and ``-1`` means "not found".
"""

from __future__ import annotations

from collections.abc import Iterator

from stringhelpers.keys import Key, is_char, key_text, require_key, require_text

NOT_FOUND = -1


def _iter_matches(text: str, key: str) -> Iterator[int]:
    """Yield the start of every non-overlapping occurrence of ``key``."""
    pos = text.find(key)
    while pos != NOT_FOUND:
        yield pos
        pos = text.find(key, pos + len(key))


def count(text: str, key: Key) -> int:
    """
    Count non-overlapping occurrences of ``key`` in ``text``.

    Raises:
        InvalidArgument: If ``key`` is empty

    Examples:
        >>> count("test", "t")
        2
        >>> count("aaaa", "aa")
        2
    """
    key = require_key(key)
    return sum(1 for _ in _iter_matches(text, key))


def is_in(text: str, key: Key) -> bool:
    """Check whether ``key`` occurs in ``text``."""
    return count(text, key) != 0


def find(text: str, key: Key) -> list[int]:
    """
    Return the offsets of all non-overlapping occurrences, ascending.

    Raises:
        InvalidArgument: If ``key`` is empty

    Examples:
        >>> find("test", "t")
        [0, 3]
        >>> find("aaaa", "aa")
        [0, 2]
    """
    key = require_key(key)
    return list(_iter_matches(text, key))


def find_first(text: str, key: Key) -> int:
    """Offset of the first occurrence of ``key``, or -1."""
    key = require_key(key)
    return text.find(key)


def find_last(text: str, key: Key) -> int:
    """
    Offset of the last occurrence of ``key`` as a whole substring, or -1.

    Examples:
        >>> find_last("test", "t")
        3
        >>> find_last("testes", "es")
        4
    """
    key = require_key(key)
    return text.rfind(key)


def find_last_of(text: str, key: Key) -> int:
    """
    Offset of the last character of ``text`` that appears anywhere in ``key``.

    Unlike `find_last`, ``key`` is a set of characters rather than a
    substring: ``find_last_of("test", "es")`` is 2, the final ``s``.
    """
    chars = set(require_key(key))
    for pos in range(len(text) - 1, -1, -1):
        if text[pos] in chars:
            return pos
    return NOT_FOUND


def starts_with(text: str, key: Key) -> bool:
    """
    Check whether ``text`` begins with ``key``.

    A `Char` key requires non-empty ``text``. A string key matches
    vacuously when empty and never matches when longer than ``text``.

    Raises:
        InvalidArgument: If ``key`` is a `Char` and ``text`` is empty
    """
    if is_char(key):
        require_text(text)
        return text[0] == key

    prefix = key_text(key)
    if len(prefix) > len(text):
        return False
    return text[: len(prefix)] == prefix


def ends_with(text: str, key: Key) -> bool:
    """
    Check whether ``text`` ends with ``key``.

    Same edge-case rules as `starts_with`.

    Raises:
        InvalidArgument: If ``key`` is a `Char` and ``text`` is empty
    """
    if is_char(key):
        require_text(text)
        return text[-1] == key

    suffix = key_text(key)
    if len(suffix) > len(text):
        return False
    return text[len(text) - len(suffix) :] == suffix
