"""
Splitting strings into segments.

`split` has two variants chosen by the delimiter's key form:

- `Char` delimiter: token-stream semantics. An empty string yields no
  segments and a trailing delimiter does not produce a final empty
  segment.
- ``str`` delimiter: substring-scan semantics. The delimiter must be
  non-empty, every segment between delimiters is kept and the remainder
  after the last delimiter is kept only if it is non-empty.

Both variants return the same segments whenever both can be applied.
"""

from __future__ import annotations

from stringhelpers import chars
from stringhelpers.keys import Char, Key, is_char, require_key
from stringhelpers.search import NOT_FOUND

NEWLINE = Char("\n")


def _split_tokens(text: str, delimiter: str) -> list[str]:
    if not text:
        return []

    segments = text.split(delimiter)
    if segments[-1] == "":
        segments.pop()
    return segments


def _split_scan(text: str, delimiter: str) -> list[str]:
    segments = []
    start = 0
    end = text.find(delimiter, start)
    while end != NOT_FOUND:
        segments.append(text[start:end])
        start = end + len(delimiter)
        end = text.find(delimiter, start)

    if text[start:]:
        segments.append(text[start:])

    return segments


def split(text: str, delimiter: Key) -> list[str]:
    """
    Split ``text`` on every occurrence of ``delimiter``.

    Args:
        text: The string to split
        delimiter: A `Char` or a non-empty string

    Returns:
        The segments, in order; consecutive delimiters give empty segments

    Raises:
        InvalidArgument: If ``delimiter`` is an empty string

    Examples:
        >>> split("test.test", Char("."))
        ['test', 'test']
        >>> split("...", ".")
        ['', '', '']
        >>> split("test", "es")
        ['t', 't']
    """
    if is_char(delimiter):
        return _split_tokens(text, delimiter)
    return _split_scan(text, require_key(delimiter, "delimiter"))


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``"\\n"``."""
    return split(text, NEWLINE)


def split_alphabetical(text: str) -> list[str]:
    """
    Return the runs of ASCII digits in ``text``.

    Any non-digit character separates runs. When ``text`` holds no digit
    at all, the result is one empty string per character, matching what
    `split` returns for a string made only of delimiters.

    Examples:
        >>> split_alphabetical("12.34")
        ['12', '34']
        >>> split_alphabetical("abc")
        ['', '', '']
    """
    runs = []
    start = None
    for pos, ch in enumerate(text):
        if chars.is_digit(ch):
            if start is None:
                start = pos
        elif start is not None:
            runs.append(text[start:pos])
            start = None

    if start is not None:
        runs.append(text[start:])

    if not runs:
        return [""] * len(text)

    return runs
