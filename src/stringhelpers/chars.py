"""
ASCII character classes.

These mirror the C ``<ctype.h>`` classifiers in the default locale, so
``"²"`` is not a digit and ``"é"`` is not a letter, unlike the Unicode
aware ``str.isdigit`` and ``str.isalpha``.
"""

import string

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
LOWERCASE = frozenset(string.ascii_lowercase)
UPPERCASE = frozenset(string.ascii_uppercase)
SPACES = frozenset(" \t\n\v\f\r")

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SWAP_CASE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def is_alpha(ch: str) -> bool:
    return ch in LETTERS


def is_lower(ch: str) -> bool:
    return ch in LOWERCASE


def is_upper(ch: str) -> bool:
    return ch in UPPERCASE


def is_space(ch: str) -> bool:
    """Check for ``' '``, ``'\\t'``, ``'\\n'``, ``'\\v'``, ``'\\f'`` or ``'\\r'``."""
    return ch in SPACES


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving everything else untouched."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving everything else untouched."""
    return text.translate(_TO_LOWER)


def swap_case(text: str) -> str:
    """Invert the case of ASCII letters."""
    return text.translate(_SWAP_CASE)
