"""
Search, split and replace keys.

A key is either a `Char`, a ``str`` subclass holding exactly one
character, or a plain ``str`` (the text form). Operations whose edge-case
contract differs between the two forms (``starts_with``, ``ends_with``,
``split``) dispatch on `is_char`; every other operation treats a `Char`
as a one-character string.
"""

from __future__ import annotations

from typing import Union

from stringhelpers.utils.errors import InvalidArgument
from stringhelpers.utils.log import get_logger

logger = get_logger("keys")


class Char(str):
    """
    A single-character key.

    Examples:
        >>> Char(".")
        Char('.')
        >>> Char("ab")
        Traceback (most recent call last):
        ...
        stringhelpers.utils.errors.InvalidArgument: [char='ab'] must be exactly one character
    """

    __slots__ = ()

    def __new__(cls, value: str) -> "Char":
        if not isinstance(value, str) or len(value) != 1:
            logger.debug("rejecting invalid char %r", value)
            raise InvalidArgument("must be exactly one character", argument="char", value=value)
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"Char({str.__repr__(self)})"


Key = Union[Char, str]


def is_char(key: Key) -> bool:
    """Return True if ``key`` uses the single-character form."""
    return isinstance(key, Char)


def key_text(key: Key) -> str:
    """Return ``key`` as a plain string."""
    return str(key)


def require_key(key: Key, argument: str = "key") -> str:
    """
    Return ``key`` as a plain string, rejecting the empty string.

    Raises:
        InvalidArgument: If ``key`` is empty
    """
    text = key_text(key)
    if not text:
        logger.debug("rejecting empty %s", argument)
        raise InvalidArgument("cannot be empty", argument=argument, value=text)
    return text


def require_text(text: str, argument: str = "string") -> str:
    """
    Return ``text`` unchanged, rejecting the empty string.

    Raises:
        InvalidArgument: If ``text`` is empty
    """
    if not text:
        logger.debug("rejecting empty %s", argument)
        raise InvalidArgument("cannot be empty", argument=argument, value=text)
    return text
