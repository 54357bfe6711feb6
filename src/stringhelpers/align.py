"""
Repetition and alignment.

`align` pads with whole repetitions of the fill only. When the fill does
not divide the pad amount, or when centering an odd amount, the result
comes out shorter than the requested width.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from stringhelpers.defaults import DEFAULT_FILL
from stringhelpers.keys import Key, require_key
from stringhelpers.utils.diagnostics import suggest_similar
from stringhelpers.utils.errors import InvalidArgument
from stringhelpers.utils.log import get_logger

logger = get_logger("align")


class Alignment(Enum):
    """Which side(s) of the text receive the fill."""

    LEFT = "left"  # Fill before the text (right-justified output)
    CENTER = "center"
    RIGHT = "right"  # Fill after the text

    @classmethod
    def parse(cls, value: Union[Alignment, str]) -> Alignment:
        """
        Resolve an `Alignment` from a member or a case-insensitive name.

        Raises:
            InvalidArgument: If ``value`` names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass

        logger.debug("rejecting unknown alignment %r", value)
        names = [member.value for member in cls]
        raise InvalidArgument(
            "unknown alignment",
            argument="alignment",
            value=value,
            suggestions=suggest_similar(str(value), names),
        )


def multiply(text: str, amount: int) -> str:
    """
    Repeat ``text`` ``amount`` times.

    Args:
        text: The string to repeat
        amount: Number of repetitions, zero or more

    Returns:
        The concatenated repetitions, ``""`` when either is empty or zero

    Raises:
        InvalidArgument: If ``amount`` is negative

    Examples:
        >>> multiply("ab", 3)
        'ababab'
        >>> multiply("ab", 0)
        ''
    """
    if amount < 0:
        logger.debug("rejecting negative repeat amount %d", amount)
        raise InvalidArgument("cannot be negative", argument="amount", value=amount)

    return text * amount


def align(
    text: str,
    alignment: Union[Alignment, str],
    target_len: int,
    fill: Key = DEFAULT_FILL,
) -> str:
    """
    Pad ``text`` towards ``target_len`` with repetitions of ``fill``.

    The fill is repeated ``(target_len - len(text)) // len(fill)`` times.
    For `Alignment.CENTER` that count is halved again and placed on both
    sides, so an odd remainder is dropped.

    Args:
        text: The string to pad
        alignment: An `Alignment` or its name
        target_len: Desired width, at least ``len(text)``
        fill: Non-empty padding material

    Returns:
        The padded string

    Raises:
        InvalidArgument: If ``fill`` is empty, ``target_len`` is shorter
            than ``text`` or ``alignment`` is unknown

    Examples:
        >>> align("test", Alignment.LEFT, 7, "*")
        '***test'
        >>> align("test", "center", 9, "*")
        '**test**'
    """
    fill = require_key(fill, "fill")
    alignment = Alignment.parse(alignment)

    if target_len < len(text):
        logger.debug("rejecting target length %d shorter than text length %d", target_len, len(text))
        raise InvalidArgument(
            f"cannot be shorter than the text ({len(text)})",
            argument="target_len",
            value=target_len,
        )

    repeats = (target_len - len(text)) // len(fill)

    if alignment is Alignment.LEFT:
        return multiply(fill, repeats) + text
    if alignment is Alignment.RIGHT:
        return text + multiply(fill, repeats)

    padding = multiply(fill, repeats // 2)
    return padding + text + padding
