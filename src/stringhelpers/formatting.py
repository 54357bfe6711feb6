"""
Joining values and formatting numbers.
"""

from __future__ import annotations

from collections.abc import Iterable
from numbers import Integral
from typing import Any

from stringhelpers.builder import TextBuilder
from stringhelpers.defaults import DEFAULT_DELIMITER, GROUP_SEPARATOR, GROUP_SIZE
from stringhelpers.utils.errors import InvalidArgument
from stringhelpers.utils.log import get_logger

logger = get_logger("formatting")


def from_sequence(values: Iterable[Any], delimiter: str = DEFAULT_DELIMITER) -> str:
    """
    Join the string form of each value with ``delimiter``.

    Examples:
        >>> from_sequence([1, 2, 3])
        '1, 2, 3'
        >>> from_sequence(["a", "b"], delimiter="-")
        'a-b'
    """
    return TextBuilder().extend(values, delimiter).build()


def from_values(*values: Any, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Variadic form of `from_sequence`: ``from_values(1, 2, 3) == "1, 2, 3"``."""
    return from_sequence(values, delimiter)


def format_number(
    number: int,
    separator: str = GROUP_SEPARATOR,
    group_size: int = GROUP_SIZE,
) -> str:
    """
    Format an integer with a separator between digit groups.

    Groups are counted from the right; the sign stays in front of the
    grouped magnitude.

    Args:
        number: The integer to format
        separator: Text placed between groups
        group_size: Digits per group, at least 1

    Returns:
        The grouped representation

    Raises:
        InvalidArgument: If ``number`` is not an integer or ``group_size``
            is not positive

    Examples:
        >>> format_number(1000)
        '1,000'
        >>> format_number(-1234567)
        '-1,234,567'
        >>> format_number(100)
        '100'
    """
    if isinstance(number, bool) or not isinstance(number, Integral):
        logger.debug("rejecting non-integer %r", number)
        raise InvalidArgument("must be an integer", argument="number", value=number)
    if group_size < 1:
        logger.debug("rejecting non-positive group size %r", group_size)
        raise InvalidArgument("must be positive", argument="group_size", value=group_size)

    digits = str(abs(int(number)))
    head = len(digits) % group_size or group_size

    groups = [digits[:head]]
    for start in range(head, len(digits), group_size):
        groups.append(digits[start : start + group_size])

    sign = "-" if number < 0 else ""
    return sign + separator.join(groups)
