"""
stringhelpers - Pure string manipulation helpers.

Alignment and repetition, substring search and counting, ASCII case
classification, splitting and joining, stripping, replacement,
digit/letter filtering and grouped-digit number formatting. Every
function is a pure transformation of its arguments; precondition
violations raise `InvalidArgument`.
"""

from stringhelpers.align import Alignment, align, multiply
from stringhelpers.builder import TextBuilder
from stringhelpers.classify import (
    all_alphabetical,
    all_lowercase,
    all_nums,
    all_spaces,
    all_uppercase,
)
from stringhelpers.formatting import format_number, from_sequence, from_values
from stringhelpers.keys import Char, Key
from stringhelpers.search import (
    NOT_FOUND,
    count,
    ends_with,
    find,
    find_first,
    find_last,
    find_last_of,
    is_in,
    starts_with,
)
from stringhelpers.split import split, split_alphabetical, split_lines
from stringhelpers.transform import (
    capitalize,
    remove_alphabetical,
    remove_nums,
    replace,
    strip,
    swap_cases,
)
from stringhelpers.utils import (
    InvalidArgument,
    StringHelpersError,
    configure_logging,
)

__version__ = "0.1.0"
__all__ = [
    # Keys
    "Char",
    "Key",
    # Repetition & alignment
    "Alignment",
    "align",
    "multiply",
    # Search & counting
    "NOT_FOUND",
    "count",
    "is_in",
    "find",
    "find_first",
    "find_last",
    "find_last_of",
    "starts_with",
    "ends_with",
    # Classification
    "all_nums",
    "all_alphabetical",
    "all_lowercase",
    "all_uppercase",
    "all_spaces",
    # Splitting
    "split",
    "split_lines",
    "split_alphabetical",
    # Transformation
    "capitalize",
    "strip",
    "swap_cases",
    "replace",
    "remove_nums",
    "remove_alphabetical",
    # Joining & formatting
    "TextBuilder",
    "from_sequence",
    "from_values",
    "format_number",
    # Errors
    "StringHelpersError",
    "InvalidArgument",
    # Logging
    "configure_logging",
]
