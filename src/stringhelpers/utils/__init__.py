"""
stringhelpers Utilities Package.

Error types, "did you mean" diagnostics and logging setup.
"""

from stringhelpers.utils.diagnostics import levenshtein_distance, suggest_similar
from stringhelpers.utils.errors import InvalidArgument, StringHelpersError
from stringhelpers.utils.log import configure_logging, get_logger

__all__ = [
    # Errors
    "StringHelpersError",
    "InvalidArgument",
    # String similarity utilities
    "levenshtein_distance",
    "suggest_similar",
    # Logging
    "configure_logging",
    "get_logger",
]
