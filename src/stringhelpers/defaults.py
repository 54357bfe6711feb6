"""
Library-wide defaults for stringhelpers.

These are plain constants; the library reads no configuration files or
environment variables.
"""

STRIP_CHARS = " \t\n"
"""Characters removed by `stringhelpers.transform.strip`."""

DEFAULT_DELIMITER = ", "
"""Delimiter placed between elements by the join helpers."""

DEFAULT_FILL = " "
"""Padding used by `stringhelpers.align.align` when no fill is given."""

GROUP_SEPARATOR = ","
"""Text placed between digit groups by `stringhelpers.formatting.format_number`."""

GROUP_SIZE = 3
"""Digits per group in `stringhelpers.formatting.format_number`."""

LOGGER_NAME = "stringhelpers"
"""Name of the package logger; module loggers are its children."""

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""Record format installed by `stringhelpers.utils.log.configure_logging`."""
