"""
Error types for the stringhelpers library.
"""

from typing import Any, Optional

_MISSING = object()


class StringHelpersError(Exception):
    """Base exception for all stringhelpers errors."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = _MISSING,
    ) -> None:
        self.message = message
        self.argument = argument
        self.value = None if value is _MISSING else value
        self._has_value = value is not _MISSING
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.argument:
            if self._has_value:
                parts.append(f"[{self.argument}={self.value!r}]")
            else:
                parts.append(f"[{self.argument}]")

        parts.append(self.message)

        return " ".join(parts)


class InvalidArgument(StringHelpersError, ValueError):
    """
    Raised when a documented precondition of an operation is violated.

    This error is raised when:
    - A search, count or split key is empty
    - An alignment fill is empty or the target is shorter than the text
    - An ``all_*`` predicate receives an empty string
    - A repeat amount is negative
    - An alignment name is unknown
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = _MISSING,
        suggestions: Optional[list[str]] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error message
            argument: Name of the offending parameter
            value: The rejected value
            suggestions: Close valid values, rendered as a "did you mean" hint
        """
        self.suggestions = suggestions or []
        super().__init__(message, argument, value)

    def _format_message(self) -> str:
        message = super()._format_message()

        if self.suggestions:
            quoted = ", ".join(f"`{s}`" for s in self.suggestions)
            message += f"\n  help: did you mean {quoted}?"

        return message
