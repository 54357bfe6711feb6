"""
Mutable text buffer.

`TextBuilder` collects pieces in a list and joins them once in `build`,
the usual way to assemble a string from many parts without quadratic
concatenation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class TextBuilder:
    """
    Accumulates text pieces and joins them on demand.

    Examples:
        >>> builder = TextBuilder()
        >>> builder.append("a").append(1).build()
        'a1'
        >>> TextBuilder().extend([1, 2, 3], delimiter=", ").build()
        '1, 2, 3'
    """

    def __init__(self, initial: str = "") -> None:
        self._parts: list[str] = []
        self._length = 0
        if initial:
            self.append(initial)

    def append(self, value: Any) -> TextBuilder:
        """Append ``str(value)``."""
        text = value if isinstance(value, str) else str(value)
        if text:
            self._parts.append(text)
            self._length += len(text)
        return self

    def extend(self, values: Iterable[Any], delimiter: str = "") -> TextBuilder:
        """Append every value, with ``delimiter`` between consecutive values."""
        first = True
        for value in values:
            if not first:
                self.append(delimiter)
            self.append(value)
            first = False
        return self

    def build(self) -> str:
        """Return the accumulated text."""
        if len(self._parts) > 1:
            # Collapse so repeated builds stay cheap
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def clear(self) -> None:
        self._parts = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"TextBuilder({self.build()!r})"
