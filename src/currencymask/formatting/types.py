"""Formatter protocol and result types.

A Formatter converts between a typed value and display text. Any object
with matching ``format`` and ``parse`` methods qualifies (structural typing),
so MaskedInputSession can drive currency, percentage or custom masks alike.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Protocol

__all__ = ["FormatResult", "Formatter", "ParseResult"]


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Display text and the machine-readable value it was rendered from."""

    text: str
    raw_value: str


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Outcome of reading display text.

    Attributes:
        value: Parsed value, or None when the text holds none
        raw_value: Machine-readable echo of the parsed input
        error: Validation message, or None
    """

    value: T | None
    raw_value: str
    error: str | None = None


class Formatter[T](Protocol):
    """Protocol for two-way value formatters."""

    def format(self, value: T | None) -> FormatResult:
        """Render a value (None renders empty text)."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def parse(self, text: str) -> ParseResult[T]:
        """Read a value from display text."""
        ...  # pragma: no cover  # Protocol stub - not executable
