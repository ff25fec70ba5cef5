"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for diagnostics.

    Categories:
        VALIDATION: Per-keystroke structural or custom validation message
        CONFIGURATION: Unusable currency code or locale (fatal)
        FORMATTING: Locale-aware formatting failure (fatal)
    """

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    FORMATTING = "formatting"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Validation messages (attached to engine state, never raised)
        2000-2999: Configuration errors (raised, fatal)
        3000-3999: Formatting errors (raised, fatal)
    """

    # Validation messages (1000-1999)
    DIGIT_CAP_EXCEEDED = 1001
    NEGATIVE_DISALLOWED = 1002
    BELOW_MINIMUM = 1003
    ABOVE_MAXIMUM = 1004
    CUSTOM_VALIDATION = 1005

    # Configuration errors (2000-2999)
    CURRENCY_CODE_INVALID = 2001
    LOCALE_INVALID = 2002

    # Formatting errors (3000-3999)
    FORMATTING_FAILED = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code range."""
        if self.value < 2000:
            return ErrorCategory.VALIDATION
        if self.value < 3000:
            return ErrorCategory.CONFIGURATION
        return ErrorCategory.FORMATTING


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Offending input (currency code, locale, value), if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def category(self) -> ErrorCategory:
        """Category of this diagnostic's code."""
        return self.code.category

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[CURRENCY_CODE_INVALID]: Unknown currency code 'XYZ'
              = input: XYZ
              = help: Use an ISO 4217 currency code such as USD or EUR

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
