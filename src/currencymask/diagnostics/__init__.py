"""Diagnostic system for currencymask errors.

Provides structured error diagnostics with codes, categories and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ConfigurationError,
    CurrencyCodeError,
    FormattingError,
    LocaleCodeError,
    MaskError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "CurrencyCodeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "LocaleCodeError",
    "MaskError",
    "OutputFormat",
]
