"""Exception hierarchy with structured diagnostics.

Per-keystroke validation problems are never raised; they travel as strings on
the engine state. The exceptions here cover configuration that the engine
cannot recover from (unknown currency code, unknown locale) and unexpected
formatter failures.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MaskError(Exception):
    """Base exception for all currencymask errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MaskError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(MaskError):
    """Options describe something the formatter cannot honor.

    Surfaced unchanged to the caller; the engine does not fall back.
    """


class CurrencyCodeError(ConfigurationError):
    """Currency code is not a CLDR/ISO 4217 currency.

    Attributes:
        currency_code: The rejected code
    """

    def __init__(self, message: str | Diagnostic, *, currency_code: str = "") -> None:
        super().__init__(message)
        self.currency_code = currency_code


class LocaleCodeError(ConfigurationError):
    """Locale identifier is malformed or unknown to CLDR.

    Attributes:
        locale_code: The rejected locale identifier
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class FormattingError(MaskError):
    """Raised when locale-aware currency formatting fails for a valid configuration."""
