"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "format_bound"]


def format_bound(value: float) -> str:
    """Render a numeric bound the way it appears in validation messages.

    Integral floats drop their trailing ``.0`` so a bound configured as
    ``10`` or ``10.0`` reads ``10``; other values use the shortest repr.

    Example:
        >>> format_bound(10.0)
        '10'
        >>> format_bound(0.5)
        '0.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Validation messages (attached to engine state)
    # ------------------------------------------------------------------

    @staticmethod
    def digit_cap_exceeded(max_integer_digits: int) -> Diagnostic:
        """Integer digits exceed the configured cap.

        Args:
            max_integer_digits: Configured cap on integer digits

        Returns:
            Diagnostic for DIGIT_CAP_EXCEEDED
        """
        msg = f"Maximum digits is {max_integer_digits}"
        return Diagnostic(
            code=DiagnosticCode.DIGIT_CAP_EXCEEDED,
            message=msg,
            hint="Remove digits before the decimal separator",
        )

    @staticmethod
    def negative_disallowed() -> Diagnostic:
        """Sign toggled while negatives are not permitted.

        Returns:
            Diagnostic for NEGATIVE_DISALLOWED
        """
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_DISALLOWED,
            message="Negative values are not allowed",
            hint="Set allow_negative=True to accept negative amounts",
        )

    @staticmethod
    def below_minimum(minimum_value: float) -> Diagnostic:
        """Value below the configured minimum.

        Args:
            minimum_value: Configured lower bound

        Returns:
            Diagnostic for BELOW_MINIMUM
        """
        msg = f"Value must be >= {format_bound(minimum_value)}"
        return Diagnostic(code=DiagnosticCode.BELOW_MINIMUM, message=msg)

    @staticmethod
    def above_maximum(maximum_value: float) -> Diagnostic:
        """Value above the configured maximum.

        Args:
            maximum_value: Configured upper bound

        Returns:
            Diagnostic for ABOVE_MAXIMUM
        """
        msg = f"Value must be <= {format_bound(maximum_value)}"
        return Diagnostic(code=DiagnosticCode.ABOVE_MAXIMUM, message=msg)

    @staticmethod
    def custom_validation(message: str) -> Diagnostic:
        """Message returned by a caller-supplied validator.

        Args:
            message: Validator output, used verbatim

        Returns:
            Diagnostic for CUSTOM_VALIDATION
        """
        return Diagnostic(code=DiagnosticCode.CUSTOM_VALIDATION, message=message)

    # ------------------------------------------------------------------
    # Configuration errors (raised)
    # ------------------------------------------------------------------

    @staticmethod
    def currency_code_invalid(currency_code: str) -> Diagnostic:
        """Currency code not known to CLDR.

        Args:
            currency_code: The rejected code

        Returns:
            Diagnostic for CURRENCY_CODE_INVALID
        """
        msg = f"Unknown currency code '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_INVALID,
            message=msg,
            hint="Use an ISO 4217 currency code such as USD or EUR",
            input_value=currency_code,
        )

    @staticmethod
    def locale_invalid(locale_code: str, reason: str) -> Diagnostic:
        """Locale could not be resolved.

        Args:
            locale_code: The rejected locale identifier
            reason: Underlying Babel error text

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a BCP 47 tag such as en-US or de-DE",
            input_value=locale_code,
        )

    # ------------------------------------------------------------------
    # Formatting errors (raised)
    # ------------------------------------------------------------------

    @staticmethod
    def formatting_failed(value: object, currency_code: str, reason: str) -> Diagnostic:
        """Babel failed to format a value.

        Args:
            value: Value being formatted
            currency_code: Currency in use
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Currency formatting failed for '{currency_code} {value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            input_value=str(value),
        )
