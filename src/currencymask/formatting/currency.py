"""Stateless currency formatting and digits-only parsing.

CurrencyFormatter implements the Formatter protocol with "cents-style"
parsing: every digit in the text counts, scaled by 10**max_fraction_digits,
so typing "1234" reads as 12.34 with two fraction digits. Integer digits past
the cap are dropped from the most-significant end.

The module functions serve read-only displays and callers that already hold
a digit string.

Python 3.13+. Uses Babel for i18n.
"""

from currencymask.core import (
    FormattingOptions,
    ValidationOptions,
    cap_digits,
    clamp_value,
    count_sign_markers,
    decode_digits,
    encode_value,
    strip_to_digits,
)
from currencymask.enums import DisplayMode
from currencymask.runtime import render_digits
from currencymask.validation import ValidationInput, compose_error

from .types import FormatResult, ParseResult

# Read-only displays show whatever sign the value carries
_DISPLAY_VALIDATION = ValidationOptions(allow_negative=True)

__all__ = ["CurrencyFormatter", "format_currency", "parse_currency_from_digits"]


def format_currency(value: float | None, formatting: FormattingOptions) -> str:
    """Format a value for display.

    Args:
        value: Amount, or None
        formatting: Formatting options

    Returns:
        Formatted currency string, or "" for None, NaN and infinities

    Raises:
        CurrencyCodeError: Unknown currency code
        LocaleCodeError: Unknown locale

    Examples:
        >>> format_currency(1234.5, FormattingOptions.create("USD", "en-US"))
        '$1,234.50'
        >>> format_currency(None, FormattingOptions.create("USD", "en-US"))
        ''
    """
    encoded = encode_value(value, formatting.max_fraction_digits)
    return render_digits(
        encoded.digits, encoded.sign, DisplayMode.CURRENCY, formatting, _DISPLAY_VALIDATION
    ).text


def parse_currency_from_digits(
    digits: str,
    formatting: FormattingOptions,
    validation: ValidationOptions | None = None,
    *,
    negative: bool = False,
) -> float | None:
    """Read a value from a string of scaled digits.

    Non-digits are ignored. Excess integer digits are truncated from the
    front, the result is scaled by 10**max_fraction_digits, negated when
    ``negative`` and negatives are allowed, then clamped.

    Args:
        digits: Text whose digits form the scaled value
        formatting: Formatting options (fraction scale)
        validation: Validation options (defaults apply when None)
        negative: Negative intent

    Returns:
        Parsed value, or None when ``digits`` holds no digits

    Examples:
        >>> fmt = FormattingOptions.create("USD")
        >>> parse_currency_from_digits("$12.34", fmt)
        12.34
        >>> parse_currency_from_digits("1234", fmt, ValidationOptions(max_integer_digits=1))
        2.34
    """
    validation = validation if validation is not None else ValidationOptions()
    fraction_digits = formatting.max_fraction_digits
    capped = cap_digits(strip_to_digits(digits), fraction_digits, validation.digit_cap)
    value = decode_digits(
        capped.digits, negative, fraction_digits, allow_negative=validation.allow_negative
    )
    return clamp_value(
        value,
        allow_negative=validation.allow_negative,
        minimum_value=validation.minimum_value,
        maximum_value=validation.maximum_value,
    )


class CurrencyFormatter:
    """Formatter for currency amounts.

    Args:
        formatting: Formatting options
        validation: Validation options (defaults apply when None)
        mode: Display mode

    Examples:
        >>> formatter = CurrencyFormatter(FormattingOptions.create("USD", "en-US"))
        >>> formatter.format(12.5).text
        '$12.50'
        >>> formatter.parse("$1,234").value
        12.34
    """

    __slots__ = ("_formatting", "_mode", "_validation")

    def __init__(
        self,
        formatting: FormattingOptions,
        validation: ValidationOptions | None = None,
        mode: DisplayMode = DisplayMode.CURRENCY,
    ) -> None:
        self._formatting = formatting
        self._validation = validation if validation is not None else ValidationOptions()
        self._mode = DisplayMode.from_mask(mode)

    @property
    def formatting(self) -> FormattingOptions:
        return self._formatting

    @property
    def validation(self) -> ValidationOptions:
        return self._validation

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    def format(self, value: float | None) -> FormatResult:
        """Clamp, encode and render a value."""
        validation = self._validation
        clamped = clamp_value(
            value,
            allow_negative=validation.allow_negative,
            minimum_value=validation.minimum_value,
            maximum_value=validation.maximum_value,
        )
        encoded = encode_value(clamped, self._formatting.max_fraction_digits)
        rendered = render_digits(
            encoded.digits,
            encoded.sign and validation.allow_negative,
            self._mode,
            self._formatting,
            validation,
        )
        return FormatResult(rendered.text, rendered.raw_value)

    def parse(self, text: str) -> ParseResult[float]:
        """Read a value from text, treating every digit as scaled."""
        validation = self._validation
        sign = count_sign_markers(text) % 2 == 1
        capped = cap_digits(
            strip_to_digits(text), self._formatting.max_fraction_digits, validation.digit_cap
        )
        if not capped.digits:
            return ParseResult(value=None, raw_value="")

        value = parse_currency_from_digits(
            capped.digits, self._formatting, validation, negative=sign
        )
        error = compose_error(
            ValidationInput.from_options(
                validation, value=value, sign=sign, was_capped=capped.was_capped
            )
        )
        return ParseResult(value=value, raw_value=capped.digits, error=error)
