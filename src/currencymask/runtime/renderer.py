"""Digit rendering for both display modes.

Two entry points share one output type:

- render_digits: programmatic rendering of a scaled digit string (the value
  path). Fraction digits follow the configured minimum/maximum.
- render_typed: text-preserving rendering of what the user typed. Fraction
  digits follow what was typed, and a trailing decimal separator survives so
  "12." stays on screen until the next keystroke.

Python 3.13+. Uses Babel for i18n.
"""

from dataclasses import dataclass
from decimal import Decimal

from currencymask.constants import RAW_NEGATIVE_PREFIX
from currencymask.core import (
    FormattingOptions,
    ValidationOptions,
    clamp_value,
    decode_digits,
)
from currencymask.enums import DisplayMode

from .locale_context import LocaleContext, get_decimal_separator

__all__ = [
    "InputSymbols",
    "RenderResult",
    "input_symbols",
    "render_digits",
    "render_typed",
]


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Rendered field text and the machine-readable digit echo.

    Attributes:
        text: Display text for the field
        raw_value: Digit string the text was rendered from
    """

    text: str
    raw_value: str


@dataclass(frozen=True, slots=True)
class InputSymbols:
    """Locale symbols the sanitizer needs to read keystroke text."""

    decimal_separator: str
    minus_sign: str = RAW_NEGATIVE_PREFIX
    currency_symbol: str | None = None


def input_symbols(mode: DisplayMode, formatting: FormattingOptions) -> InputSymbols:
    """Resolve the symbols that may appear in field text for a display mode.

    CURRENCY mode resolves the full locale context (unknown locales raise
    LocaleCodeError). RAW mode only needs the decimal separator and falls back
    to '.' when the locale cannot be resolved.

    Args:
        mode: Active display mode
        formatting: Formatting options

    Returns:
        InputSymbols for sanitizing text in this mode
    """
    match mode:
        case DisplayMode.CURRENCY:
            ctx = LocaleContext.create(formatting.locale)
            return InputSymbols(
                decimal_separator=ctx.decimal_separator,
                minus_sign=ctx.minus_sign,
                currency_symbol=ctx.currency_symbol(formatting.currency_code),
            )
        case DisplayMode.RAW:
            return InputSymbols(decimal_separator=get_decimal_separator(formatting.locale))


def _insert_after_last_digit(text: str, insertion: str) -> str:
    for index in range(len(text) - 1, -1, -1):
        if "0" <= text[index] <= "9":
            return f"{text[: index + 1]}{insertion}{text[index + 1 :]}"
    return f"{text}{insertion}"


def _render_raw(digits: str, sign: bool, fraction_digits: int, separator: str) -> str:
    padded = digits.rjust(fraction_digits + 1, "0")
    if fraction_digits:
        integer_part = padded[:-fraction_digits]
        fraction_part = padded[-fraction_digits:]
    else:
        integer_part = padded
        fraction_part = ""
    integer_part = integer_part.lstrip("0") or "0"
    prefix = RAW_NEGATIVE_PREFIX if sign else ""
    if not fraction_digits:
        return f"{prefix}{integer_part}"
    return f"{prefix}{integer_part}{separator}{fraction_part}"


def render_digits(
    digits: str,
    sign: bool,
    mode: DisplayMode,
    formatting: FormattingOptions,
    validation: ValidationOptions,
) -> RenderResult:
    """Render a scaled digit string.

    Args:
        digits: Unsigned digits scaled by 10**max_fraction_digits
        sign: Negative intent
        mode: Display mode
        formatting: Formatting options
        validation: Validation options (negatives and bounds)

    Returns:
        RenderResult with text and the unchanged digit string

    Raises:
        CurrencyCodeError: Unknown currency code (CURRENCY mode)
        LocaleCodeError: Unknown locale (CURRENCY mode)

    Examples:
        >>> fmt = FormattingOptions.create("USD", "en-US")
        >>> render_digits("123456", False, DisplayMode.CURRENCY, fmt, ValidationOptions()).text
        '$1,234.56'
        >>> render_digits("5", True, DisplayMode.RAW, fmt,
        ...               ValidationOptions(allow_negative=True)).text
        '-0.05'
    """
    if not digits:
        return RenderResult("", "")

    fraction_digits = formatting.max_fraction_digits
    match mode:
        case DisplayMode.CURRENCY:
            value = decode_digits(
                digits, sign, fraction_digits, allow_negative=validation.allow_negative
            )
            value = clamp_value(
                value,
                allow_negative=validation.allow_negative,
                minimum_value=validation.minimum_value,
                maximum_value=validation.maximum_value,
            )
            if value is None:
                return RenderResult("", digits)
            ctx = LocaleContext.create(formatting.locale)
            text = ctx.format_currency(
                value,
                currency=formatting.currency_code,
                minimum_fraction_digits=formatting.min_fraction_digits,
                maximum_fraction_digits=fraction_digits,
            )
        case DisplayMode.RAW:
            text = _render_raw(
                digits,
                sign and validation.allow_negative,
                fraction_digits,
                get_decimal_separator(formatting.locale),
            )
    return RenderResult(text, digits)


def render_typed(
    integer_part: str,
    fraction_part: str,
    sign: bool,
    had_separator: bool,
    mode: DisplayMode,
    formatting: FormattingOptions,
    validation: ValidationOptions,
) -> RenderResult:
    """Render typed input without reshaping its fraction.

    Args:
        integer_part: Typed integer digits, leading zeros already stripped
            ("0" when only a separator was typed)
        fraction_part: Typed fraction digits, already truncated
        sign: Negative intent as typed
        had_separator: A decimal separator was typed
        mode: Display mode
        formatting: Formatting options
        validation: Validation options

    Returns:
        RenderResult with text and the typed number as scaled digits
        (fraction padded to max_fraction_digits, leading zeros stripped)

    Examples:
        >>> fmt = FormattingOptions.create("USD", "en-US")
        >>> render_typed("12", "", False, True, DisplayMode.CURRENCY, fmt,
        ...              ValidationOptions()).text
        '$12.'
        >>> render_typed("1234", "5", False, True, DisplayMode.RAW, fmt,
        ...              ValidationOptions()).text
        '1234.5'
        >>> render_typed("1234", "", False, False, DisplayMode.CURRENCY, fmt,
        ...              ValidationOptions()).raw_value
        '123400'
    """
    scaled = f"{integer_part}{fraction_part.ljust(formatting.max_fraction_digits, '0')}"
    raw_value = scaled.lstrip("0") or "0"
    negative = sign and validation.allow_negative

    match mode:
        case DisplayMode.CURRENCY:
            ctx = LocaleContext.create(formatting.locale)
            amount = Decimal(f"{integer_part or '0'}.{fraction_part or '0'}")
            if negative:
                amount = amount.copy_negate()
            text = ctx.format_currency(
                amount,
                currency=formatting.currency_code,
                minimum_fraction_digits=len(fraction_part),
                maximum_fraction_digits=len(fraction_part),
            )
            if had_separator and not fraction_part:
                text = _insert_after_last_digit(text, ctx.decimal_separator)
        case DisplayMode.RAW:
            prefix = RAW_NEGATIVE_PREFIX if negative else ""
            text = f"{prefix}{integer_part}"
            if had_separator:
                separator = get_decimal_separator(formatting.locale)
                text = f"{text}{separator}{fraction_part}"
    return RenderResult(text, raw_value)
