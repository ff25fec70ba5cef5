"""Keystroke text sanitization.

Reduces free text from an input field to the pieces the engine understands:
integer digits, fraction digits, a sign toggle and whether the user has typed
a decimal separator. Everything else (currency symbols, grouping separators,
letters, whitespace) is discarded.

Sign handling models "typing '-' toggles the sign": every sign marker in the
text flips the sign, so an even count means positive. This lets a user
append '-' to an already negative rendering ("-$12" + "-") to make it
positive again.

Pure functions. Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from currencymask.constants import SIGN_MARKERS
from currencymask.enums import DisplayMode

__all__ = [
    "SanitizedInput",
    "count_sign_markers",
    "sanitize",
    "strip_to_digits",
]


@dataclass(frozen=True, slots=True)
class SanitizedInput:
    """Result of sanitizing one text-change event.

    Attributes:
        integer_part: ASCII digits typed before the first decimal separator
        fraction_part: ASCII digits typed after it (not yet truncated)
        sign: True when an odd number of sign markers was typed
        had_separator: A decimal separator was present
        trailing_separator: A separator was present with no fraction digits after it
    """

    integer_part: str
    fraction_part: str
    sign: bool
    had_separator: bool
    trailing_separator: bool

    @property
    def digits(self) -> str:
        """Integer and fraction digits concatenated."""
        return self.integer_part + self.fraction_part

    @property
    def is_blank(self) -> bool:
        """No digits and no separator: nothing numeric was typed."""
        return not self.integer_part and not self.fraction_part and not self.had_separator


def strip_to_digits(text: str) -> str:
    """Remove every character that is not an ASCII digit.

    Example:
        >>> strip_to_digits("$1,234.50")
        '123450'
    """
    return "".join(char for char in text if "0" <= char <= "9")


def count_sign_markers(text: str, minus_sign: str = "-") -> int:
    """Count sign-toggle characters in text.

    Args:
        text: Raw input text
        minus_sign: Locale minus sign, counted in addition to SIGN_MARKERS

    Returns:
        Number of sign markers
    """
    markers = SIGN_MARKERS | {minus_sign}
    return sum(1 for char in text if char in markers)


def sanitize(
    text: str,
    mode: DisplayMode,
    decimal_separator: str,
    allow_fraction: bool,
    *,
    minus_sign: str = "-",
    currency_symbol: str | None = None,
) -> SanitizedInput:
    """Split keystroke text into integer digits, fraction digits and sign.

    Args:
        text: Raw field text after the keystroke
        mode: Active display mode; CURRENCY strips the currency symbol first
        decimal_separator: Locale decimal separator
        allow_fraction: Whether the separator is meaningful (max fraction digits > 0)
        minus_sign: Locale minus sign (CLDR), recognized as a sign marker
        currency_symbol: Symbol removed before scanning in CURRENCY mode

    Returns:
        SanitizedInput describing the typed number

    Examples:
        >>> result = sanitize("$1,234.5", DisplayMode.CURRENCY, ".", True, currency_symbol="$")
        >>> result.integer_part, result.fraction_part
        ('1234', '5')

        >>> sanitize("-$12-", DisplayMode.CURRENCY, ".", True).sign
        False

        >>> sanitize(".", DisplayMode.CURRENCY, ".", True).trailing_separator
        True
    """
    if mode is DisplayMode.CURRENCY and currency_symbol:
        text = text.replace(currency_symbol, "")

    sign_count = count_sign_markers(text, minus_sign)

    integer_chars: list[str] = []
    fraction_chars: list[str] = []
    had_separator = False

    index = 0
    length = len(text)
    separator_length = len(decimal_separator)
    while index < length:
        if (
            allow_fraction
            and separator_length
            and text.startswith(decimal_separator, index)
        ):
            had_separator = True
            index += separator_length
            continue
        char = text[index]
        if "0" <= char <= "9":
            (fraction_chars if had_separator else integer_chars).append(char)
        index += 1

    fraction_part = "".join(fraction_chars)
    return SanitizedInput(
        integer_part="".join(integer_chars),
        fraction_part=fraction_part,
        sign=sign_count % 2 == 1,
        had_separator=had_separator,
        trailing_separator=had_separator and not fraction_part,
    )
