"""Conversion between numeric values and scaled digit strings.

This is the single place where a float becomes a digit string and back.
Scaling goes through ``decimal.Decimal`` built from the float's shortest
string form, so 1.005 scales to 100.5 (and rounds to 101) rather than to the
binary approximation 100.49999...
Rounding and scaling use integer arithmetic, so they stay exact for any
number of digits.

Python 3.13+. Zero external dependencies.
"""

import math
from decimal import Decimal
from typing import NamedTuple

__all__ = [
    "EncodedValue",
    "decode_digits",
    "encode_value",
    "scaled_magnitude",
    "values_equal_at_scale",
]


class EncodedValue(NamedTuple):
    """Unsigned scaled digits plus sign."""

    digits: str
    sign: bool


def _is_missing(value: float | None) -> bool:
    return value is None or not math.isfinite(value)


def scaled_magnitude(value: float, fraction_digits: int) -> int:
    """Round |value| * 10**fraction_digits half away from zero.

    Exact for any finite float, however large.

    Example:
        >>> scaled_magnitude(-12.345, 2)
        1235
    """
    _, coefficient_digits, exponent = Decimal(str(value)).as_tuple()
    coefficient = int("".join(map(str, coefficient_digits)) or "0")
    shift = int(exponent) + fraction_digits
    if shift >= 0:
        return coefficient * 10**shift
    divisor = 10**-shift
    quotient, remainder = divmod(coefficient, divisor)
    if remainder * 2 >= divisor:
        quotient += 1
    return quotient


def encode_value(value: float | None, fraction_digits: int) -> EncodedValue:
    """Encode a value as scaled digits and a sign.

    Args:
        value: Numeric value (None, NaN and infinities encode as empty)
        fraction_digits: Scale exponent

    Returns:
        EncodedValue(digits, sign)

    Examples:
        >>> encode_value(12.34, 2)
        EncodedValue(digits='1234', sign=False)
        >>> encode_value(-0.5, 0)
        EncodedValue(digits='1', sign=True)
        >>> encode_value(None, 2)
        EncodedValue(digits='', sign=False)
    """
    if value is None or _is_missing(value):
        return EncodedValue("", False)
    return EncodedValue(str(scaled_magnitude(value, fraction_digits)), value < 0)


def decode_digits(
    digits: str,
    sign: bool,
    fraction_digits: int,
    *,
    allow_negative: bool = True,
) -> float | None:
    """Decode scaled digits and sign to a value.

    Args:
        digits: Unsigned scaled digits ("" means no value)
        sign: Negative intent
        fraction_digits: Scale exponent
        allow_negative: When False the sign is ignored

    Returns:
        Decoded float, or None for empty digits

    Examples:
        >>> decode_digits("1234", False, 2)
        12.34
        >>> decode_digits("100", True, 2, allow_negative=False)
        1.0
        >>> decode_digits("", True, 2) is None
        True
    """
    if not digits:
        return None
    value = float(Decimal((0, tuple(map(int, digits)), -fraction_digits)))
    if sign and allow_negative:
        value = -value
    return value


def values_equal_at_scale(
    first: float | None,
    second: float | None,
    fraction_digits: int,
) -> bool:
    """Compare two values after rounding both to fraction_digits.

    Missing values (None/NaN) are equal only to each other.

    Example:
        >>> values_equal_at_scale(1.001, 1.0, 2)
        True
    """
    if first is None or _is_missing(first) or second is None or _is_missing(second):
        return _is_missing(first) and _is_missing(second)
    first_encoded = encode_value(first, fraction_digits)
    second_encoded = encode_value(second, fraction_digits)
    if first_encoded.digits == second_encoded.digits == "0":
        # -0.001 and 0.0 both round to zero; the sign of zero is irrelevant
        return True
    return first_encoded == second_encoded
