"""Integer-digit capping for scaled digit strings.

Capping keeps a window of the most recent digits: excess digits are dropped
from the most-significant end, so a value that overflows the cap still shows
its least-significant digits instead of being rejected outright.

Python 3.13+. Zero external dependencies.
"""

from typing import NamedTuple

__all__ = ["CappedDigits", "cap_digits"]


class CappedDigits(NamedTuple):
    """Digit string after capping and whether anything was dropped."""

    digits: str
    was_capped: bool


def cap_digits(
    digits: str,
    fraction_digits: int,
    max_integer_digits: int | None = None,
) -> CappedDigits:
    """Enforce an integer-digit ceiling on a scaled digit string.

    Args:
        digits: Unsigned digits scaled by 10**fraction_digits
        fraction_digits: Number of trailing digits that form the fraction
        max_integer_digits: Cap on digits before the decimal point; None or 0
            disables capping

    Returns:
        CappedDigits(digits, was_capped)

    Examples:
        >>> cap_digits("1234567", 2, 4)
        CappedDigits(digits='234567', was_capped=True)
        >>> cap_digits("1234", 2, 4)
        CappedDigits(digits='1234', was_capped=False)
    """
    if not max_integer_digits:
        return CappedDigits(digits, False)

    integer_length = max(0, len(digits) - fraction_digits)
    if integer_length <= max_integer_digits:
        return CappedDigits(digits, False)

    keep = max_integer_digits + fraction_digits
    return CappedDigits(digits[len(digits) - keep :], True)
