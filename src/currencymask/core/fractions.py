"""Fraction-digit resolution.

Python 3.13+. Zero external dependencies.
"""

from typing import NamedTuple

from currencymask.constants import DEFAULT_FRACTION_DIGITS

__all__ = ["FractionDigits", "resolve_fraction_digits"]


class FractionDigits(NamedTuple):
    """Effective fraction-digit range (minimum <= maximum)."""

    minimum: int
    maximum: int


def resolve_fraction_digits(
    legacy: int | None = None,
    minimum: int | None = None,
    maximum: int | None = None,
) -> FractionDigits:
    """Resolve minimum/maximum fraction digits.

    Resolution order: explicit override, then the legacy single setting,
    then DEFAULT_FRACTION_DIGITS. The maximum is silently raised to the
    minimum when configured below it.

    Args:
        legacy: Single fraction-digit setting applied to both ends
        minimum: Explicit minimum override
        maximum: Explicit maximum override

    Returns:
        FractionDigits with 0 <= minimum <= maximum

    Examples:
        >>> resolve_fraction_digits()
        FractionDigits(minimum=2, maximum=2)
        >>> resolve_fraction_digits(0, maximum=3)
        FractionDigits(minimum=0, maximum=3)
        >>> resolve_fraction_digits(minimum=4, maximum=1)
        FractionDigits(minimum=4, maximum=4)
    """
    base = DEFAULT_FRACTION_DIGITS if legacy is None else legacy
    resolved_min = max(0, base if minimum is None else minimum)
    resolved_max = max(resolved_min, base if maximum is None else maximum)
    return FractionDigits(resolved_min, resolved_max)
