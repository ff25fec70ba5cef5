"""Bounds clamping for numeric values.

Python 3.13+. Zero external dependencies.
"""

import math

__all__ = ["clamp_value"]


def clamp_value(
    value: float | None,
    *,
    allow_negative: bool,
    minimum_value: float | None = None,
    maximum_value: float | None = None,
) -> float | None:
    """Clamp a value into the configured range.

    The negative floor runs before the explicit range, so a negative
    minimum_value only takes effect when negatives are allowed.

    Args:
        value: Value to clamp (None and NaN yield None)
        allow_negative: When False, negative values become minimum_value or 0
        minimum_value: Optional lower bound
        maximum_value: Optional upper bound

    Returns:
        Clamped value, or None

    Examples:
        >>> clamp_value(-5.0, allow_negative=False)
        0.0
        >>> clamp_value(-5.0, allow_negative=True, minimum_value=-2.0)
        -2.0
        >>> clamp_value(700.0, allow_negative=False, maximum_value=500.0)
        500.0
    """
    if value is None or math.isnan(value):
        return None

    if not allow_negative and value < 0:
        value = 0.0 if minimum_value is None else minimum_value

    if minimum_value is not None and value < minimum_value:
        value = minimum_value

    if maximum_value is not None and value > maximum_value:
        value = maximum_value

    return value
