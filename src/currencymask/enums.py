"""Enumerations for currencymask type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DisplayMode(StrEnum):
    """How a session renders its digits.

    StrEnum provides automatic string conversion: str(DisplayMode.RAW) == "raw"
    """

    CURRENCY = "currency"
    """Grouped currency string via the locale currency pattern: $1,234.50"""

    RAW = "raw"
    """Plain digits joined by the locale decimal separator: 1234.50"""

    @classmethod
    def from_mask(cls, mask: "str | DisplayMode") -> "DisplayMode":
        """Resolve a mask name to a DisplayMode.

        Accepts member values plus ``"none"``, the historical name of the
        raw mask.

        Args:
            mask: Mask name or DisplayMode member

        Returns:
            Matching DisplayMode

        Raises:
            ValueError: If the mask name is not recognized

        Example:
            >>> DisplayMode.from_mask("none")
            <DisplayMode.RAW: 'raw'>
        """
        if isinstance(mask, DisplayMode):
            return mask
        if mask == "none":
            return cls.RAW
        return cls(mask)


__all__ = [
    "DisplayMode",
]
