"""Formatting and validation configuration.

Two frozen dataclasses carry everything a session needs to know about the
field it is masking. Both validate their invariants at construction time and
are replaced (never mutated) when the owning binding reconfigures.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from currencymask.constants import DEFAULT_FRACTION_DIGITS

from .fractions import resolve_fraction_digits

__all__ = ["FormattingOptions", "ValidationOptions", "Validator"]

type Validator = Callable[[float | None], str | None]
"""Caller-supplied check; returns a message to display or None."""


@dataclass(frozen=True, slots=True)
class FormattingOptions:
    """Immutable display configuration.

    Use FormattingOptions.create() to resolve fraction digits from the legacy
    single setting and explicit overrides.

    Attributes:
        currency_code: ISO 4217 currency code (USD, EUR, JPY, ...)
        locale: BCP 47 locale tag, or None for the system locale
        min_fraction_digits: Minimum fraction digits shown for programmatic values
        max_fraction_digits: Maximum fraction digits; also the parsing scale

    Example:
        >>> options = FormattingOptions.create("usd", "en-US", maximum_fraction_digits=3)
        >>> options.currency_code, options.min_fraction_digits, options.max_fraction_digits
        ('USD', 2, 3)
    """

    currency_code: str
    locale: str | None = None
    min_fraction_digits: int = DEFAULT_FRACTION_DIGITS
    max_fraction_digits: int = DEFAULT_FRACTION_DIGITS

    def __post_init__(self) -> None:
        """Validate fraction-digit invariants.

        Raises:
            ValueError: If min_fraction_digits is negative or exceeds
                max_fraction_digits.
        """
        if self.min_fraction_digits < 0:
            msg = f"min_fraction_digits must be >= 0, got {self.min_fraction_digits}"
            raise ValueError(msg)
        if self.max_fraction_digits < self.min_fraction_digits:
            msg = (
                f"max_fraction_digits ({self.max_fraction_digits}) must be >= "
                f"min_fraction_digits ({self.min_fraction_digits})"
            )
            raise ValueError(msg)

    @classmethod
    def create(
        cls,
        currency_code: str,
        locale: str | None = None,
        *,
        fraction_digits: int | None = None,
        minimum_fraction_digits: int | None = None,
        maximum_fraction_digits: int | None = None,
    ) -> FormattingOptions:
        """Build options, resolving fraction digits once.

        Args:
            currency_code: ISO 4217 code (case-insensitive)
            locale: BCP 47 locale tag or None
            fraction_digits: Legacy single setting for both ends
            minimum_fraction_digits: Explicit minimum override
            maximum_fraction_digits: Explicit maximum override

        Returns:
            FormattingOptions with resolved fraction digits
        """
        digits = resolve_fraction_digits(
            fraction_digits, minimum_fraction_digits, maximum_fraction_digits
        )
        return cls(
            currency_code=currency_code.upper(),
            locale=locale,
            min_fraction_digits=digits.minimum,
            max_fraction_digits=digits.maximum,
        )

    @property
    def allows_fraction(self) -> bool:
        """Whether a decimal separator is meaningful for this currency field."""
        return self.max_fraction_digits > 0


@dataclass(frozen=True, slots=True)
class ValidationOptions:
    """Immutable validation configuration.

    Attributes:
        minimum_value: Optional lower bound (inclusive)
        maximum_value: Optional upper bound (inclusive)
        allow_negative: Accept negative values (default: False)
        max_integer_digits: Cap on digits before the decimal point; None or 0
            means unlimited
        validator: Optional custom check whose message overrides structural ones

    Example:
        >>> options = ValidationOptions(minimum_value=1, maximum_value=500, max_integer_digits=3)
        >>> options.digit_cap, options.allow_negative
        (3, False)
    """

    minimum_value: float | None = None
    maximum_value: float | None = None
    allow_negative: bool = False
    max_integer_digits: int | None = None
    validator: Validator | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_integer_digits is negative or minimum_value
                exceeds maximum_value.
        """
        if self.max_integer_digits is not None and self.max_integer_digits < 0:
            msg = f"max_integer_digits must be >= 0, got {self.max_integer_digits}"
            raise ValueError(msg)
        if (
            self.minimum_value is not None
            and self.maximum_value is not None
            and self.minimum_value > self.maximum_value
        ):
            msg = (
                f"minimum_value ({self.minimum_value}) must be <= "
                f"maximum_value ({self.maximum_value})"
            )
            raise ValueError(msg)

    @property
    def digit_cap(self) -> int | None:
        """Effective integer-digit cap (None when unlimited)."""
        return self.max_integer_digits or None
