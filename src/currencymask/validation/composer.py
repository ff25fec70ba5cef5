"""Validation message composition.

Aggregates the structural checks (digit cap, disallowed sign, bounds) and an
optional caller-supplied validator into the single message a field displays.

Precedence:
    1. Digit cap hit            -> "Maximum digits is {n}"
    2. Sign with negatives off  -> "Negative values are not allowed"
    3. Below minimum_value      -> "Value must be >= {minimum}"
    4. Above maximum_value      -> "Value must be <= {maximum}"
A non-empty custom validator message replaces whatever 1-4 produced, even
when none of them fired.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from currencymask.core.options import ValidationOptions, Validator
from currencymask.diagnostics import Diagnostic, ErrorTemplate

__all__ = ["ValidationInput", "compose_diagnostic", "compose_error"]


@dataclass(frozen=True, slots=True)
class ValidationInput:
    """Everything the composer looks at for one state transition.

    Attributes:
        value: Value to check against bounds (None skips bound checks)
        sign: Negative intent as typed or encoded
        allow_negative: Whether negatives are permitted
        max_integer_digits: Integer-digit cap (None or 0 when unlimited)
        was_capped: The cap was hit on this transition
        minimum_value: Optional lower bound
        maximum_value: Optional upper bound
        validator: Optional custom validator
    """

    value: float | None
    sign: bool = False
    allow_negative: bool = False
    max_integer_digits: int | None = None
    was_capped: bool = False
    minimum_value: float | None = None
    maximum_value: float | None = None
    validator: Validator | None = None

    @classmethod
    def from_options(
        cls,
        options: ValidationOptions,
        *,
        value: float | None,
        sign: bool = False,
        was_capped: bool = False,
    ) -> "ValidationInput":
        """Build composer input from session validation options."""
        return cls(
            value=value,
            sign=sign,
            allow_negative=options.allow_negative,
            max_integer_digits=options.max_integer_digits,
            was_capped=was_capped,
            minimum_value=options.minimum_value,
            maximum_value=options.maximum_value,
            validator=options.validator,
        )


def _structural_diagnostic(check: ValidationInput) -> Diagnostic | None:
    if check.was_capped and check.max_integer_digits:
        return ErrorTemplate.digit_cap_exceeded(check.max_integer_digits)
    if check.sign and not check.allow_negative:
        return ErrorTemplate.negative_disallowed()
    if check.value is not None:
        if check.minimum_value is not None and check.value < check.minimum_value:
            return ErrorTemplate.below_minimum(check.minimum_value)
        if check.maximum_value is not None and check.value > check.maximum_value:
            return ErrorTemplate.above_maximum(check.maximum_value)
    return None


def compose_diagnostic(check: ValidationInput) -> Diagnostic | None:
    """Compose the effective validation diagnostic.

    Args:
        check: Inputs for this transition

    Returns:
        Diagnostic with code and message, or None when the value is valid
    """
    if check.validator is not None:
        custom = check.validator(check.value)
        if custom:
            return ErrorTemplate.custom_validation(custom)
    return _structural_diagnostic(check)


def compose_error(check: ValidationInput) -> str | None:
    """Compose the effective validation message.

    Args:
        check: Inputs for this transition

    Returns:
        Message to display, or None

    Examples:
        >>> compose_error(ValidationInput(value=5.0, minimum_value=10.0))
        'Value must be >= 10'
        >>> compose_error(ValidationInput(value=5.0, minimum_value=10.0,
        ...                               validator=lambda v: "Too small!"))
        'Too small!'
    """
    diagnostic = compose_diagnostic(check)
    return None if diagnostic is None else diagnostic.message
