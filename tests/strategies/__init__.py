"""Hypothesis strategies for currencymask property-based testing.

Strategies are organized by domain:

- money: amounts, scaled digit strings, formatting and validation options
- keystrokes: field text, naturally typed numbers, sign toggles

Usage:
    from tests.strategies import amounts, field_texts
    from tests.strategies.money import formatting_options
"""

from .keystrokes import field_texts, sign_toggles, typed_numbers
from .money import (
    FORMATTING_LOCALES,
    LOCALE_CURRENCIES,
    amounts,
    amounts_by_magnitude,
    bounded_validation_options,
    formatting_options,
    fraction_digit_counts,
    scaled_digit_strings,
)

__all__ = [
    "FORMATTING_LOCALES",
    "LOCALE_CURRENCIES",
    "amounts",
    "amounts_by_magnitude",
    "bounded_validation_options",
    "field_texts",
    "formatting_options",
    "fraction_digit_counts",
    "scaled_digit_strings",
    "sign_toggles",
    "typed_numbers",
]
