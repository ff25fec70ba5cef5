"""Hypothesis strategies for amounts, digit strings and masking options.

Usage:
    from tests.strategies.money import amounts, scaled_digit_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    - amounts_by_magnitude: Emits the magnitude bucket of each amount
    - formatting_options: Emits the locale and fraction range

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from currencymask import FormattingOptions, ValidationOptions

# Locales with distinct decimal separators and currency placement
FORMATTING_LOCALES: list[str] = [
    "en_US", "en_GB", "de_DE", "fr_FR", "ja_JP", "pt_BR", "sv_SE", "lv_LV",
]

# Locale -> home currency
LOCALE_CURRENCIES: dict[str, str] = {
    "en_US": "USD",
    "en_GB": "GBP",
    "de_DE": "EUR",
    "fr_FR": "EUR",
    "ja_JP": "JPY",
    "pt_BR": "BRL",
    "sv_SE": "SEK",
    "lv_LV": "EUR",
}


def fraction_digit_counts() -> st.SearchStrategy[int]:
    """Fraction-digit settings seen in practice (0 through 4)."""
    return st.integers(min_value=0, max_value=4)


def amounts(max_magnitude: float = 1e9) -> st.SearchStrategy[float]:
    """Finite amounts within +/- max_magnitude."""
    return st.floats(
        min_value=-max_magnitude,
        max_value=max_magnitude,
        allow_nan=False,
        allow_infinity=False,
    )


def scaled_digit_strings(max_length: int = 12) -> st.SearchStrategy[str]:
    """Non-empty ASCII digit strings."""
    return st.text(alphabet="0123456789", min_size=1, max_size=max_length)


@composite
def amounts_by_magnitude(draw: st.DrawFn) -> float:
    """Amounts drawn per magnitude bucket, emitting the bucket as an event."""
    bucket = draw(st.sampled_from(["sub_unit", "small", "large", "huge"]))
    event(f"magnitude={bucket}")
    match bucket:
        case "sub_unit":
            return draw(st.floats(min_value=0, max_value=1, exclude_max=True))
        case "small":
            return draw(st.floats(min_value=1, max_value=1000))
        case "large":
            return draw(st.floats(min_value=1000, max_value=1e7))
        case _:
            return draw(st.floats(min_value=1e7, max_value=1e12))


@composite
def formatting_options(draw: st.DrawFn) -> FormattingOptions:
    """FormattingOptions over the home currency of a formatting locale."""
    locale = draw(st.sampled_from(FORMATTING_LOCALES))
    minimum = draw(fraction_digit_counts())
    maximum = draw(st.integers(min_value=minimum, max_value=4))
    event(f"locale={locale}")
    event(f"fraction=({minimum},{maximum})")
    return FormattingOptions.create(
        LOCALE_CURRENCIES[locale],
        locale,
        minimum_fraction_digits=minimum,
        maximum_fraction_digits=maximum,
    )


@composite
def bounded_validation_options(draw: st.DrawFn) -> ValidationOptions:
    """ValidationOptions with ordered optional bounds."""
    allow_negative = draw(st.booleans())
    low = draw(st.one_of(st.none(), st.integers(min_value=-1000, max_value=1000)))
    high = draw(st.one_of(st.none(), st.integers(min_value=-1000, max_value=1000)))
    if low is not None and high is not None and low > high:
        low, high = high, low
    cap = draw(st.one_of(st.none(), st.integers(min_value=1, max_value=9)))
    return ValidationOptions(
        minimum_value=None if low is None else float(low),
        maximum_value=None if high is None else float(high),
        allow_negative=allow_negative,
        max_integer_digits=cap,
    )
