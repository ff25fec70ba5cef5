"""Shared constants for currencymask.

This module provides centralized configuration constants used across
the core, runtime and formatting packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Fraction digits: Defaults applied when options leave them unset
- Separators and signs: Characters recognized in keystroke input
- Locale defaults: Fallbacks when locale resolution fails
- Cache limits: Memory bounds for the LocaleContext cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fraction digits
    "DEFAULT_FRACTION_DIGITS",
    # Separators and signs
    "DEFAULT_DECIMAL_SEPARATOR",
    "RAW_NEGATIVE_PREFIX",
    "SIGN_MARKERS",
    "CURRENCY_PLACEHOLDER",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# FRACTION DIGITS
# ============================================================================

# Fraction digits used when neither the legacy single setting nor explicit
# minimum/maximum overrides are provided. Matches the ISO 4217 minor unit of
# most currencies (USD, EUR, GBP).
DEFAULT_FRACTION_DIGITS: int = 2

# ============================================================================
# SEPARATORS AND SIGNS
# ============================================================================

# Decimal separator used when the locale cannot be resolved.
DEFAULT_DECIMAL_SEPARATOR: str = "."

# Prefix rendered in RAW display mode for negative values.
RAW_NEGATIVE_PREFIX: str = "-"

# Characters interpreted as a sign toggle in keystroke input.
# U+2212 MINUS SIGN is what CLDR uses for several locales (sv, fi, ...), so a
# re-submitted rendering of a negative value must count it as well.
SIGN_MARKERS: frozenset[str] = frozenset({"-", "−"})

# CLDR currency placeholder in number patterns (single = symbol).
CURRENCY_PLACEHOLDER: str = "\xa4"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when neither options nor the environment name one.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# Prevents unbounded memory growth in multi-locale applications.
MAX_LOCALE_CACHE_SIZE: int = 128
