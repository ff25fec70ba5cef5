"""Locale context for currency formatting and separator lookup.

This module is the engine's only contact with the platform number-formatting
facility. Uses Babel for CLDR-compliant currency formatting and locale
symbols (decimal separator, minus sign, currency symbol).

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Unknown locales and currency codes raise ConfigurationError subclasses;
      the engine never substitutes a different locale or currency

Python 3.13+. Uses Babel for i18n.
"""

import logging
import re
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from currencymask.constants import (
    CURRENCY_PLACEHOLDER,
    DEFAULT_DECIMAL_SEPARATOR,
    MAX_LOCALE_CACHE_SIZE,
)
from currencymask.diagnostics import (
    ConfigurationError,
    CurrencyCodeError,
    DiagnosticFormatter,
    ErrorTemplate,
    FormattingError,
    LocaleCodeError,
    OutputFormat,
)
from currencymask.locale_utils import get_babel_locale, resolve_locale_code

__all__ = ["LocaleContext", "get_decimal_separator"]

logger = logging.getLogger(__name__)

# Fraction section of a CLDR number pattern: ".00", ".##", ".0#"
_FRACTION_SECTION = re.compile(r"\.[0#]+")

# Used when a locale publishes no standard currency pattern
_FALLBACK_CURRENCY_PATTERN = f"{CURRENCY_PLACEHOLDER}#,##0.00"


def build_fraction_section(minimum_fraction_digits: int, maximum_fraction_digits: int) -> str:
    """Build the fraction part of a CLDR number pattern.

    Examples:
        >>> build_fraction_section(2, 2)
        '.00'
        >>> build_fraction_section(0, 2)
        '.##'
        >>> build_fraction_section(0, 0)
        ''
    """
    if maximum_fraction_digits == 0:
        return ""
    required = "0" * minimum_fraction_digits
    optional = "#" * (maximum_fraction_digits - minimum_fraction_digits)
    return f".{required}{optional}"


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for currency formatting.

    Use LocaleContext.create() to construct instances; it validates the locale
    and reuses cached instances.

    Cache Management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_currency(1234.5, currency='USD',
        ...                     minimum_fraction_digits=2, maximum_fraction_digits=2)
        '$1,234.50'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.decimal_separator
        ','

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with size, max_size and the cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> _ = LocaleContext.create('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str | None) -> "LocaleContext":
        """Create (or fetch cached) LocaleContext for a locale.

        Args:
            locale_code: BCP 47 or POSIX identifier; None selects the system locale

        Returns:
            LocaleContext instance

        Raises:
            LocaleCodeError: If the locale is malformed or unknown to CLDR

        Examples:
            >>> LocaleContext.create('en-US').locale_code
            'en_US'
            >>> LocaleContext.create('xx-UNKNOWN')  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
                ...
            LocaleCodeError: Unknown locale identifier 'xx-UNKNOWN'
        """
        cache_key = resolve_locale_code(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        try:
            babel_locale = get_babel_locale(cache_key)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            shown = locale_code if locale_code else cache_key
            diagnostic = ErrorTemplate.locale_invalid(shown, str(e))
            raise LocaleCodeError(diagnostic, locale_code=shown) from None

        ctx = cls(locale_code=cache_key, _babel_locale=babel_locale)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def decimal_separator(self) -> str:
        """CLDR decimal symbol for this locale ('.' for en, ',' for de)."""
        return str(babel_numbers.get_decimal_symbol(self._babel_locale))

    @property
    def minus_sign(self) -> str:
        """CLDR minus sign for this locale (U+2212 for sv, fi, ...)."""
        return str(babel_numbers.get_minus_sign_symbol(self._babel_locale))

    def currency_symbol(self, currency: str) -> str:
        """Localized symbol for a currency ('$' for USD in en_US)."""
        return str(babel_numbers.get_currency_symbol(currency, locale=self._babel_locale))

    def validate_currency(self, currency: str) -> str:
        """Check that a currency code is known to CLDR.

        Args:
            currency: ISO 4217 code (case-insensitive)

        Returns:
            Upper-cased currency code

        Raises:
            CurrencyCodeError: If the code is unknown
        """
        code = currency.upper()
        if not babel_numbers.is_currency(code):
            diagnostic = ErrorTemplate.currency_code_invalid(currency)
            raise CurrencyCodeError(diagnostic, currency_code=currency)
        return code

    def currency_pattern(self, minimum_fraction_digits: int, maximum_fraction_digits: int) -> str:
        """Locale standard currency pattern with the fraction section replaced.

        Args:
            minimum_fraction_digits: Required fraction digits
            maximum_fraction_digits: Maximum fraction digits

        Returns:
            CLDR pattern string, e.g. '¤#,##0.##' for en_US with (0, 2)
        """
        standard = self._babel_locale.currency_formats.get("standard")
        raw_pattern = getattr(standard, "pattern", None) or _FALLBACK_CURRENCY_PATTERN
        fraction = build_fraction_section(minimum_fraction_digits, maximum_fraction_digits)
        if not _FRACTION_SECTION.search(raw_pattern):
            logger.debug(
                "Currency pattern for locale %s lacks fraction section", self.locale_code
            )
            raw_pattern = _FALLBACK_CURRENCY_PATTERN
        return _FRACTION_SECTION.sub(fraction, raw_pattern)

    def format_currency(
        self,
        value: int | float | Decimal,
        *,
        currency: str,
        minimum_fraction_digits: int,
        maximum_fraction_digits: int,
    ) -> str:
        """Format a currency amount with locale-specific rules.

        Unlike CLDR's default, the fraction digits come from the caller rather
        than the currency's minor unit, so a field can show "$12" while the
        user has not typed any fraction digits.

        Args:
            value: Monetary amount
            currency: ISO 4217 currency code
            minimum_fraction_digits: Required fraction digits
            maximum_fraction_digits: Maximum fraction digits (value is rounded)

        Returns:
            Formatted currency string

        Raises:
            CurrencyCodeError: If the currency code is unknown
            FormattingError: If Babel fails to format the value

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_currency(1234, currency='USD',
            ...                     minimum_fraction_digits=0, maximum_fraction_digits=2)
            '$1,234'

            >>> ctx = LocaleContext.create('de-DE')
            >>> ctx.format_currency(1234.5, currency='EUR',
            ...                     minimum_fraction_digits=2, maximum_fraction_digits=2)
            '1.234,50\xa0€'
        """
        code = self.validate_currency(currency)
        pattern = self.currency_pattern(minimum_fraction_digits, maximum_fraction_digits)
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
            with localcontext() as decimal_ctx:
                # Babel quantizes under the active context; widen it to hold every digit
                decimal_ctx.prec = max(
                    decimal_ctx.prec,
                    max(amount.adjusted() + 1, 1) + maximum_fraction_digits + 1,
                )
                return str(
                    babel_numbers.format_currency(
                        amount,
                        code,
                        format=pattern,
                        locale=self._babel_locale,
                        currency_digits=False,
                    )
                )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(value, code, str(e))
            raise FormattingError(diagnostic) from e


def get_decimal_separator(locale_code: str | None) -> str:
    """Decimal separator for a locale, falling back to '.'.

    Args:
        locale_code: BCP 47 or POSIX identifier; None selects the system locale

    Returns:
        Locale decimal separator, or DEFAULT_DECIMAL_SEPARATOR when the locale
        cannot be resolved

    Examples:
        >>> get_decimal_separator("de-DE")
        ','
        >>> get_decimal_separator("not a locale")
        '.'
    """
    try:
        return LocaleContext.create(locale_code).decimal_separator
    except ConfigurationError as e:
        reason = (
            DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(e.diagnostic)
            if e.diagnostic is not None
            else str(e)
        )
        logger.warning(
            "Decimal separator lookup failed for locale '%s': %s. Using '%s'",
            locale_code,
            reason,
            DEFAULT_DECIMAL_SEPARATOR,
        )
        return DEFAULT_DECIMAL_SEPARATOR
