"""Formatter protocol, the currency formatter, and the generic masked session.

Python 3.13+. Uses Babel for i18n.
"""

from .currency import CurrencyFormatter, format_currency, parse_currency_from_digits
from .masked import MaskedInputSession
from .types import FormatResult, Formatter, ParseResult

__all__ = [
    "CurrencyFormatter",
    "FormatResult",
    "Formatter",
    "MaskedInputSession",
    "ParseResult",
    "format_currency",
    "parse_currency_from_digits",
]
