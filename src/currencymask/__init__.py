"""currencymask - Locale-aware currency input masking engine.

Turns raw keystroke text into a normalized monetary value and a formatted
display string, and renders programmatic values back into display text.
Enforces integer-digit caps, sign rules, value bounds and custom validators.

Public API:
    InputSession - Stateful masking session for one input field
    EngineState - Immutable snapshot returned by every transition
    FormattingOptions - Currency, locale and fraction-digit configuration
    ValidationOptions - Bounds, sign, digit cap and custom validator
    DisplayMode - CURRENCY (grouped currency text) or RAW (plain digits)
    format_currency - Display-only formatting for read-only text

Exceptions:
    MaskError - Base exception class
    ConfigurationError - Unknown currency code or locale
    FormattingError - Locale formatter failure

Submodules:
    currencymask.api - Binding surface (init, on_text_changed, on_value_set, reconfigure)
    currencymask.core - Pure masking primitives
    currencymask.formatting - Formatter protocol and generic masked session
    currencymask.diagnostics - Error types and diagnostic formatting
    currencymask.runtime.locale_context - Thread-safe LocaleContext for formatting
"""

from . import api
from .core import FormattingOptions, ValidationOptions, Validator
from .diagnostics import (
    ConfigurationError,
    CurrencyCodeError,
    FormattingError,
    LocaleCodeError,
    MaskError,
)
from .enums import DisplayMode
from .formatting import CurrencyFormatter, MaskedInputSession, format_currency
from .runtime import EngineState, InputSession, get_decimal_separator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # This should never happen on Python 3.13+ (importlib.metadata is stdlib since 3.8)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("currencymask")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "CurrencyCodeError",
    "CurrencyFormatter",
    "DisplayMode",
    "EngineState",
    "FormattingError",
    "FormattingOptions",
    "InputSession",
    "LocaleCodeError",
    "MaskError",
    "MaskedInputSession",
    "ValidationOptions",
    "Validator",
    "__version__",
    "api",
    "format_currency",
    "get_decimal_separator",
]
