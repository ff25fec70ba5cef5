"""Generic masked-input session over any Formatter.

Simpler than InputSession: text changes are parsed, then the parsed value is
formatted back, so the field always shows the canonical rendering of what it
holds. Programmatic values are formatted and clear the error.

Python 3.13+.
"""

import logging

from .types import Formatter

__all__ = ["MaskedInputSession"]

logger = logging.getLogger(__name__)


class MaskedInputSession[T]:
    """Masked-input state machine driven by a Formatter.

    Args:
        formatter: Any object satisfying the Formatter protocol
        initial_value: Value shown before any interaction

    Examples:
        >>> from currencymask import FormattingOptions
        >>> from currencymask.formatting import CurrencyFormatter
        >>> session = MaskedInputSession(
        ...     CurrencyFormatter(FormattingOptions.create("USD", "en-US")))
        >>> session.on_text_changed("1234")
        >>> session.value, session.text
        (12.34, '$12.34')
    """

    __slots__ = ("_error", "_formatter", "_raw_value", "_text", "_value")

    def __init__(self, formatter: Formatter[T], initial_value: T | None = None) -> None:
        self._formatter = formatter
        formatted = formatter.format(initial_value)
        self._value: T | None = initial_value
        self._text = formatted.text
        self._raw_value = formatted.raw_value
        self._error: str | None = None

    @property
    def formatter(self) -> Formatter[T]:
        return self._formatter

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def text(self) -> str:
        return self._text

    @property
    def raw_value(self) -> str:
        return self._raw_value

    @property
    def error(self) -> str | None:
        return self._error

    def on_text_changed(self, text: str) -> None:
        """Parse text and show the canonical rendering of the result."""
        parsed = self._formatter.parse(text)
        self._value = parsed.value
        self._raw_value = parsed.raw_value
        self._error = parsed.error
        self._text = self._formatter.format(parsed.value).text
        logger.debug("Masked text %r parsed to %r", text, parsed.value)

    def on_value_set(self, value: T | None) -> None:
        """Format a programmatic value and clear the error."""
        formatted = self._formatter.format(value)
        self._value = value
        self._text = formatted.text
        self._raw_value = formatted.raw_value
        self._error = None

    def set_formatter(self, formatter: Formatter[T]) -> None:
        """Replace the formatter and re-render the current value."""
        self._formatter = formatter
        formatted = formatter.format(self._value)
        self._text = formatted.text
        self._raw_value = formatted.raw_value
