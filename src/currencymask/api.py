"""Binding surface for UI layers.

Widget bindings forward keystrokes and programmatic values here and render
whatever EngineState comes back. Each call returns the full new state.

Example:
    >>> from currencymask import FormattingOptions, api
    >>> session = api.init(None, FormattingOptions.create("USD", "en-US"))
    >>> api.on_text_changed(session, "1234").text
    '$1,234'
    >>> api.on_value_set(session, 5).text
    '$5.00'

Python 3.13+.
"""

from currencymask.core import FormattingOptions, ValidationOptions
from currencymask.enums import DisplayMode
from currencymask.runtime import EngineState, InputSession

__all__ = ["init", "on_text_changed", "on_value_set", "reconfigure"]


def init(
    initial_value: float | None,
    formatting: FormattingOptions,
    validation: ValidationOptions | None = None,
    mode: DisplayMode | str = DisplayMode.CURRENCY,
) -> InputSession:
    """Create a session for one field.

    The initial EngineState is available as ``session.state``.

    Args:
        initial_value: Value shown before any interaction (None for empty)
        formatting: Formatting options
        validation: Validation options (defaults apply when None)
        mode: Display mode or mask name ("currency", "raw", "none")

    Returns:
        New InputSession

    Raises:
        CurrencyCodeError: Unknown currency code (CURRENCY mode)
        LocaleCodeError: Unknown locale (CURRENCY mode)
    """
    return InputSession(
        formatting,
        validation,
        mode=DisplayMode.from_mask(mode),
        initial_value=initial_value,
    )


def on_text_changed(session: InputSession, text: str) -> EngineState:
    """Forward a keystroke to a session."""
    return session.on_text_changed(text)


def on_value_set(session: InputSession, value: float | None) -> EngineState:
    """Forward a programmatic value to a session."""
    return session.on_value_set(value)


def reconfigure(
    session: InputSession,
    *,
    formatting: FormattingOptions | None = None,
    validation: ValidationOptions | None = None,
    mode: DisplayMode | str | None = None,
) -> EngineState:
    """Swap a session's configuration and recompute its state."""
    return session.reconfigure(
        formatting=formatting,
        validation=validation,
        mode=None if mode is None else DisplayMode.from_mask(mode),
    )
