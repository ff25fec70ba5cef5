"""Stateful masking session.

InputSession owns one immutable EngineState and replaces it wholesale on
every transition:

- on_text_changed: live typing. Text is read left to right, so "12." shows
  as "$12." and a lone separator as "$0.". Keystrokes that would push the
  integer part past the digit cap are rejected; the previous state stays and
  only the error is refreshed.
- on_value_set: programmatic values. Clamped, encoded, capped (truncating
  from the most-significant end) and re-derived before rendering. Values equal
  to the current one at the active fraction scale are skipped.
- reconfigure: swaps options and recomputes from the current value.

Sessions are not thread-safe; callers serialize calls into one session.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import ClassVar

from currencymask.core import (
    FormattingOptions,
    ValidationOptions,
    cap_digits,
    clamp_value,
    decode_digits,
    encode_value,
    sanitize,
    values_equal_at_scale,
)
from currencymask.diagnostics import Diagnostic, DiagnosticCode
from currencymask.enums import DisplayMode
from currencymask.validation import ValidationInput, compose_diagnostic

from .renderer import input_symbols, render_digits, render_typed

__all__ = ["EngineState", "InputSession"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineState:
    """Snapshot of a masked field.

    Attributes:
        value: Numeric value, or None when the field is empty
        raw_digits: Digit string the text was rendered from
        sign: Effective negative flag
        text: Display text
        error: Validation message, or None
        error_code: Code of the validation message, or None
    """

    EMPTY: ClassVar["EngineState"]

    value: float | None
    raw_digits: str = ""
    sign: bool = False
    text: str = ""
    error: str | None = None
    error_code: DiagnosticCode | None = None

    @property
    def is_empty(self) -> bool:
        """True when no value is held."""
        return self.value is None and not self.raw_digits

    def with_diagnostic(self, diagnostic: Diagnostic | None) -> "EngineState":
        """Copy of this state with only the error fields replaced."""
        if diagnostic is None:
            return replace(self, error=None, error_code=None)
        return replace(self, error=diagnostic.message, error_code=diagnostic.code)


EngineState.EMPTY = EngineState(value=None)


class InputSession:
    """Masking state machine for one input field.

    Args:
        formatting: Currency, locale and fraction-digit options
        validation: Negatives, bounds, digit cap and custom validator
        mode: Display mode
        initial_value: Value shown before any interaction

    Raises:
        CurrencyCodeError: Unknown currency code (CURRENCY mode)
        LocaleCodeError: Unknown locale (CURRENCY mode)

    Examples:
        >>> session = InputSession(FormattingOptions.create("USD", "en-US"))
        >>> session.on_text_changed("1234").text
        '$1,234'
        >>> session.on_value_set(12.5).text
        '$12.50'
    """

    __slots__ = ("_formatting", "_mode", "_state", "_validation")

    def __init__(
        self,
        formatting: FormattingOptions,
        validation: ValidationOptions | None = None,
        mode: DisplayMode = DisplayMode.CURRENCY,
        initial_value: float | None = None,
    ) -> None:
        self._formatting = formatting
        self._validation = validation if validation is not None else ValidationOptions()
        self._mode = DisplayMode.from_mask(mode)
        self._state = self._state_from_value(initial_value)

    # ========================================================================
    # Properties
    # ========================================================================

    @property
    def state(self) -> EngineState:
        """Current engine state."""
        return self._state

    @property
    def value(self) -> float | None:
        return self._state.value

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def raw_digits(self) -> str:
        return self._state.raw_digits

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def formatting(self) -> FormattingOptions:
        return self._formatting

    @property
    def validation(self) -> ValidationOptions:
        return self._validation

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    # ========================================================================
    # Transitions
    # ========================================================================

    def on_text_changed(self, text: str) -> EngineState:
        """Apply a keystroke.

        Args:
            text: Full field text after the keystroke

        Returns:
            New engine state (also stored on the session)
        """
        if not text:
            self._state = EngineState.EMPTY
            return self._state

        symbols = input_symbols(self._mode, self._formatting)
        typed = sanitize(
            text,
            self._mode,
            symbols.decimal_separator,
            self._formatting.allows_fraction,
            minus_sign=symbols.minus_sign,
            currency_symbol=symbols.currency_symbol,
        )
        if typed.is_blank:
            logger.debug("Text %r holds no digits; clearing", text)
            self._state = EngineState.EMPTY
            return self._state

        validation = self._validation
        integer_part = typed.integer_part.lstrip("0")
        cap = validation.digit_cap
        if cap is not None and len(integer_part) > cap:
            logger.debug(
                "Rejected keystroke: %d integer digits exceed cap %d", len(integer_part), cap
            )
            diagnostic = compose_diagnostic(
                ValidationInput.from_options(
                    validation,
                    value=self._state.value,
                    sign=self._state.sign,
                    was_capped=True,
                )
            )
            self._state = self._state.with_diagnostic(diagnostic)
            return self._state

        integer_part = integer_part or "0"
        fraction_part = typed.fraction_part[: self._formatting.max_fraction_digits]
        negative = typed.sign and validation.allow_negative

        typed_value = float(Decimal(f"{integer_part}.{fraction_part or '0'}"))
        if negative and typed_value:
            typed_value = -typed_value

        diagnostic = compose_diagnostic(
            ValidationInput.from_options(validation, value=typed_value, sign=typed.sign)
        )

        clamped = clamp_value(
            typed_value,
            allow_negative=validation.allow_negative,
            minimum_value=validation.minimum_value,
            maximum_value=validation.maximum_value,
        )
        if clamped != typed_value:
            logger.debug("Typed value %s clamped to %s", typed_value, clamped)
            state, _ = self._render_value(clamped)
            self._state = state.with_diagnostic(diagnostic)
            return self._state

        rendered = render_typed(
            integer_part,
            fraction_part,
            negative,
            typed.had_separator,
            self._mode,
            self._formatting,
            validation,
        )
        self._state = EngineState(
            value=typed_value,
            raw_digits=rendered.raw_value,
            sign=negative,
            text=rendered.text,
        ).with_diagnostic(diagnostic)
        return self._state

    def on_value_set(self, value: float | None) -> EngineState:
        """Apply a programmatic value.

        Args:
            value: New value, or None to clear

        Returns:
            New engine state, or the current one when the value is unchanged
            at the active fraction scale
        """
        if values_equal_at_scale(
            value, self._state.value, self._formatting.max_fraction_digits
        ):
            logger.debug("Value %s equals current value; skipping", value)
            return self._state
        self._state = self._state_from_value(value)
        return self._state

    def reconfigure(
        self,
        *,
        formatting: FormattingOptions | None = None,
        validation: ValidationOptions | None = None,
        mode: DisplayMode | None = None,
    ) -> EngineState:
        """Swap configuration and recompute from the current value.

        Args:
            formatting: Replacement formatting options
            validation: Replacement validation options
            mode: Replacement display mode

        Returns:
            Recomputed engine state
        """
        if formatting is not None:
            self._formatting = formatting
        if validation is not None:
            self._validation = validation
        if mode is not None:
            self._mode = DisplayMode.from_mask(mode)
        logger.debug(
            "Reconfigured session: %s %s mode=%s",
            self._formatting.currency_code,
            self._formatting.locale,
            self._mode,
        )
        self._state = self._state_from_value(self._state.value)
        return self._state

    # ========================================================================
    # Internals
    # ========================================================================

    def _render_value(self, value: float | None) -> tuple[EngineState, bool]:
        validation = self._validation
        fraction_digits = self._formatting.max_fraction_digits

        clamped = clamp_value(
            value,
            allow_negative=validation.allow_negative,
            minimum_value=validation.minimum_value,
            maximum_value=validation.maximum_value,
        )
        encoded = encode_value(clamped, fraction_digits)
        capped = cap_digits(encoded.digits, fraction_digits, validation.digit_cap)
        sign = encoded.sign and validation.allow_negative
        new_value = decode_digits(
            capped.digits, encoded.sign, fraction_digits, allow_negative=validation.allow_negative
        )
        if capped.was_capped:
            logger.debug("Value %s truncated to %s by digit cap", value, new_value)
        rendered = render_digits(capped.digits, sign, self._mode, self._formatting, validation)
        state = EngineState(
            value=new_value,
            raw_digits=rendered.raw_value,
            sign=sign,
            text=rendered.text,
        )
        return state, capped.was_capped

    def _state_from_value(self, value: float | None) -> EngineState:
        state, was_capped = self._render_value(value)
        diagnostic = compose_diagnostic(
            ValidationInput.from_options(
                self._validation,
                value=state.value,
                sign=state.sign,
                was_capped=was_capped,
            )
        )
        return state.with_diagnostic(diagnostic)
