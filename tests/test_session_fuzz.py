"""Intensive keystroke-sequence fuzzing for InputSession.

Marked fuzz: skipped in normal runs. Run with: pytest -m fuzz
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from currencymask import EngineState, FormattingOptions, InputSession, ValidationOptions
from currencymask.core import decode_digits
from tests.strategies import (
    amounts,
    bounded_validation_options,
    field_texts,
    formatting_options,
)

pytestmark = pytest.mark.fuzz


@settings(max_examples=1000, suppress_health_check=[HealthCheck.too_slow])
@given(
    formatting_options(),
    bounded_validation_options(),
    st.lists(st.one_of(field_texts(), amounts(max_magnitude=1e8)), max_size=12),
)
def test_event_sequences_keep_state_consistent(
    formatting: FormattingOptions,
    validation: ValidationOptions,
    events: list[str | float],
) -> None:
    """Any interleaving of keystrokes and values yields a coherent state."""
    session = InputSession(formatting, validation)
    for event in events:
        if isinstance(event, str):
            state = session.on_text_changed(event)
        else:
            state = session.on_value_set(event)

        assert state is session.state
        assert (
            decode_digits(state.raw_digits, state.sign, formatting.max_fraction_digits)
            == state.value
        )
        if state.value is None:
            assert state.raw_digits == ""
            assert state.text == ""
        if state.error is None:
            assert state.error_code is None
        if state.sign:
            assert validation.allow_negative

    assert session.on_text_changed("") == EngineState.EMPTY
