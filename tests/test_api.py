"""Tests for the UI binding surface and the public package namespace."""

from __future__ import annotations

import currencymask
from currencymask import (
    DisplayMode,
    EngineState,
    FormattingOptions,
    InputSession,
    ValidationOptions,
    api,
)


class TestBindingSurface:
    """init / on_text_changed / on_value_set / reconfigure."""

    def test_init_returns_session_with_initial_state(self) -> None:
        session = api.init(5, FormattingOptions.create("USD", "en-US"))
        assert isinstance(session, InputSession)
        assert session.state.text == "$5.00"

    def test_init_accepts_mask_names(self) -> None:
        session = api.init(None, FormattingOptions.create("USD", "en-US"), mode="none")
        assert session.mode is DisplayMode.RAW

    def test_each_call_returns_full_state(self) -> None:
        session = api.init(None, FormattingOptions.create("USD", "en-US"))
        typed = api.on_text_changed(session, "1234")
        assert isinstance(typed, EngineState)
        assert (typed.value, typed.text, typed.raw_digits, typed.error) == (
            1234,
            "$1,234",
            "123400",
            None,
        )

        set_state = api.on_value_set(session, 1)
        assert set_state is session.state
        assert set_state.text == "$1.00"

    def test_reconfigure(self) -> None:
        session = api.init(12.5, FormattingOptions.create("USD", "en-US"))
        state = api.reconfigure(session, mode="raw")
        assert state.text == "12.50"

    def test_validation_passed_through(self) -> None:
        session = api.init(
            None,
            FormattingOptions.create("USD", "en-US"),
            ValidationOptions(max_integer_digits=2),
        )
        assert api.on_text_changed(session, "123").error == "Maximum digits is 2"


class TestPackageNamespace:
    """Top-level exports."""

    def test_version(self) -> None:
        assert isinstance(currencymask.__version__, str)
        assert currencymask.__version__

    def test_all_exports_resolve(self) -> None:
        for name in currencymask.__all__:
            assert hasattr(currencymask, name), name
