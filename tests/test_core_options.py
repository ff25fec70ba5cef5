"""Tests for FormattingOptions, ValidationOptions and DisplayMode."""

from __future__ import annotations

import doctest

import pytest

import currencymask.core.options as options_module
from currencymask import DisplayMode, FormattingOptions, ValidationOptions


class TestFormattingOptions:
    """Construction-time validation and the create() factory."""

    def test_create_defaults(self) -> None:
        options = FormattingOptions.create("USD")
        assert options.currency_code == "USD"
        assert options.locale is None
        assert (options.min_fraction_digits, options.max_fraction_digits) == (2, 2)

    def test_create_uppercases_code(self) -> None:
        assert FormattingOptions.create("eur", "de-DE").currency_code == "EUR"

    def test_create_resolves_fraction_digits(self) -> None:
        options = FormattingOptions.create(
            "USD", fraction_digits=0, maximum_fraction_digits=2
        )
        assert (options.min_fraction_digits, options.max_fraction_digits) == (0, 2)

    def test_allows_fraction(self) -> None:
        assert FormattingOptions.create("USD").allows_fraction is True
        assert FormattingOptions.create("JPY", fraction_digits=0).allows_fraction is False

    def test_rejects_negative_minimum(self) -> None:
        with pytest.raises(ValueError, match="min_fraction_digits"):
            FormattingOptions("USD", min_fraction_digits=-1)

    def test_rejects_max_below_min(self) -> None:
        with pytest.raises(ValueError, match="max_fraction_digits"):
            FormattingOptions("USD", min_fraction_digits=3, max_fraction_digits=2)

    def test_is_frozen(self) -> None:
        options = FormattingOptions.create("USD")
        with pytest.raises(AttributeError):
            options.currency_code = "EUR"  # type: ignore[misc]


class TestValidationOptions:
    """Construction-time validation and the effective digit cap."""

    def test_defaults(self) -> None:
        options = ValidationOptions()
        assert options.allow_negative is False
        assert options.digit_cap is None

    def test_zero_cap_is_unlimited(self) -> None:
        assert ValidationOptions(max_integer_digits=0).digit_cap is None

    def test_cap(self) -> None:
        assert ValidationOptions(max_integer_digits=3).digit_cap == 3

    def test_rejects_negative_cap(self) -> None:
        with pytest.raises(ValueError, match="max_integer_digits"):
            ValidationOptions(max_integer_digits=-1)

    def test_rejects_inverted_bounds(self) -> None:
        with pytest.raises(ValueError, match="minimum_value"):
            ValidationOptions(minimum_value=10, maximum_value=5)

    def test_equal_bounds_allowed(self) -> None:
        options = ValidationOptions(minimum_value=5, maximum_value=5)
        assert options.minimum_value == options.maximum_value


class TestDisplayMode:
    """DisplayMode values and mask-name resolution."""

    def test_str_values(self) -> None:
        assert str(DisplayMode.CURRENCY) == "currency"
        assert str(DisplayMode.RAW) == "raw"

    @pytest.mark.parametrize(
        ("mask", "expected"),
        [
            ("currency", DisplayMode.CURRENCY),
            ("raw", DisplayMode.RAW),
            ("none", DisplayMode.RAW),
            (DisplayMode.RAW, DisplayMode.RAW),
        ],
    )
    def test_from_mask(self, mask: str, expected: DisplayMode) -> None:
        assert DisplayMode.from_mask(mask) is expected

    def test_from_mask_unknown(self) -> None:
        with pytest.raises(ValueError):
            DisplayMode.from_mask("percent")


class TestDocstringExamples:
    """Examples in the options docstrings run as written."""

    def test_examples_pass(self) -> None:
        results = doctest.testmod(options_module)
        assert results.attempted > 0
        assert results.failed == 0
