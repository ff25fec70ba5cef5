"""Tests for fraction-digit resolution and integer-digit capping."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from currencymask.core import CappedDigits, FractionDigits, cap_digits, resolve_fraction_digits
from tests.strategies import fraction_digit_counts, scaled_digit_strings

# ============================================================================
# resolve_fraction_digits
# ============================================================================


class TestResolveFractionDigits:
    """Resolution order: explicit override, legacy setting, default of 2."""

    def test_defaults_to_two(self) -> None:
        assert resolve_fraction_digits() == FractionDigits(2, 2)

    def test_legacy_applies_to_both_ends(self) -> None:
        assert resolve_fraction_digits(0) == FractionDigits(0, 0)
        assert resolve_fraction_digits(3) == FractionDigits(3, 3)

    def test_explicit_overrides_legacy(self) -> None:
        assert resolve_fraction_digits(2, minimum=0) == FractionDigits(0, 2)
        assert resolve_fraction_digits(2, maximum=4) == FractionDigits(2, 4)

    def test_max_raised_to_min(self) -> None:
        assert resolve_fraction_digits(minimum=4, maximum=1) == FractionDigits(4, 4)

    def test_negative_minimum_floored(self) -> None:
        assert resolve_fraction_digits(minimum=-3, maximum=1) == FractionDigits(0, 1)

    @given(
        st.one_of(st.none(), st.integers(-5, 10)),
        st.one_of(st.none(), st.integers(-5, 10)),
        st.one_of(st.none(), st.integers(-5, 10)),
    )
    def test_result_is_ordered(
        self, legacy: int | None, minimum: int | None, maximum: int | None
    ) -> None:
        resolved = resolve_fraction_digits(legacy, minimum, maximum)
        assert 0 <= resolved.minimum <= resolved.maximum


# ============================================================================
# cap_digits
# ============================================================================


class TestCapDigits:
    """cap_digits keeps the least-significant window when over the cap."""

    def test_unset_cap_passes_through(self) -> None:
        assert cap_digits("123456789", 2) == CappedDigits("123456789", False)

    def test_zero_cap_means_unlimited(self) -> None:
        assert cap_digits("123456789", 2, 0) == CappedDigits("123456789", False)

    def test_within_cap(self) -> None:
        assert cap_digits("123456", 2, 4) == CappedDigits("123456", False)

    def test_over_cap_truncates_from_front(self) -> None:
        assert cap_digits("1234567", 2, 4) == CappedDigits("234567", True)

    def test_short_input_counts_no_integer_digits(self) -> None:
        """Inputs shorter than the fraction width have no integer digits."""
        assert cap_digits("5", 2, 1) == CappedDigits("5", False)

    def test_zero_fraction_digits(self) -> None:
        assert cap_digits("1234", 0, 2) == CappedDigits("34", True)

    @given(
        scaled_digit_strings(max_length=20),
        fraction_digit_counts(),
        st.integers(min_value=1, max_value=8),
    )
    def test_capped_length_is_exact(self, digits: str, fraction: int, cap: int) -> None:
        """A capped string holds exactly cap + fraction digits."""
        result = cap_digits(digits, fraction, cap)
        if result.was_capped:
            assert len(result.digits) == cap + fraction
            assert digits.endswith(result.digits)
        else:
            assert result.digits == digits

    @pytest.mark.parametrize("cap", [None, 0])
    def test_falsy_cap_never_caps(self, cap: int | None) -> None:
        assert cap_digits("9" * 30, 2, cap).was_capped is False
