"""
Abbreviate component unit tests.

Tests for magnitude abbreviation, rounding, coercion, and rules config.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from src.components.abbreviate import (
    AbbreviateConfig,
    AbbreviateInput,
    InvalidInputError,
    abbreviate,
    coerce_number,
    run,
)

# --- Mock Rules ---


class MockRules:
    """In-memory rules port for testing."""

    def __init__(
        self,
        scales: list[tuple[float, str]] | None = None,
        decimals: int = 1,
    ) -> None:
        self._scales = scales or [(1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K")]
        self._decimals = decimals

    def get_scales(self) -> list[tuple[float, str]]:
        return self._scales

    def get_decimals(self) -> int:
        return self._decimals


# --- Magnitude Tests ---


class TestMagnitudes:
    """Test suffix selection by magnitude."""

    def test_below_thousand_is_plain(self) -> None:
        assert abbreviate(999) == "999"

    def test_exactly_thousand(self) -> None:
        """Trailing .0 is dropped."""
        assert abbreviate(1000) == "1K"

    def test_thousands_one_decimal(self) -> None:
        assert abbreviate(1234) == "1.2K"
        assert abbreviate(5432) == "5.4K"

    def test_millions(self) -> None:
        assert abbreviate(1500000) == "1.5M"

    def test_billions_from_string(self) -> None:
        assert abbreviate("2500000000") == "2.5B"

    def test_whole_billions_drop_decimal(self) -> None:
        assert abbreviate(2000000000) == "2B"

    def test_string_thousands(self) -> None:
        assert abbreviate("5000") == "5K"

    def test_above_largest_scale_keeps_suffix(self) -> None:
        assert abbreviate(1_234_000_000_000) == "1234B"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1_000_000, "1M"),
            (999_999, "1000K"),
            (1_000_000_000, "1B"),
            (999_999_999, "1000M"),
        ],
    )
    def test_threshold_boundaries(self, value: int, expected: str) -> None:
        """Rounding never promotes to the next suffix."""
        assert abbreviate(value) == expected


class TestRounding:
    """Test one-decimal rounding."""

    def test_half_rounds_away_from_zero(self) -> None:
        assert abbreviate(1250) == "1.3K"
        assert abbreviate(1350) == "1.4K"

    def test_rounds_down_below_half(self) -> None:
        assert abbreviate(1249) == "1.2K"

    def test_rounds_up_to_whole(self) -> None:
        assert abbreviate(1960) == "2K"

    def test_fractional_input(self) -> None:
        assert abbreviate(1500.75) == "1.5K"


class TestPlainValues:
    """Test values that take the plain branch."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (7, "7"),
            (999.0, "999"),
            (12.5, "12.5"),
            (0.25, "0.25"),
            ("42", "42"),
            ("  3.75 ", "3.75"),
            (1e-7, "0.0000001"),
            (-0.000025, "-0.000025"),
            ("1.5e-7", "0.00000015"),
        ],
    )
    def test_plain_string(self, value: float | int | str, expected: str) -> None:
        assert abbreviate(value) == expected

    def test_negative_values_are_not_scaled(self) -> None:
        """Thresholds compare against the signed value."""
        assert abbreviate(-1500000) == "-1500000"
        assert abbreviate(-999) == "-999"
        assert abbreviate("-2.5") == "-2.5"

    def test_exponent_strings_accepted(self) -> None:
        assert abbreviate("1.5e6") == "1.5M"
        assert abbreviate(".5") == "0.5"
        assert abbreviate("+2500") == "2.5K"

    def test_large_negative_integer_keeps_digits(self) -> None:
        assert abbreviate(-12345678901234567891) == "-12345678901234567891"


class TestInvalidInput:
    """Test rejected inputs."""

    @pytest.mark.parametrize(
        "value",
        [
            "not a number",
            "",
            "12abc",
            "nan",
            "inf",
            float("nan"),
            float("inf"),
            float("-inf"),
            True,
            None,
            [1000],
            10**400,
            "1_000",
            "\uff11\uff10\uff10\uff10",
            "0x10",
            "1e5e5",
            "+-1",
        ],
    )
    def test_invalid_raises(self, value: object) -> None:
        with pytest.raises(InvalidInputError):
            abbreviate(value)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="valid number"):
            abbreviate("abc")

    def test_error_keeps_value(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            abbreviate("abc")
        assert exc_info.value.value == "abc"


class TestCoercion:
    """Test number coercion."""

    def test_integer_kept(self) -> None:
        result = coerce_number(42)
        assert result == 42
        assert isinstance(result, int)

    def test_string_parsed_as_float(self) -> None:
        result = coerce_number("42")
        assert result == 42.0
        assert isinstance(result, float)

    def test_other_real_types(self) -> None:
        assert coerce_number(Fraction(3, 2)) == 1.5

    def test_decimal_rejected(self) -> None:
        """Decimal is not a registered Real."""
        with pytest.raises(InvalidInputError):
            coerce_number(Decimal("1.5"))


class TestConfig:
    """Test custom scale tables."""

    def test_custom_decimals(self) -> None:
        config = AbbreviateConfig(decimals=2)
        assert abbreviate(1234, config) == "1.23K"
        assert abbreviate(1000, config) == "1K"
        assert abbreviate(1500, config) == "1.50K"

    def test_zero_decimals(self) -> None:
        config = AbbreviateConfig(decimals=0)
        assert abbreviate(1500, config) == "2K"
        assert abbreviate(1234567, config) == "1M"

    def test_custom_scales(self) -> None:
        config = AbbreviateConfig(scales=((1_000_000_000_000, "T"), (1_000, "k")))
        assert abbreviate(2_500_000_000_000, config) == "2.5T"
        assert abbreviate(2_500_000, config) == "2500k"


class TestIdempotence:
    """Same input gives same output."""

    def test_repeat_calls(self) -> None:
        assert abbreviate(1234567) == abbreviate(1234567) == "1.2M"


# --- Shell Tests ---


class TestRun:
    """Test the component entry point."""

    def test_run_success(self) -> None:
        result = run(AbbreviateInput(value=1500000))

        assert result.success is True
        assert result.text == "1.5M"
        assert result.errors == []

    def test_run_invalid_input(self) -> None:
        result = run(AbbreviateInput(value="not a number"))

        assert result.success is False
        assert result.text is None
        assert len(result.errors) == 1
        assert result.errors[0].code == "invalid_input"

    def test_run_with_rules(self) -> None:
        rules = MockRules(scales=[(1_000, "k")], decimals=2)
        result = run(AbbreviateInput(value=1234), rules=rules)

        assert result.text == "1.23k"
