"""Tests for the scientific-notation formatter."""

import math

import pytest

from scicalc_pkg.formatter import format_scientific


class TestFormatScientific:
    """Test the fixed display format."""

    def test_zero(self):
        assert format_scientific(0) == "0"
        assert format_scientific(0.0) == "0"
        assert format_scientific(-0.0) == "0"

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1234, "1.234000 x 10^3"),
            (0.00045, "4.500000 x 10^-4"),
            (1, "1.000000 x 10^0"),
            (4.0, "4.000000 x 10^0"),
            (-1234, "-1.234000 x 10^3"),
            (9e9, "9.000000 x 10^9"),
            (3e8, "3.000000 x 10^8"),
            (6.626e-34, "6.626000 x 10^-34"),
            (0.5, "5.000000 x 10^-1"),
        ],
    )
    def test_values(self, number, expected):
        assert format_scientific(number) == expected

    def test_short_decimals_still_scientific(self):
        assert format_scientific(2.5) == "2.500000 x 10^0"
        assert format_scientific(100) == "1.000000 x 10^2"

    def test_custom_digits(self):
        assert format_scientific(1234, digits=2) == "1.23 x 10^3"

    def test_subnormal(self):
        assert format_scientific(5e-324) == "4.940656 x 10^-324"
        assert format_scientific(-5e-324) == "-4.940656 x 10^-324"

    @pytest.mark.parametrize("number", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, number):
        with pytest.raises(ValueError):
            format_scientific(number)
