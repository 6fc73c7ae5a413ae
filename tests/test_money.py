"""
Tests for money helpers
"""

import pytest
from decimal import Decimal

from eticaret.services.money import add, format_money, multiply, round_money, to_decimal, to_float


class TestToDecimal:
    """Tests for to_decimal."""

    def test_float_keeps_short_representation(self):
        assert to_decimal(19.9) == Decimal("19.9")
        assert str(to_decimal(0.1)) == "0.1"

    def test_none_and_garbage(self):
        assert to_decimal(None) == Decimal("0")
        assert to_decimal("abc") == Decimal("0")

    def test_decimal_passthrough(self):
        value = Decimal("12.345")
        assert to_decimal(value) is value


class TestArithmetic:
    """Tests for rounding and arithmetic."""

    @pytest.mark.parametrize("value,expected", [
        ("1.005", Decimal("1.01")),
        ("1.004", Decimal("1.00")),
        (2.675, Decimal("2.68")),
        (-1.005, Decimal("-1.01")),
    ])
    def test_round_money_half_up(self, value, expected):
        assert round_money(value) == expected

    def test_add_and_multiply(self):
        assert add(0.1, 0.2) == Decimal("0.3")
        assert multiply("19.99", 3) == Decimal("59.97")

    def test_to_float(self):
        assert to_float(Decimal("340.00")) == 340.0


class TestFormatMoney:
    """Tests for lira formatting."""

    @pytest.mark.parametrize("value,expected", [
        (340, "₺340,00"),
        ("1234.5", "₺1.234,50"),
        (Decimal("999999.995"), "₺1.000.000,00"),
        (-12.345, "-₺12,35"),
        (0.5, "₺0,50"),
    ])
    def test_format(self, value, expected):
        assert format_money(value) == expected
