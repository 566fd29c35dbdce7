"""
Tests for amount parsing helpers
"""
from decimal import Decimal

import pytest

from infrastructure.mpesa.amounts import parse_amount, is_numeric_like


class TestParseAmount:
    """Test amount parsing."""

    @pytest.mark.parametrize("token", ["0.00", "0", " 0.00 "])
    def test_zero_literals(self, token):
        assert parse_amount(token) == Decimal("0")

    @pytest.mark.parametrize("token", ["", ".", "abc", None, "   "])
    def test_unparseable(self, token):
        assert parse_amount(token) is None

    def test_thousands_separator(self):
        amount = parse_amount("4,630.00")
        assert amount == Decimal("4630.00")
        assert isinstance(amount, Decimal)

    def test_currency_prefix(self):
        assert parse_amount("Ksh 1,200.50") == Decimal("1200.50")

    def test_only_last_dot_is_decimal_point(self):
        assert parse_amount("1.234.56") == Decimal("1234.56")

    def test_two_decimal_places(self):
        assert str(parse_amount("157")) == "157.00"

    def test_exact_decimal_not_float(self):
        assert parse_amount("0.10") + parse_amount("0.20") == Decimal("0.30")


class TestIsNumericLike:
    """Test numeric token detection."""

    @pytest.mark.parametrize("token", ["4,630.00", "157.00", "0.00", "Ksh1,000", "KES 50"])
    def test_numeric(self, token):
        assert is_numeric_like(token) is True

    @pytest.mark.parametrize("token", ["Send", "Money", "", None, "(Buy", "nan", "inf"])
    def test_not_numeric(self, token):
        assert is_numeric_like(token) is False

    def test_too_many_digits(self):
        assert parse_amount("9" * 30) is None
        assert parse_amount("9" * 30 + ".00") is None
