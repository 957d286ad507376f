"""Tests for presentation helpers."""

from datetime import date
from decimal import Decimal

import pytest

from expense_tracker.formatting import format_currency, format_date


class TestFormatCurrency:
    """Test suite for format_currency."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("0"), "$0.00"),
            (Decimal("1234.5"), "$1,234.50"),
            (1234567, "$1,234,567.00"),
            (0.125, "$0.13"),
            ("99.994", "$99.99"),
            (Decimal("-3"), "-$3.00"),
        ],
    )
    def test_usd(self, amount, expected):
        """USD amounts get a symbol, grouping and two places."""
        assert format_currency(amount) == expected

    def test_known_symbol(self):
        """Known currencies use their symbol."""
        assert format_currency(Decimal("10"), "EUR") == "€10.00"

    def test_zero_decimal_currency(self):
        """JPY is rounded to whole units."""
        assert format_currency(Decimal("1234.5"), "JPY") == "¥1,235"

    def test_unknown_currency_uses_code(self):
        """Unknown currencies are prefixed with their code."""
        assert format_currency(Decimal("10"), "chf") == "CHF 10.00"

    def test_tiny_negative_rounds_to_zero(self):
        """Values rounding to zero have no minus sign."""
        assert format_currency(Decimal("-0.001")) == "$0.00"


class TestFormatDate:
    """Test suite for format_date."""

    def test_iso_string(self):
        """ISO dates render as Mon DD, YYYY."""
        assert format_date("2025-01-05") == "Jan 05, 2025"

    def test_iso_datetime_string(self):
        """The time part of an ISO timestamp is ignored."""
        assert format_date("2025-12-31T23:59:00Z") == "Dec 31, 2025"

    def test_date_object(self):
        """date objects are accepted."""
        assert format_date(date(2024, 2, 29)) == "Feb 29, 2024"

    def test_malformed_string_raises(self):
        """Malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            format_date("not-a-date")
