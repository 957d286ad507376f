"""Presentation helpers for amounts and dates."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from .trends import MONTH_ABBREVIATIONS

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "THB": "฿",
}

# Currencies formatted without minor units
ZERO_DECIMAL_CURRENCIES = {"JPY"}


def format_currency(amount: Union[Decimal, int, float, str], currency: str = "USD") -> str:
    """Format an amount with symbol, thousands grouping and two decimals.

    >>> format_currency(Decimal("1234.5"))
    '$1,234.50'
    >>> format_currency(-3)
    '-$3.00'

    Currencies without a known symbol are prefixed with their code,
    e.g. ``'CHF 10.00'``.
    """
    value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
    code = currency.upper()
    decimals = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    value = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.{decimals}f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {digits}"
    return f"{sign}{symbol}{digits}"


def format_date(value: Union[str, date]) -> str:
    """Format an ISO date as 'Jan 05, 2025'.

    Raises:
        ValueError: If a string is not an ISO 8601 date.
    """
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day:02d}, {value.year:04d}"
