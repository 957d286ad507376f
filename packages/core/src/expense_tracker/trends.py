"""Trailing monthly trend buckets.

The window is anchored to the current month, not to the dates in the data.
Transactions outside the window are left out of the trend series only.
"""

from calendar import monthrange
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from .models import MonthlyTrend, Transaction

TREND_MONTHS = 12

# English abbreviations regardless of the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return ``(year, month)`` moved by ``offset`` months (negative goes back)."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])


def month_label(year: int, month: int) -> str:
    """Short label such as 'Jan 2025'."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year:04d}"


def month_window(today: date, months: int = TREND_MONTHS) -> list[tuple[date, date]]:
    """Bounds of the trailing ``months`` calendar months, oldest first.

    The last bucket is the month containing ``today``.
    """
    if months < 1:
        raise ValueError("months must be at least 1")
    window = []
    for offset in range(months - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        window.append(month_bounds(year, month))
    return window


def monthly_trends(
    transactions: Iterable[Transaction],
    today: date,
    months: int = TREND_MONTHS,
) -> list[MonthlyTrend]:
    """Sum expenses and revenue into each bucket of the trailing window.

    Always returns exactly ``months`` buckets, zero-valued when empty.
    """
    window = month_window(today, months)
    expenses = [Decimal("0")] * len(window)
    revenue = [Decimal("0")] * len(window)
    index_by_month = {(start.year, start.month): i for i, (start, _) in enumerate(window)}

    for t in transactions:
        i = index_by_month.get((t.date.year, t.date.month))
        if i is None:
            continue
        if t.is_expense:
            expenses[i] += t.amount
        else:
            revenue[i] += t.amount

    return [
        MonthlyTrend(
            month=month_label(start.year, start.month),
            start_date=start,
            end_date=end,
            expenses=expenses[i],
            revenue=revenue[i],
        )
        for i, (start, end) in enumerate(window)
    ]
