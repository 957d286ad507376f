"""Summary analytics over a transaction list.

The result depends only on the transactions and on the ``today`` used to
anchor the trailing trend window. ``today`` is captured once per
calculation so every part of a result agrees on it.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from typing import Optional

import structlog

from .aggregation import TOP_CATEGORY_LIMIT, top_categories
from .models import AnalyticsResult, Category, Transaction
from .trends import TREND_MONTHS, monthly_trends

logger = structlog.get_logger()


class AnalyticsCalculator:
    """
    Compose totals, monthly averages, top categories and monthly trends.

    The calculator holds only its settings, so one instance can be shared
    freely between callers.
    """

    def __init__(self, top_n: int = TOP_CATEGORY_LIMIT, months: int = TREND_MONTHS):
        """
        Args:
            top_n: Maximum entries in each top-category list.
            months: Size of the trailing monthly trend window.
        """
        if top_n < 1:
            raise ValueError("top_n must be at least 1")
        if months < 1:
            raise ValueError("months must be at least 1")
        self.top_n = top_n
        self.months = months

    def calculate(
        self,
        transactions: Iterable[Transaction],
        today: Optional[date] = None,
        categories: Optional[Sequence[Category]] = None,
    ) -> AnalyticsResult:
        """
        Calculate analytics for a transaction list.

        Args:
            transactions: Full transaction list (unfiltered).
            today: Anchor for the trend window; defaults to the current date.
            categories: Optional category definitions for chart colors.

        Returns:
            AnalyticsResult. An empty list still yields all trend buckets.
        """
        today = today or date.today()
        transactions = list(transactions)

        expenses = [t for t in transactions if t.is_expense]
        revenues = [t for t in transactions if t.is_revenue]

        total_expenses = sum((t.amount for t in expenses), Decimal("0"))
        total_revenue = sum((t.amount for t in revenues), Decimal("0"))

        # Distinct YYYY-MM months, floored at 1 to avoid dividing by zero
        months_with_data = len({t.month_key for t in transactions})
        month_count = max(months_with_data, 1)

        result = AnalyticsResult(
            total_expenses=total_expenses,
            total_revenue=total_revenue,
            avg_monthly_expenses=total_expenses / month_count,
            avg_monthly_revenue=total_revenue / month_count,
            top_expense_categories=top_categories(expenses, self.top_n, categories),
            top_revenue_categories=top_categories(revenues, self.top_n, categories),
            monthly_trends=monthly_trends(transactions, today, self.months),
            months_with_data=months_with_data,
            generated_for=today,
        )

        logger.debug(
            "analytics_calculated",
            transactions=len(transactions),
            months_with_data=months_with_data,
            total_expenses=str(total_expenses),
            total_revenue=str(total_revenue),
            today=today.isoformat(),
        )
        return result


def calculate_analytics(
    transactions: Iterable[Transaction],
    today: Optional[date] = None,
    categories: Optional[Sequence[Category]] = None,
) -> AnalyticsResult:
    """Calculate analytics with the default top-10 and 12-month settings."""
    return AnalyticsCalculator().calculate(transactions, today, categories)
