"""Data models for the expense tracker.

- Transactions, categories and filters (transaction.py)
- Derived analytics results (analytics.py)
"""

from expense_tracker.models.analytics import (
    AnalyticsResult,
    CategoryTotal,
    MonthlyTrend,
)
from expense_tracker.models.transaction import (
    Category,
    RecurringFrequency,
    Transaction,
    TransactionFilter,
    TransactionType,
    new_id,
)

__all__ = [
    # Enumerations
    "TransactionType",
    "RecurringFrequency",
    # Records
    "Transaction",
    "Category",
    "TransactionFilter",
    "new_id",
    # Analytics
    "CategoryTotal",
    "MonthlyTrend",
    "AnalyticsResult",
]
