"""Expense Tracker - Transaction filtering, analytics and CSV exchange."""

__version__ = "0.1.0"

from .analytics import AnalyticsCalculator, calculate_analytics
from .csv_codec import (
    candidates_to_transactions,
    export_filename,
    export_to_csv,
    import_csv,
    import_json,
)
from .filtering import filter_transactions, matches, sort_transactions
from .formatting import format_currency, format_date
from .models import (
    AnalyticsResult,
    Category,
    Transaction,
    TransactionFilter,
    TransactionType,
)
from .store import ExpenseTracker

__all__ = [
    "AnalyticsCalculator",
    "calculate_analytics",
    "filter_transactions",
    "matches",
    "sort_transactions",
    "export_to_csv",
    "export_filename",
    "import_csv",
    "import_json",
    "candidates_to_transactions",
    "format_currency",
    "format_date",
    "AnalyticsResult",
    "Category",
    "Transaction",
    "TransactionFilter",
    "TransactionType",
    "ExpenseTracker",
]
