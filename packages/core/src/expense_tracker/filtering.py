"""Transaction filtering and list-view helpers.

All functions are pure. ``today`` is resolved once per call so that every
transaction in a list is checked against the same default upper date bound.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Literal, Optional

from .models import Transaction, TransactionFilter

SortField = Literal["date", "amount", "description"]

_EPOCH = date(1970, 1, 1)

_SORT_KEYS = {
    "date": lambda t: t.date,
    "amount": lambda t: t.amount,
    "description": lambda t: t.description.casefold(),
}


def matches(
    transaction: Transaction,
    filter: TransactionFilter,
    today: Optional[date] = None,
) -> bool:
    """Check a transaction against every present field of a filter.

    All present fields must match. Within ``tags`` any one listed tag is
    enough. When either date bound is given, a missing ``date_from`` means
    the epoch and a missing ``date_to`` means ``today``.
    """
    if filter.type is not None and transaction.type != filter.type:
        return False

    if filter.category and transaction.category_name != filter.category:
        return False

    if filter.date_from is not None or filter.date_to is not None:
        start = filter.date_from or _EPOCH
        end = filter.date_to or today or date.today()
        if not start <= transaction.date <= end:
            return False

    if filter.amount_min is not None and transaction.amount < filter.amount_min:
        return False
    if filter.amount_max is not None and transaction.amount > filter.amount_max:
        return False

    if filter.search_term:
        if filter.search_term.lower() not in transaction.search_text():
            return False

    if filter.tags:
        if not any(tag in transaction.tags for tag in filter.tags):
            return False

    return True


def filter_transactions(
    transactions: Iterable[Transaction],
    filter: Optional[TransactionFilter] = None,
    today: Optional[date] = None,
) -> list[Transaction]:
    """Return the transactions matching ``filter``, in their original order."""
    if filter is None or filter.is_empty:
        return list(transactions)
    today = today or date.today()
    return [t for t in transactions if matches(t, filter, today)]


def sort_transactions(
    transactions: Iterable[Transaction],
    by: SortField = "date",
    descending: bool = True,
) -> list[Transaction]:
    """Sort for list display. Equal keys keep their input order."""
    if by not in _SORT_KEYS:
        raise ValueError(f"Unsupported sort field: {by}")
    return sorted(transactions, key=_SORT_KEYS[by], reverse=descending)


def unique_values(transactions: Iterable[Transaction], field: str) -> list[str]:
    """Sorted distinct non-empty values of a field, e.g. for dropdowns.

    List fields such as ``tags`` contribute each of their items.
    """
    values = set()
    for t in transactions:
        value = getattr(t, field)
        if isinstance(value, list):
            values.update(value)
        else:
            values.add(value)
    return sorted({v.value if isinstance(v, Enum) else str(v) for v in values if v})


def summarize_totals(transactions: Sequence[Transaction]) -> tuple[Decimal, Decimal]:
    """Return ``(expenses, revenue)`` sums for a (filtered) list."""
    expenses = sum((t.amount for t in transactions if t.is_expense), Decimal("0"))
    revenue = sum((t.amount for t in transactions if t.is_revenue), Decimal("0"))
    return expenses, revenue
