"""Per-category aggregation.

Grouping uses ``category_name`` exactly as stored on each transaction.
Names differing only in case or whitespace are separate categories.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Optional

from .categories import category_color
from .models import Category, CategoryTotal, Transaction

TOP_CATEGORY_LIMIT = 10


def group_by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Sum amounts per category name, keyed in first-seen order."""
    totals: dict[str, Decimal] = {}
    for t in transactions:
        totals[t.category_name] = totals.get(t.category_name, Decimal("0")) + t.amount
    return totals


def top_categories(
    transactions: Iterable[Transaction],
    limit: int = TOP_CATEGORY_LIMIT,
    categories: Optional[Sequence[Category]] = None,
) -> list[CategoryTotal]:
    """Return up to ``limit`` categories by descending total.

    The caller passes transactions of a single type. Categories with equal
    totals keep the order in which they were first encountered.

    Args:
        transactions: Transactions already restricted to one type.
        limit: Maximum number of entries.
        categories: Optional category definitions used to attach colors.
    """
    ranked = sorted(
        group_by_category(transactions).items(),
        key=lambda item: item[1],
        reverse=True,
    )
    return [
        CategoryTotal(
            name=name,
            value=value,
            color=category_color(categories, name) if categories is not None else None,
        )
        for name, value in ranked[:limit]
    ]
