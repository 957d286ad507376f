"""Shared fixtures for expense tracker tests."""

from datetime import date
from decimal import Decimal

import pytest

from expense_tracker.models import Transaction, TransactionType

# Fixed "today" so trend windows are deterministic
TODAY = date(2025, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults."""

    def _make(
        type: str = "expense",
        amount="10",
        category_name: str = "Food",
        description: str = "Item",
        on: date = TODAY,
        **extra,
    ) -> Transaction:
        return Transaction(
            type=TransactionType(type),
            amount=Decimal(str(amount)),
            category_name=category_name,
            description=description,
            date=on,
            **extra,
        )

    return _make


@pytest.fixture
def basic_transactions(make_transaction) -> list[Transaction]:
    """Two Food expenses and one Salary revenue in the same month."""
    return [
        make_transaction("expense", 100, "Food", "Groceries", date(2025, 6, 2)),
        make_transaction("expense", 50, "Food", "Dinner", date(2025, 6, 10)),
        make_transaction("revenue", 200, "Salary", "June pay", date(2025, 6, 1)),
    ]
