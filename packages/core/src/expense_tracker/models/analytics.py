"""Derived analytics models.

These values have no identity of their own. They are recomputed from the
current transaction list every time and never persisted.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class CategoryTotal(BaseModel):
    """Summed amount for one category name, ready for a chart."""

    name: str
    value: Decimal = Field(default=Decimal("0"))
    color: Optional[str] = None


class MonthlyTrend(BaseModel):
    """Expense and revenue totals for one calendar month."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "month": "Jan 2025",
                    "start_date": "2025-01-01",
                    "end_date": "2025-01-31",
                    "expenses": "1500.00",
                    "revenue": "4200.00",
                }
            ]
        }
    }

    month: str = Field(description="Abbreviated month and year, e.g. 'Jan 2025'")
    start_date: date = Field(description="First day of the month (inclusive)")
    end_date: date = Field(description="Last day of the month (inclusive)")
    expenses: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))
    revenue: Decimal = Field(default=Decimal("0"), ge=Decimal("0"))

    @computed_field
    @property
    def profit(self) -> Decimal:
        """Revenue minus expenses for the month."""
        return self.revenue - self.expenses


class AnalyticsResult(BaseModel):
    """Summary analytics over a transaction list."""

    total_expenses: Decimal = Field(default=Decimal("0"))
    total_revenue: Decimal = Field(default=Decimal("0"))
    avg_monthly_expenses: Decimal = Field(default=Decimal("0"))
    avg_monthly_revenue: Decimal = Field(default=Decimal("0"))
    top_expense_categories: list[CategoryTotal] = Field(default_factory=list)
    top_revenue_categories: list[CategoryTotal] = Field(default_factory=list)
    monthly_trends: list[MonthlyTrend] = Field(default_factory=list)
    months_with_data: int = Field(
        default=0,
        ge=0,
        description="Distinct calendar months present in the transaction set",
    )
    generated_for: date = Field(
        description="The 'today' that the trend window was anchored to",
    )

    @computed_field
    @property
    def profit(self) -> Decimal:
        """Total revenue minus total expenses."""
        return self.total_revenue - self.total_expenses
