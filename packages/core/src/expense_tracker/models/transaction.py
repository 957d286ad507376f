"""Transaction, category and filter models.

Transactions and categories are exchanged with the storage and UI layers as
flat field mappings; ``model_dump(mode="json")`` produces that shape and
``model_validate`` reads it back.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


class TransactionType(str, Enum):
    """Direction of a money movement. Determines the sign in aggregates."""

    EXPENSE = "expense"
    REVENUE = "revenue"


class RecurringFrequency(str, Enum):
    """How often a recurring transaction repeats."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Transaction(BaseModel):
    """A single recorded expense or revenue.

    Transactions are immutable; an edit produces a new instance with the
    same ``id`` that replaces the old one in the owning collection.
    """

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "3f1c0d7e-8a55-4c8e-9a55-0c1f0f4d2b11",
                    "type": "expense",
                    "amount": "12.50",
                    "description": "Lunch",
                    "category_name": "Food & Dining",
                    "subcategory": "Restaurants",
                    "date": "2025-01-15",
                    "tags": ["work"],
                    "payment_method": "Credit Card",
                }
            ]
        },
    }

    id: str = Field(
        default_factory=new_id,
        description="Opaque unique identifier, never reused",
    )
    type: TransactionType = Field(description="Expense or revenue")
    amount: Decimal = Field(
        ge=Decimal("0"),
        description="Non-negative magnitude; the sign comes from the type",
    )
    description: str = Field(description="Free-text label")
    category_name: str = Field(
        description="Category display name at the time of recording; used for grouping",
    )
    category_id: Optional[str] = Field(
        default=None,
        description="Reference to a Category, if any",
    )
    subcategory: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    recurring: bool = False
    recurring_frequency: Optional[RecurringFrequency] = None
    date: dt.date = Field(description="Calendar date of the transaction")
    created_at: Optional[dt.datetime] = Field(
        default=None,
        description="Set by the owning store",
    )
    updated_at: Optional[dt.datetime] = Field(
        default=None,
        description="Set by the owning store",
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount_to_decimal(cls, v):
        """Strip string amounts and convert floats via their repr."""
        if isinstance(v, str):
            return v.strip()
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_revenue(self) -> bool:
        return self.type == TransactionType.REVENUE

    @property
    def month_key(self) -> str:
        """Calendar month of the transaction as ``YYYY-MM``."""
        return f"{self.date.year:04d}-{self.date.month:02d}"

    def search_text(self) -> str:
        """Lower-cased text that free-text search runs against."""
        return (
            f"{self.description} {self.category_name} "
            f"{self.subcategory or ''} {self.notes or ''}"
        ).lower()


class Category(BaseModel):
    """A named classification bucket with display metadata."""

    id: str = Field(default_factory=new_id)
    name: str = Field(min_length=1)
    type: TransactionType
    color: str = Field(default="#6b7280", description="Hex display color")
    icon: str = Field(default="📝", description="Display icon")
    subcategories: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure category name is not blank."""
        if not v.strip():
            raise ValueError("Category name cannot be blank")
        return v


class TransactionFilter(BaseModel):
    """Independent, optional predicates for narrowing a transaction list.

    A missing field means "no constraint". Empty category, search term and
    tag list are treated the same way. ``type="all"`` is accepted as an
    explicit "no constraint".
    """

    type: Optional[TransactionType] = None
    category: Optional[str] = None
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    amount_min: Optional[Decimal] = None
    amount_max: Optional[Decimal] = None
    search_term: Optional[str] = None
    tags: Optional[list[str]] = None

    @field_validator("type", mode="before")
    @classmethod
    def all_means_any_type(cls, v):
        if v in ("all", ""):
            return None
        return v

    @field_validator("amount_min", "amount_max", mode="before")
    @classmethod
    def coerce_bound_to_decimal(cls, v):
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @property
    def is_empty(self) -> bool:
        """True when no field constrains the result."""
        return (
            self.type is None
            and not self.category
            and self.date_from is None
            and self.date_to is None
            and self.amount_min is None
            and self.amount_max is None
            and not self.search_term
            and not self.tags
        )
