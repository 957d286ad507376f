"""Default categories and display lookups.

Transactions carry a denormalised ``category_name`` that may no longer
match any current category. Lookups here fall back to a neutral icon and
color instead of failing.
"""

from collections.abc import Iterable
from typing import Optional

from .models import Category, TransactionType

FALLBACK_ICON = "📝"
FALLBACK_COLOR = "#6b7280"


DEFAULT_EXPENSE_CATEGORIES: tuple[Category, ...] = (
    Category(
        id="1",
        name="Food & Dining",
        type=TransactionType.EXPENSE,
        color="#ef4444",
        icon="🍽️",
        subcategories=["Restaurants", "Groceries", "Coffee", "Fast Food", "Alcohol"],
    ),
    Category(
        id="2",
        name="Transportation",
        type=TransactionType.EXPENSE,
        color="#3b82f6",
        icon="🚗",
        subcategories=["Gas", "Public Transit", "Parking", "Maintenance", "Insurance"],
    ),
    Category(
        id="3",
        name="Shopping",
        type=TransactionType.EXPENSE,
        color="#8b5cf6",
        icon="🛍️",
        subcategories=["Clothing", "Electronics", "Home & Garden", "Books", "Gifts"],
    ),
    Category(
        id="4",
        name="Entertainment",
        type=TransactionType.EXPENSE,
        color="#ec4899",
        icon="🎬",
        subcategories=["Movies", "Games", "Music", "Sports", "Hobbies"],
    ),
    Category(
        id="5",
        name="Bills & Utilities",
        type=TransactionType.EXPENSE,
        color="#f59e0b",
        icon="⚡",
        subcategories=["Electricity", "Water", "Internet", "Phone", "Insurance"],
    ),
    Category(
        id="6",
        name="Healthcare",
        type=TransactionType.EXPENSE,
        color="#10b981",
        icon="🏥",
        subcategories=["Doctor", "Pharmacy", "Insurance", "Dental", "Vision"],
    ),
    Category(
        id="7",
        name="Education",
        type=TransactionType.EXPENSE,
        color="#6366f1",
        icon="📚",
        subcategories=["Tuition", "Books", "Courses", "Supplies", "Training"],
    ),
    Category(
        id="8",
        name="Travel",
        type=TransactionType.EXPENSE,
        color="#14b8a6",
        icon="✈️",
        subcategories=["Flights", "Hotels", "Car Rental", "Food", "Activities"],
    ),
)

DEFAULT_REVENUE_CATEGORIES: tuple[Category, ...] = (
    Category(
        id="9",
        name="Salary",
        type=TransactionType.REVENUE,
        color="#22c55e",
        icon="💼",
        subcategories=["Base Salary", "Bonus", "Overtime", "Commission"],
    ),
    Category(
        id="10",
        name="Business",
        type=TransactionType.REVENUE,
        color="#3b82f6",
        icon="🏢",
        subcategories=["Sales", "Services", "Consulting", "Products"],
    ),
    Category(
        id="11",
        name="Investments",
        type=TransactionType.REVENUE,
        color="#8b5cf6",
        icon="📈",
        subcategories=["Dividends", "Interest", "Capital Gains", "Crypto"],
    ),
    Category(
        id="12",
        name="Freelance",
        type=TransactionType.REVENUE,
        color="#f59e0b",
        icon="💻",
        subcategories=["Projects", "Hourly Work", "Contracts", "Royalties"],
    ),
    Category(
        id="13",
        name="Rental",
        type=TransactionType.REVENUE,
        color="#06b6d4",
        icon="🏠",
        subcategories=["Property Rent", "Equipment Rental", "Vehicle Rental"],
    ),
    Category(
        id="14",
        name="Other",
        type=TransactionType.REVENUE,
        color="#84cc16",
        icon="💰",
        subcategories=["Gifts", "Refunds", "Cashback", "Side Hustle"],
    ),
)


def default_categories() -> list[Category]:
    """Return fresh copies of all default categories, expenses first."""
    return [
        c.model_copy(deep=True)
        for c in (*DEFAULT_EXPENSE_CATEGORIES, *DEFAULT_REVENUE_CATEGORIES)
    ]


def find_category(
    categories: Iterable[Category],
    name: str,
    type: Optional[TransactionType] = None,
) -> Optional[Category]:
    """Return the first category with an exactly matching name, if any."""
    for category in categories:
        if category.name == name and (type is None or category.type == type):
            return category
    return None


def category_icon(categories: Iterable[Category], name: str) -> str:
    """Icon for a category name, or the fallback icon if it is unknown."""
    category = find_category(categories, name)
    return category.icon if category else FALLBACK_ICON


def category_color(categories: Iterable[Category], name: str) -> str:
    """Color for a category name, or the fallback color if it is unknown."""
    category = find_category(categories, name)
    return category.color if category else FALLBACK_COLOR
