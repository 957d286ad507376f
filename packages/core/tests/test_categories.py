"""Tests for default categories and display lookups."""

from expense_tracker.categories import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_REVENUE_CATEGORIES,
    FALLBACK_COLOR,
    FALLBACK_ICON,
    category_color,
    category_icon,
    default_categories,
    find_category,
)
from expense_tracker.models import TransactionType


class TestDefaultCategories:
    """Tests for the default category set."""

    def test_counts_and_types(self):
        """There are 8 expense and 6 revenue defaults."""
        assert len(DEFAULT_EXPENSE_CATEGORIES) == 8
        assert len(DEFAULT_REVENUE_CATEGORIES) == 6
        assert all(c.type == TransactionType.EXPENSE for c in DEFAULT_EXPENSE_CATEGORIES)
        assert all(c.type == TransactionType.REVENUE for c in DEFAULT_REVENUE_CATEGORIES)

    def test_names_unique_within_type(self):
        """Default names do not repeat within a type."""
        for group in (DEFAULT_EXPENSE_CATEGORIES, DEFAULT_REVENUE_CATEGORIES):
            names = [c.name for c in group]
            assert len(names) == len(set(names))

    def test_default_categories_are_copies(self):
        """Mutating returned defaults leaves the module constants alone."""
        categories = default_categories()
        categories[0].subcategories.append("Snacks")
        assert "Snacks" not in DEFAULT_EXPENSE_CATEGORIES[0].subcategories


class TestLookups:
    """Tests for find_category and display fallbacks."""

    def test_find_by_name(self):
        """find_category locates a category by exact name."""
        category = find_category(default_categories(), "Salary")
        assert category is not None
        assert category.id == "9"

    def test_find_respects_type(self):
        """A type argument restricts the lookup."""
        assert find_category(default_categories(), "Salary", TransactionType.EXPENSE) is None

    def test_known_icon_and_color(self):
        """Known names resolve to their own icon and color."""
        categories = default_categories()
        assert category_icon(categories, "Travel") == "✈️"
        assert category_color(categories, "Travel") == "#14b8a6"

    def test_unknown_name_falls_back(self):
        """Unknown names get the fallback icon and color."""
        categories = default_categories()
        assert category_icon(categories, "Renamed long ago") == FALLBACK_ICON
        assert category_color(categories, "Renamed long ago") == FALLBACK_COLOR

    def test_empty_category_list(self):
        """An empty category list always falls back."""
        assert category_icon([], "Food") == FALLBACK_ICON
