"""In-memory store for transactions and categories.

``ExpenseTracker`` owns the current collections and exposes explicit
mutations. Derived state (filtered lists, analytics, CSV) is recomputed
from the current collections on every call; nothing is cached.

Persistence is left to the caller: load records, pass them in, and save
``tracker.transactions`` / ``tracker.categories`` after mutating.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from .analytics import AnalyticsCalculator
from .categories import category_color, category_icon, default_categories, find_category
from .config import ExpenseTrackerConfig
from .csv_codec import export_filename, export_to_csv
from .exceptions import CategoryInUseError, RecordNotFoundError, ValidationError
from .filtering import filter_transactions
from .formatting import format_currency
from .models import AnalyticsResult, Category, Transaction, TransactionFilter, new_id

logger = structlog.get_logger()

TransactionData = Union[Transaction, Mapping[str, Any]]
CategoryData = Union[Category, Mapping[str, Any]]


def _utc_now() -> datetime:
    """Return current UTC datetime with timezone info."""
    return datetime.now(timezone.utc)


def _validation_error(model: str, error: PydanticValidationError) -> ValidationError:
    first = error.errors(include_url=False)[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    return ValidationError(
        f"Invalid {model}: {first['msg']}",
        field=field,
        details={"errors": error.errors(include_url=False, include_context=False)},
    )


class ExpenseTracker:
    """Holds one user's transactions and categories.

    New and imported transactions are placed first, so the collection is
    newest-first by insertion.
    """

    def __init__(
        self,
        transactions: Optional[Iterable[TransactionData]] = None,
        categories: Optional[Iterable[CategoryData]] = None,
        config: Optional[ExpenseTrackerConfig] = None,
    ):
        self.config = config or ExpenseTrackerConfig()
        self._calculator = AnalyticsCalculator(
            top_n=self.config.analytics.top_categories_limit,
            months=self.config.analytics.trend_months,
        )
        self._transactions: list[Transaction] = []
        seen: set[str] = set()
        for record in transactions or []:
            transaction = self._to_transaction(record)
            if transaction.id in seen:
                raise ValidationError(
                    f"Duplicate transaction id: {transaction.id}",
                    field="id",
                    value=transaction.id,
                    constraint="Transaction ids must be unique",
                )
            seen.add(transaction.id)
            self._transactions.append(transaction)
        self._categories: list[Category] = (
            [self._to_category(c) for c in categories]
            if categories is not None
            else default_categories()
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    def get_transaction(self, transaction_id: str) -> Transaction:
        return self._transactions[self._transaction_index(transaction_id)]

    def get_category(self, category_id: str) -> Category:
        return self._categories[self._category_index(category_id)]

    # ------------------------------------------------------------------
    # Transaction mutations
    # ------------------------------------------------------------------

    def add_transaction(self, data: TransactionData) -> Transaction:
        """Record a new transaction with a fresh id and timestamps."""
        now = _utc_now()
        fields = self._dump(data)
        fields.update(id=new_id(), created_at=now, updated_at=now)
        transaction = self._to_transaction(fields)
        self._transactions.insert(0, transaction)
        logger.info(
            "transaction_added",
            transaction_id=transaction.id,
            type=transaction.type.value,
            amount=str(transaction.amount),
        )
        return transaction

    def update_transaction(self, transaction_id: str, **changes: Any) -> Transaction:
        """Replace a transaction with a validated, updated copy."""
        index = self._transaction_index(transaction_id)
        fields = self._transactions[index].model_dump()
        fields.update(changes)
        fields.update(id=transaction_id, updated_at=_utc_now())
        transaction = self._to_transaction(fields)
        self._transactions[index] = transaction
        logger.info("transaction_updated", transaction_id=transaction_id, fields=sorted(changes))
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        index = self._transaction_index(transaction_id)
        del self._transactions[index]
        logger.info("transaction_deleted", transaction_id=transaction_id)

    def import_transactions(self, records: Iterable[TransactionData]) -> list[Transaction]:
        """Add imported transactions ahead of the existing ones.

        Records keep their own id and ``created_at`` when present; missing
        ones are filled in. An id that is already taken, by the store or by
        an earlier record in the batch, is replaced with a fresh one. Every
        record is validated before any is added.
        """
        now = _utc_now()
        taken = {t.id for t in self._transactions}
        imported = []
        for record in records:
            fields = self._dump(record)
            if not fields.get("id") or fields["id"] in taken:
                fields["id"] = new_id()
            taken.add(fields["id"])
            fields["created_at"] = fields.get("created_at") or now
            fields["updated_at"] = now
            imported.append(self._to_transaction(fields))
        self._transactions[:0] = imported
        logger.info("transactions_imported", count=len(imported))
        return imported

    # ------------------------------------------------------------------
    # Category mutations
    # ------------------------------------------------------------------

    def add_category(self, data: CategoryData) -> Category:
        """Add a category. Names must be unique within a type."""
        fields = self._dump(data)
        fields["id"] = new_id()
        category = self._to_category(fields)
        self._ensure_unique_name(category)
        self._categories.append(category)
        logger.info("category_added", category_id=category.id, name=category.name)
        return category

    def update_category(self, category_id: str, **changes: Any) -> Category:
        """Replace a category with an updated copy.

        Transactions keep the category name they were recorded with.
        """
        index = self._category_index(category_id)
        fields = self._categories[index].model_dump()
        fields.update(changes)
        fields["id"] = category_id
        category = self._to_category(fields)
        self._ensure_unique_name(category)
        self._categories[index] = category
        logger.info("category_updated", category_id=category_id, fields=sorted(changes))
        return category

    def delete_category(self, category_id: str) -> None:
        """Delete a category that no transaction references.

        Raises:
            CategoryInUseError: If a transaction references the category
                by id or by name.
        """
        index = self._category_index(category_id)
        category = self._categories[index]
        in_use = sum(
            1
            for t in self._transactions
            if t.category_id == category.id or t.category_name == category.name
        )
        if in_use:
            raise CategoryInUseError(
                "Cannot delete category that has transactions. "
                "Please reassign transactions first.",
                category_id=category.id,
                category_name=category.name,
                transaction_count=in_use,
            )
        del self._categories[index]
        logger.info("category_deleted", category_id=category_id, name=category.name)

    def clear_all(self) -> None:
        """Drop every transaction and restore the default categories."""
        self._transactions = []
        self._categories = default_categories()
        logger.info("tracker_cleared")

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def filter(
        self,
        filter: Optional[TransactionFilter] = None,
        today: Optional[date] = None,
    ) -> list[Transaction]:
        return filter_transactions(self._transactions, filter, today)

    def analytics(self, today: Optional[date] = None) -> AnalyticsResult:
        return self._calculator.calculate(self._transactions, today, self._categories)

    def export_csv(self) -> str:
        return export_to_csv(self._transactions)

    def export_filename(self, today: Optional[date] = None) -> str:
        return export_filename(today, prefix=self.config.export.filename_prefix)

    def format_amount(self, amount) -> str:
        return format_currency(amount, self.config.currency)

    def category_icon(self, name: str) -> str:
        return category_icon(self._categories, name)

    def category_color(self, name: str) -> str:
        return category_color(self._categories, name)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _dump(data: Union[TransactionData, CategoryData]) -> dict[str, Any]:
        if isinstance(data, (Transaction, Category)):
            return data.model_dump()
        return dict(data)

    @staticmethod
    def _to_transaction(data: TransactionData) -> Transaction:
        if isinstance(data, Transaction):
            return data
        try:
            return Transaction.model_validate(data)
        except PydanticValidationError as e:
            raise _validation_error("transaction", e) from e

    @staticmethod
    def _to_category(data: CategoryData) -> Category:
        if isinstance(data, Category):
            return data
        try:
            return Category.model_validate(data)
        except PydanticValidationError as e:
            raise _validation_error("category", e) from e

    def _ensure_unique_name(self, category: Category) -> None:
        existing = find_category(self._categories, category.name, category.type)
        if existing is not None and existing.id != category.id:
            raise ValidationError(
                "Category already exists",
                field="name",
                value=category.name,
                constraint="Category names must be unique within a type",
            )

    def _transaction_index(self, transaction_id: str) -> int:
        for i, t in enumerate(self._transactions):
            if t.id == transaction_id:
                return i
        raise RecordNotFoundError(
            f"Transaction not found: {transaction_id}",
            record_type="transaction",
            record_id=transaction_id,
        )

    def _category_index(self, category_id: str) -> int:
        for i, c in enumerate(self._categories):
            if c.id == category_id:
                return i
        raise RecordNotFoundError(
            f"Category not found: {category_id}",
            record_type="category",
            record_id=category_id,
        )
