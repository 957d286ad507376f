"""Custom exceptions for the expense tracker.

This module provides a hierarchy of exception classes for consistent error
handling across the tracker. All exceptions inherit from
ExpenseTrackerError, making it easy to catch all application-specific errors.

Example:
    try:
        tracker.delete_category(category_id)
    except CategoryInUseError as e:
        # Ask the user to reassign transactions first
        show_message(f"{e} ({e.transaction_count} transactions)")
    except ExpenseTrackerError as e:
        # Handle any tracker-related error
        logger.error("operation_failed", error=str(e))
"""

from typing import Any, Optional


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all tracker-specific errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error can be fixed by the caller.

    Example:
        >>> raise ExpenseTrackerError("Something went wrong", details={"code": 500})
        ExpenseTrackerError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize ExpenseTrackerError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether the error can be fixed by correcting the
                input. Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(ExpenseTrackerError):
    """Error raised when a transaction or category fails validation.

    Attributes:
        field: The field that failed validation.
        value: The invalid value.
        constraint: The validation constraint that was violated.

    Example:
        >>> raise ValidationError(
        ...     "Category already exists",
        ...     field="name",
        ...     value="Food & Dining",
        ...     constraint="Category names must be unique within a type",
        ... )
        ValidationError: Category already exists
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize ValidationError.

        Args:
            message: Human-readable error description.
            field: The name of the field that failed validation.
            value: The invalid value.
            constraint: Description of the validation rule violated.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed by user correction.
                Defaults to True.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value
        if constraint:
            self.details["constraint"] = constraint


class TransactionImportError(ExpenseTrackerError):
    """Error raised when imported CSV or JSON content cannot be used.

    Import failures are reported as a single error for the whole file;
    no partial results are returned.

    Attributes:
        source: Format of the content being imported ("csv" or "json").
        line: Line or record number where the problem was found (if known).

    Example:
        >>> raise TransactionImportError(
        ...     "CSV content has no header row",
        ...     source="csv",
        ... )
        TransactionImportError: CSV content has no header row
    """

    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        line: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize TransactionImportError.

        Args:
            message: Human-readable error description.
            source: Format of the imported content.
            line: Line (CSV) or record index (JSON) that failed, if known.
            details: Optional dictionary with additional context.
            recoverable: Whether a corrected file could be imported.
                Defaults to True.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.source = source
        self.line = line

        if source:
            self.details["source"] = source
        if line is not None:
            self.details["line"] = line


class CategoryInUseError(ExpenseTrackerError):
    """Error raised when deleting a category that transactions still use.

    Attributes:
        category_id: Identifier of the category.
        category_name: Display name of the category.
        transaction_count: Number of transactions referencing it.
    """

    def __init__(
        self,
        message: str,
        *,
        category_id: Optional[str] = None,
        category_name: Optional[str] = None,
        transaction_count: int = 0,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize CategoryInUseError.

        Args:
            message: Human-readable error description.
            category_id: Identifier of the category that could not be deleted.
            category_name: Display name of the category.
            transaction_count: How many transactions reference the category.
            details: Optional dictionary with additional context.
            recoverable: Defaults to True since reassigning the transactions
                makes the deletion possible.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.category_id = category_id
        self.category_name = category_name
        self.transaction_count = transaction_count

        if category_id:
            self.details["category_id"] = category_id
        if category_name:
            self.details["category_name"] = category_name
        self.details["transaction_count"] = transaction_count


class RecordNotFoundError(ExpenseTrackerError):
    """Error raised when a transaction or category id is unknown.

    Attributes:
        record_type: "transaction" or "category".
        record_id: The identifier that was looked up.
    """

    def __init__(
        self,
        message: str,
        *,
        record_type: Optional[str] = None,
        record_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.record_type = record_type
        self.record_id = record_id

        if record_type:
            self.details["record_type"] = record_type
        if record_id:
            self.details["record_id"] = record_id


class ConfigurationError(ExpenseTrackerError):
    """Error raised when configuration is invalid or missing.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid log level",
        ...     config_key="EXPENSE_TRACKER_LOG_LEVEL",
        ...     expected="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ...     actual="LOUD",
        ... )
        ConfigurationError: Invalid log level
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable error description.
            config_key: The name of the configuration key that is problematic.
            expected: Description of what value was expected.
            actual: The actual value found.
            details: Optional dictionary with additional context.
            recoverable: Defaults to False since configuration errors
                require fixing the environment.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


__all__ = [
    "ExpenseTrackerError",
    "ValidationError",
    "TransactionImportError",
    "CategoryInUseError",
    "RecordNotFoundError",
    "ConfigurationError",
]
