"""CSV export and CSV/JSON import of transactions.

Export layout (nine columns, one row per transaction, ``\\n`` separated)::

    Date,Type,Amount,Description,Category,Subcategory,Payment Method,Tags,Notes
    2025-01-15,expense,12.50,"Lunch","Food & Dining","Restaurants","","work, team",""

Date, type and amount are written bare. The six text columns are always
quoted, with embedded quotes doubled.

Import is a two step process. ``import_csv`` / ``import_json`` return
untyped candidate records for preview. ``candidates_to_transactions`` then
turns those into validated ``Transaction`` objects, or fails as a whole.
"""

import csv
import io
import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from typing import Any, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from .exceptions import TransactionImportError
from .models import Transaction

logger = structlog.get_logger()

CSV_HEADERS = (
    "Date",
    "Type",
    "Amount",
    "Description",
    "Category",
    "Subcategory",
    "Payment Method",
    "Tags",
    "Notes",
)

# Columns a CSV row needs before it is considered a candidate transaction
REQUIRED_CSV_COLUMNS = ("Date", "Amount", "Description")

# Keys a JSON item needs; "category" may also be given as "category_name"
REQUIRED_JSON_KEYS = ("type", "amount", "description", "date")

TAG_SEPARATOR = ", "

DEFAULT_FILENAME_PREFIX = "expense-tracker"

# CSV header -> Transaction field
_CSV_FIELD_MAP = {
    "Date": "date",
    "Type": "type",
    "Amount": "amount",
    "Description": "description",
    "Category": "category_name",
    "Subcategory": "subcategory",
    "Payment Method": "payment_method",
    "Tags": "tags",
    "Notes": "notes",
}


def _quote(value: Optional[str]) -> str:
    """Wrap a text field in quotes, doubling any quotes inside it."""
    return '"' + (value or "").replace('"', '""') + '"'


def _csv_row(t: Transaction) -> str:
    return ",".join(
        [
            t.date.isoformat(),
            t.type.value,
            format(t.amount, "f"),
            _quote(t.description),
            _quote(t.category_name),
            _quote(t.subcategory),
            _quote(t.payment_method),
            _quote(TAG_SEPARATOR.join(t.tags)),
            _quote(t.notes),
        ]
    )


def export_to_csv(transactions: Iterable[Transaction]) -> str:
    """Serialize transactions to CSV text, keeping their order."""
    lines = [",".join(CSV_HEADERS)]
    lines.extend(_csv_row(t) for t in transactions)
    logger.info("csv_exported", rows=len(lines) - 1)
    return "\n".join(lines)


def export_filename(
    today: Optional[date] = None,
    prefix: str = DEFAULT_FILENAME_PREFIX,
) -> str:
    """File name for an export made on ``today``: ``<prefix>-YYYY-MM-DD.csv``."""
    today = today or date.today()
    return f"{prefix}-{today.isoformat()}.csv"


def import_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV text into candidate records keyed by header name.

    Quoted fields may contain commas, doubled quotes and newlines. Header
    names and values are stripped. Rows missing any of Date, Amount or
    Description are dropped.

    Raises:
        TransactionImportError: If the text has no header or cannot be parsed.
    """
    text = text.lstrip("\ufeff")
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        header = next(reader, None)
        if not header or not any(h.strip() for h in header):
            raise TransactionImportError("CSV content has no header row", source="csv")
        columns = [h.strip() for h in header]

        records = []
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            record = {
                column: (row[i].strip() if i < len(row) else "")
                for i, column in enumerate(columns)
            }
            if all(record.get(c) for c in REQUIRED_CSV_COLUMNS):
                records.append(record)
    except csv.Error as e:
        raise TransactionImportError(
            f"Could not parse CSV content: {e}",
            source="csv",
            line=reader.line_num,
        ) from e

    logger.info("csv_import_parsed", candidates=len(records))
    return records


def _has_value(value: Any) -> bool:
    return value is not None and value != ""


def import_json(text: str) -> list[dict[str, Any]]:
    """Parse a JSON array of transaction-like objects into candidate records.

    Items that are not objects, or that lack type, amount, description,
    category and date, are dropped.

    Raises:
        TransactionImportError: If the text is not valid JSON or not an array.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise TransactionImportError(
            f"Could not parse JSON content: {e.msg}",
            source="json",
            line=e.lineno,
        ) from e
    if not isinstance(payload, list):
        raise TransactionImportError(
            "JSON import must contain an array of transactions",
            source="json",
        )

    records = [
        item
        for item in payload
        if isinstance(item, dict)
        and all(_has_value(item.get(k)) for k in REQUIRED_JSON_KEYS)
        and (_has_value(item.get("category")) or _has_value(item.get("category_name")))
    ]
    logger.info("json_import_parsed", candidates=len(records), items=len(payload))
    return records


def _split_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    return [str(tag) for tag in value]


def _normalize_candidate(candidate: Mapping[str, Any]) -> dict[str, Any]:
    """Map CSV headers or JSON keys onto Transaction field names."""
    data: dict[str, Any] = {}
    for key, value in candidate.items():
        field = _CSV_FIELD_MAP.get(key, key)
        if field == "category":
            field = "category_name"
        data.setdefault(field, value)

    for key in list(data):
        if data[key] == "":
            data[key] = None
    if isinstance(data.get("type"), str):
        data["type"] = data["type"].strip().lower()
    data["tags"] = _split_tags(data.get("tags"))
    return {k: v for k, v in data.items() if v is not None}


def candidates_to_transactions(
    candidates: Sequence[Mapping[str, Any]],
) -> list[Transaction]:
    """Convert preview records into validated transactions.

    Raises:
        TransactionImportError: If any record is invalid. Nothing is
            returned for the other records in that case.
    """
    transactions = []
    for index, candidate in enumerate(candidates):
        try:
            transactions.append(Transaction.model_validate(_normalize_candidate(candidate)))
        except PydanticValidationError as e:
            raise TransactionImportError(
                f"Record {index + 1} is not a valid transaction",
                line=index + 1,
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
    return transactions
