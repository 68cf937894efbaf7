"""
CSV Exporter - Lossless Delimited-Text Export.

Serializes an ordered sequence of employees into CSV text:
    - Fixed column order, header row first
    - Rows joined with "\\n", no trailing newline
    - A field containing a comma, double quote or newline is wrapped in
      double quotes with embedded quotes doubled; other fields are emitted
      as-is

Error Handling:
    - EmptyInputError when there is nothing to export
    - ExportFailureError wrapping any unexpected failure, cause chained
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Callable, List, Sequence, Tuple

from roster_manager.domain.entities import Employee

logger = logging.getLogger(__name__)

DELIMITER = ","
LINE_TERMINATOR = "\n"
_NEEDS_QUOTING = (",", '"', "\n")

COLUMNS: Tuple[Tuple[str, Callable[[Employee], Any]], ...] = (
    ("ID", lambda e: e.employee_id),
    ("Name", lambda e: e.name),
    ("Email", lambda e: e.email),
    ("Contact", lambda e: e.contact),
    ("Address", lambda e: e.address),
    ("Position", lambda e: e.position),
    ("Department", lambda e: e.department),
    ("Status", lambda e: e.status_label),
    ("Annual Income", lambda e: e.income),
    ("Performance", lambda e: e.performance),
    ("Date of Birth", lambda e: e.date_of_birth),
    ("Joining Date", lambda e: e.joining_date),
    ("Pay Frequency", lambda e: e.pay_frequency),
)

HEADERS: Tuple[str, ...] = tuple(name for name, _ in COLUMNS)


class ExportError(Exception):
    """Base class for export failures."""
    pass


class EmptyInputError(ExportError):
    """Raised when an export is requested for zero records."""

    def __init__(self, message: str = "No employee data to export.") -> None:
        super().__init__(message)


class ExportFailureError(ExportError):
    """Raised when building the document fails unexpectedly."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(f"{message}: {cause}")
        self.cause = cause


def to_text(value: Any) -> str:
    """Text form of a field value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def escape_field(value: Any) -> str:
    text = to_text(value)
    if any(ch in text for ch in _NEEDS_QUOTING):
        return '"' + text.replace('"', '""') + '"'
    return text


def format_row(record: Employee) -> str:
    return DELIMITER.join(escape_field(getter(record)) for _, getter in COLUMNS)


def export_csv(records: Sequence[Employee]) -> str:
    """
    Serialize ``records`` to CSV text.

    Args:
        records: Employees in display order

    Returns:
        The CSV document

    Raises:
        EmptyInputError: If ``records`` is empty
        ExportFailureError: If serialization fails for any other reason
    """
    if not records:
        raise EmptyInputError()

    try:
        rows: List[str] = [DELIMITER.join(HEADERS)]
        rows.extend(format_row(record) for record in records)
        document = LINE_TERMINATOR.join(rows)
    except Exception as exc:
        logger.error("Failed to generate CSV", exc_info=True)
        raise ExportFailureError("Failed to generate CSV", exc) from exc

    logger.debug(f"Exported {len(records)} records to CSV")
    return document
