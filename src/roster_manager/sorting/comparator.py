"""
Comparator Engine.

Orders two employees for a sort key and direction. Each orderable field is
tagged with a field type and each field type has one comparison function:

    BOOLEAN  active records rank above inactive ones
    NUMERIC  sign of the difference
    TEXT     locale-aware collation

Values that do not fit their field type (mismatched or unorderable) compare
as equal, so a stable sort leaves them in input order.

Boolean ordering note:
    For ``is_active`` the direction is inverted relative to every other
    field: ascending puts active records first. Descending puts them last.
"""

from __future__ import annotations

import logging
import numbers
import unicodedata
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Sequence, Tuple

from roster_manager.domain.entities import Employee, SortKey, SortOrder

logger = logging.getLogger(__name__)


class FieldType(Enum):
    """Comparison family of an orderable field."""

    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TEXT = "text"


FIELD_TYPES: Dict[SortKey, FieldType] = {
    SortKey.EMPLOYEE_ID: FieldType.TEXT,
    SortKey.NAME: FieldType.TEXT,
    SortKey.EMAIL: FieldType.TEXT,
    SortKey.CONTACT: FieldType.TEXT,
    SortKey.ADDRESS: FieldType.TEXT,
    SortKey.POSITION: FieldType.TEXT,
    SortKey.DEPARTMENT: FieldType.TEXT,
    SortKey.PERFORMANCE: FieldType.NUMERIC,
    SortKey.INCOME: FieldType.NUMERIC,
    SortKey.IS_ACTIVE: FieldType.BOOLEAN,
    SortKey.DATE_OF_BIRTH: FieldType.TEXT,
    SortKey.JOINING_DATE: FieldType.TEXT,
    SortKey.PAY_FREQUENCY: FieldType.TEXT,
    SortKey.GENDER: FieldType.TEXT,
}


def _sign(a: Any, b: Any) -> int:
    # NaN compares neither greater nor less, which yields 0
    return (a > b) - (a < b)


def collation_key(text: str) -> Tuple[str, str, Tuple[int, ...], str]:
    """
    Sort key approximating linguistic ordering of ``text``.

    Levels, most significant first: base letters ignoring accents and case,
    then accents, then case (lower before upper), then code points.
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    primary = base.casefold()
    secondary = unicodedata.normalize("NFD", text.casefold())
    tertiary = tuple(1 if c.isupper() else 0 for c in base)
    return primary, secondary, tertiary, text


def compare_boolean(a: Any, b: Any, sort_order: SortOrder) -> int:
    rank_a = 1 if a else 0
    rank_b = 1 if b else 0
    if sort_order is SortOrder.ASC:
        return rank_b - rank_a
    return rank_a - rank_b


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def compare_numeric(a: Any, b: Any) -> int:
    if _is_number(a) and _is_number(b):
        return _sign(a, b)
    return 0


def compare_text(a: Any, b: Any) -> int:
    if isinstance(a, str) and isinstance(b, str):
        return _sign(collation_key(a), collation_key(b))
    return 0


# Direction-neutral comparisons; the direction is applied in ``compare``
_DIRECTIONAL: Dict[FieldType, Callable[[Any, Any], int]] = {
    FieldType.NUMERIC: compare_numeric,
    FieldType.TEXT: compare_text,
}


def _check_dispatch_tables() -> None:
    missing = [key.value for key in SortKey if key not in FIELD_TYPES]
    if missing:
        raise RuntimeError(f"Sort keys without a field type: {', '.join(missing)}")
    unhandled = [
        t.value
        for t in set(FIELD_TYPES.values())
        if t is not FieldType.BOOLEAN and t not in _DIRECTIONAL
    ]
    if unhandled:
        raise RuntimeError(f"Field types without a comparator: {', '.join(unhandled)}")


_check_dispatch_tables()


def compare(
    a: Employee,
    b: Employee,
    sort_key: SortKey,
    sort_order: SortOrder = SortOrder.ASC,
) -> int:
    """
    Compare two employees.

    Returns a negative number if ``a`` sorts before ``b``, zero if they are
    equal for this key and a positive number otherwise.
    """
    field_type = FIELD_TYPES[sort_key]
    value_a = a.field_value(sort_key)
    value_b = b.field_value(sort_key)

    if field_type is FieldType.BOOLEAN:
        return compare_boolean(value_a, value_b, sort_order)

    comparison = _DIRECTIONAL[field_type](value_a, value_b)
    return comparison if sort_order is SortOrder.ASC else -comparison


def sort_records(
    records: Sequence[Employee],
    sort_key: SortKey,
    sort_order: SortOrder = SortOrder.ASC,
) -> List[Employee]:
    """Return a new, stably sorted list. ``records`` is left untouched."""
    logger.debug(f"Sorting {len(records)} records by {sort_key.value} {sort_order.value}")
    return sorted(
        records,
        key=cmp_to_key(lambda a, b: compare(a, b, sort_key, sort_order)),
    )
