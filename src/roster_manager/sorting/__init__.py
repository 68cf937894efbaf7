"""
Sorting Package - Comparator Engine.

Field-type dispatch for ordering employees:
    - FieldType: BOOLEAN, NUMERIC or TEXT tag per orderable field
    - compare: three-way comparison for a sort key and direction
    - sort_records: stable sort returning a new list
"""

from roster_manager.sorting.comparator import (
    FIELD_TYPES,
    FieldType,
    collation_key,
    compare,
    sort_records,
)

__all__ = [
    "FIELD_TYPES",
    "FieldType",
    "collation_key",
    "compare",
    "sort_records",
]
