"""
Filters Package - Filter Stage Implementations.

Each filter implements the FilterStage protocol (``name``, ``is_active``,
``apply``) and returns a FilterResult naming passed and rejected records.

Filters:
    - TextSearchFilter: Case-insensitive substring search
    - CategoryFilter: Exact match on department or position

Design Principles:
    - Each filter is independently testable
    - Stateless filtering, the query carries all parameters
    - Clear rejection reasons for the audit trail
"""

from roster_manager.filters.category import (
    CategoryFilter,
    department_filter,
    position_filter,
)
from roster_manager.filters.search import SEARCHABLE_FIELDS, TextSearchFilter
from roster_manager.filters.stages import (
    FilterStageProtocol,
    default_stages,
    filter_records,
    keep_passed,
)

__all__ = [
    "CategoryFilter",
    "department_filter",
    "position_filter",
    "SEARCHABLE_FIELDS",
    "TextSearchFilter",
    "FilterStageProtocol",
    "default_stages",
    "filter_records",
    "keep_passed",
]
