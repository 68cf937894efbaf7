"""
Text Search Filter Implementation.

Keeps a record when the search term occurs, case-insensitively, as a plain
substring of at least one searchable field:
    - name
    - email
    - position
    - department
    - employee_id

No tokenisation and no fuzzy matching.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import FilterResult, RosterQuery

SEARCHABLE_FIELDS: Tuple[str, ...] = (
    "name",
    "email",
    "position",
    "department",
    "employee_id",
)


class TextSearchFilter:
    """Filter records by free-text search."""

    def __init__(self, fields: Sequence[str] = SEARCHABLE_FIELDS) -> None:
        self.fields = tuple(fields)

    @property
    def name(self) -> str:
        return "text_search"

    def is_active(self, query: RosterQuery) -> bool:
        return bool(query.search_term)

    def apply(self, records: Sequence[Employee], query: RosterQuery) -> FilterResult:
        """
        Apply the search term to ``records``.

        An empty search term passes every record unchanged.
        """
        if not self.is_active(query):
            return FilterResult.pass_through(records)

        needle = query.search_term.lower()
        keep: List[bool] = []
        passed: List[str] = []
        rejected: List[str] = []
        reasons: Dict[str, str] = {}

        for record in records:
            matched = self.matches(record, needle)
            keep.append(matched)
            if matched:
                passed.append(record.id)
            else:
                rejected.append(record.id)
                reasons[record.id] = f"no field contains '{query.search_term}'"

        return FilterResult(
            keep=keep,
            passed_ids=passed,
            rejected_ids=rejected,
            rejection_reasons=reasons,
        )

    def matches(self, record: Employee, needle: str) -> bool:
        """``needle`` must already be lower-cased."""
        return any(needle in str(getattr(record, f)).lower() for f in self.fields)
