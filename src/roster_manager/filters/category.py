"""
Category Filter Implementation.

Exact, case-sensitive equality on one categorical field (department or
position). The filter is inactive while the query holds the field's
"match all" label or an empty string. The label travels on the query, so
the outcome depends on the records and the query only.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import FilterResult, RosterQuery


class CategoryFilter:
    """Filter records whose ``field`` equals the query's selection."""

    def __init__(self, field: str, query_attr: str, match_all_attr: str) -> None:
        """
        Initialize with the filtered field.

        Args:
            field: Employee attribute compared against the selection
            query_attr: RosterQuery attribute holding the selection
            match_all_attr: RosterQuery attribute holding the "match all" label
        """
        self.field = field
        self.query_attr = query_attr
        self.match_all_attr = match_all_attr

    @property
    def name(self) -> str:
        return f"{self.field}_filter"

    def selection(self, query: RosterQuery) -> str:
        return getattr(query, self.query_attr)

    def match_all(self, query: RosterQuery) -> str:
        return getattr(query, self.match_all_attr)

    def is_active(self, query: RosterQuery) -> bool:
        selected = self.selection(query)
        return bool(selected) and selected != self.match_all(query)

    def apply(self, records: Sequence[Employee], query: RosterQuery) -> FilterResult:
        if not self.is_active(query):
            return FilterResult.pass_through(records)

        selected = self.selection(query)
        keep: List[bool] = []
        passed: List[str] = []
        rejected: List[str] = []
        reasons: Dict[str, str] = {}

        for record in records:
            value = getattr(record, self.field)
            matched = value == selected
            keep.append(matched)
            if matched:
                passed.append(record.id)
            else:
                rejected.append(record.id)
                reasons[record.id] = f"{self.field}={value!r} != {selected!r}"

        return FilterResult(
            keep=keep,
            passed_ids=passed,
            rejected_ids=rejected,
            rejection_reasons=reasons,
        )


def department_filter() -> CategoryFilter:
    return CategoryFilter("department", "department_filter", "all_departments_label")


def position_filter() -> CategoryFilter:
    return CategoryFilter("position", "position_filter", "all_positions_label")
