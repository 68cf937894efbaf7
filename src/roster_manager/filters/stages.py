"""
Filter stage composition.

The standard stage order is fixed: text search, then department, then
position. Stages intersect; an inactive stage passes its input through.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import FilterResult, RosterQuery
from roster_manager.filters.category import department_filter, position_filter
from roster_manager.filters.search import TextSearchFilter


class FilterStageProtocol(Protocol):
    """Protocol for filter stages."""

    @property
    def name(self) -> str:
        ...

    def is_active(self, query: RosterQuery) -> bool:
        ...

    def apply(self, records: Sequence[Employee], query: RosterQuery) -> FilterResult:
        ...


def default_stages() -> List[FilterStageProtocol]:
    """Build the three standard stages in their required order."""
    return [TextSearchFilter(), department_filter(), position_filter()]


def keep_passed(records: Sequence[Employee], result: FilterResult) -> List[Employee]:
    """
    Records flagged in ``result.keep``, in input order.

    Raises:
        ValueError: If the mask does not cover the input one-to-one
    """
    if len(result.keep) != len(records):
        raise ValueError(
            f"Filter mask has {len(result.keep)} entries for {len(records)} records"
        )
    return [r for r, kept in zip(records, result.keep) if kept]


def filter_records(
    records: Sequence[Employee],
    query: RosterQuery,
    stages: Optional[Sequence[FilterStageProtocol]] = None,
) -> List[Employee]:
    """
    Apply every stage in order and return the surviving records.

    The result is a new list holding a subset of ``records`` in their
    original relative order.
    """
    current = list(records)
    for stage in stages if stages is not None else default_stages():
        if stage.is_active(query):
            current = keep_passed(current, stage.apply(current, query))
    return current
