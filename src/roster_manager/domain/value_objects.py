"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the query state and the
results derived from it. They have no conceptual identity.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from pydantic import BaseModel, Field

from roster_manager.domain.entities import Employee, SortKey, SortOrder


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Immutable store contents at one version
Snapshot = Tuple[Employee, ...]

# Rejection reasons: record id -> reason string
RejectionReasonsDict = Dict[str, str]

ALL_DEPARTMENTS = "All Departments"
ALL_POSITIONS = "All Positions"


class RosterQuery(BaseModel):
    """User-controlled parameters that determine the derived view."""

    search_term: str = ""
    department_filter: str = ALL_DEPARTMENTS
    position_filter: str = ALL_POSITIONS
    # Selections that mean "do not filter"
    all_departments_label: str = ALL_DEPARTMENTS
    all_positions_label: str = ALL_POSITIONS
    sort_key: SortKey = SortKey.NAME
    sort_order: SortOrder = SortOrder.ASC

    model_config = {"frozen": True}

    def with_changes(self, **changes: Any) -> "RosterQuery":
        return self.model_copy(update=changes)


class FilterResult(BaseModel):
    """
    Result of applying a single filter stage.

    ``keep`` is aligned with the stage input by position and decides which
    records survive. The id lists and reasons feed the audit trail only;
    ids need not be unique within one input.
    """

    keep: List[bool] = Field(
        default_factory=list, description="Keep flag per input record"
    )
    passed_ids: List[str] = Field(
        default_factory=list, description="Ids of passed records, input order"
    )
    rejected_ids: List[str] = Field(
        default_factory=list, description="Ids of rejected records"
    )
    rejection_reasons: RejectionReasonsDict = Field(
        default_factory=dict, description="Record id -> rejection reason"
    )

    model_config = {"frozen": True}

    @property
    def passed_count(self) -> int:
        return sum(self.keep)

    @property
    def rejected_count(self) -> int:
        return len(self.keep) - sum(self.keep)

    @classmethod
    def pass_through(cls, records: Sequence[Employee]) -> "FilterResult":
        return cls(keep=[True] * len(records), passed_ids=[r.id for r in records])


class StageResult(BaseModel):
    """Result of a single filter stage for the audit trail."""

    stage_name: str
    input_count: int
    output_count: int
    duration_seconds: float
    active: bool = True


class QueryResult(BaseModel):
    """A derived view together with the inputs it came from."""

    query: RosterQuery
    store_version: int
    records: Tuple[Employee, ...]
    audit_trail: List[StageResult] = Field(default_factory=list)

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


class RosterStats(BaseModel):
    """Summary figures over the whole roster."""

    total: int = 0
    active_count: int = 0
    distinct_departments: int = 0
    monthly_payroll: float = 0.0

    model_config = {"frozen": True}
