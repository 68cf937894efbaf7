"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model for the Roster Manager.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - Employee: One record on the roster
    - PayFrequency, Gender: Enumerated employee attributes
    - SortKey, SortOrder: Orderable fields and direction

Value Objects:
    - RosterQuery: Search, filter and sort parameters
    - FilterResult: Result of a single filter stage
    - QueryResult: A derived view and its audit trail
    - RosterStats: Aggregate figures over the roster
"""

from roster_manager.domain.entities import (
    Employee,
    Gender,
    PayFrequency,
    SortKey,
    SortOrder,
)
from roster_manager.domain.value_objects import (
    ALL_DEPARTMENTS,
    ALL_POSITIONS,
    FilterResult,
    QueryResult,
    RosterQuery,
    RosterStats,
    Snapshot,
    StageResult,
)

__all__ = [
    "Employee",
    "Gender",
    "PayFrequency",
    "SortKey",
    "SortOrder",
    "ALL_DEPARTMENTS",
    "ALL_POSITIONS",
    "FilterResult",
    "QueryResult",
    "RosterQuery",
    "RosterStats",
    "Snapshot",
    "StageResult",
]
