"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from roster_manager.domain.entities import SortKey, SortOrder
from roster_manager.domain.value_objects import ALL_DEPARTMENTS, ALL_POSITIONS


class QueryConfig(BaseModel):
    """Defaults for a new session's query."""

    default_sort_key: SortKey = SortKey.NAME
    default_sort_order: SortOrder = SortOrder.ASC
    all_departments_label: str = Field(default=ALL_DEPARTMENTS, min_length=1)
    all_positions_label: str = Field(default=ALL_POSITIONS, min_length=1)


class ExportConfig(BaseModel):
    """Configuration for the CSV export artifact."""

    filename: str = Field(default="employees.csv", min_length=1)
    mime_type: str = Field(default="text/csv;charset=utf-8")
    output_dir: str = Field(default=".")


class CacheConfig(BaseModel):
    """Memoisation of derived views keyed on (store version, query)."""

    enabled: bool = False
    max_entries: int = Field(default=32, ge=1)


class RosterConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    query: QueryConfig = Field(default_factory=QueryConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
