"""
Roster Manager - Employee Roster Query and Export.

Holds a collection of employee records and derives the displayed view from
user-controlled query parameters: free-text search, department and position
filters, and a sort key and direction. The derived view can be exported as
a CSV document.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection for testability
    - Pure derivations over immutable store snapshots
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Employee, RosterQuery, QueryResult, ...)
    - filters: Text search and category filter stages
    - sorting: Field-type comparator engine
    - pipeline: Filter-then-sort orchestration
    - export: CSV serialization and artifact packaging
    - stats: Aggregate figures over the whole roster
    - store: Versioned copy-on-write record store
    - session: Query state, user actions, stale-result guard
    - adapters: Infrastructure implementations (loggers, sinks, seed data)
    - config: Configuration models and loaders

Example:
    >>> from roster_manager import InMemoryRecordStore, RosterSession
    >>> from roster_manager.adapters import MockRosterProvider
    >>> store = InMemoryRecordStore(MockRosterProvider().get_employees())
    >>> session = RosterSession(store)
    >>> session.set_search_term("eng").search_term
    'eng'
    >>> session.stats().total
    14
"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Roster Manager.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("roster_manager").setLevel(level)


from roster_manager.domain import (  # noqa: E402
    Employee,
    RosterQuery,
    RosterStats,
    SortKey,
    SortOrder,
)
from roster_manager.export import EmptyInputError, ExportFailureError, export_csv  # noqa: E402
from roster_manager.pipeline import QueryPipeline, derive_view  # noqa: E402
from roster_manager.session import RosterSession  # noqa: E402
from roster_manager.stats import compute_stats  # noqa: E402
from roster_manager.store import InMemoryRecordStore, NotFoundError  # noqa: E402

__all__ = [
    "configure_logging",
    "Employee",
    "RosterQuery",
    "RosterStats",
    "SortKey",
    "SortOrder",
    "EmptyInputError",
    "ExportFailureError",
    "export_csv",
    "QueryPipeline",
    "derive_view",
    "RosterSession",
    "compute_stats",
    "InMemoryRecordStore",
    "NotFoundError",
]
