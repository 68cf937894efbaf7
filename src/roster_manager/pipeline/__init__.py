"""
Pipeline Package - Query Orchestration.

Components:
    - derive_view: Pure filter-then-sort derivation
    - QueryPipeline: The same derivation with audit trail and metrics

Design Principles:
    - All dependencies injected via constructor
    - No hidden state, identical inputs give identical views
"""

from roster_manager.pipeline.query_pipeline import (
    SORT_STAGE,
    AuditLoggerProtocol,
    MetricsCollectorProtocol,
    QueryPipeline,
    derive_view,
)

__all__ = [
    "SORT_STAGE",
    "AuditLoggerProtocol",
    "MetricsCollectorProtocol",
    "QueryPipeline",
    "derive_view",
]
