"""
Query Pipeline - Main Orchestrator.

Derives the displayed view from one store snapshot and one query:

    view = sort(filter(records, query), query.sort_key, query.sort_order)

The derivation is pure, synchronous and deterministic. QueryPipeline adds
an audit trail and timings around the same steps.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import (
    QueryResult,
    RosterQuery,
    Snapshot,
    StageResult,
)
from roster_manager.filters.stages import (
    FilterStageProtocol,
    default_stages,
    filter_records,
    keep_passed,
)
from roster_manager.sorting.comparator import sort_records

logger = logging.getLogger(__name__)

SORT_STAGE = "sort"


def derive_view(records: Sequence[Employee], query: RosterQuery) -> List[Employee]:
    """Filter then sort ``records``. Returns a new list."""
    return sort_records(
        filter_records(records, query),
        query.sort_key,
        query.sort_order,
    )


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_stage_start(
        self, stage_name: str, input_count: int, metadata: Optional[Dict] = None
    ) -> None:
        ...

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict] = None,
    ) -> None:
        ...

    def log_record_filtered(
        self, record: Employee, stage_name: str, reason: str
    ) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


class QueryPipeline:
    """Orchestrates filter stages and the sort step for one derivation."""

    def __init__(
        self,
        stages: Sequence[FilterStageProtocol],
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            stages: Ordered filter stages
            audit_logger: For the per-stage audit trail (optional)
            metrics_collector: For timings and counts (optional)
        """
        self.stages = list(stages)
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    @classmethod
    def default(
        cls,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> "QueryPipeline":
        """Pipeline with the standard search, department and position stages."""
        return cls(default_stages(), audit_logger, metrics_collector)

    def run(
        self,
        records: Snapshot,
        query: RosterQuery,
        store_version: int = 0,
    ) -> QueryResult:
        """
        Derive the view for ``query`` over ``records``.

        Args:
            records: One store snapshot
            query: Current query parameters
            store_version: Version the snapshot was read at

        Returns:
            QueryResult with the ordered records and audit trail
        """
        start_time = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.set_correlation_id(str(uuid.uuid4()))
        current: List[Employee] = list(records)
        audit_trail: List[StageResult] = []

        for stage in self.stages:
            stage_result, current = self._execute_stage(stage, current, query)
            audit_trail.append(stage_result)

        sort_start = time.perf_counter()
        ordered = sort_records(current, query.sort_key, query.sort_order)
        audit_trail.append(
            StageResult(
                stage_name=SORT_STAGE,
                input_count=len(current),
                output_count=len(ordered),
                duration_seconds=time.perf_counter() - sort_start,
            )
        )

        total_duration = time.perf_counter() - start_time
        if self.metrics_collector:
            self.metrics_collector.record_timing("derive_view_seconds", total_duration)
            self.metrics_collector.record_count("view_records_total", len(ordered))

        logger.debug(
            f"Derived view v{store_version}: {len(records)} -> {len(ordered)} records "
            f"({total_duration:.4f}s)"
        )
        return QueryResult(
            query=query,
            store_version=store_version,
            records=tuple(ordered),
            audit_trail=audit_trail,
        )

    def _execute_stage(
        self,
        stage: FilterStageProtocol,
        records: List[Employee],
        query: RosterQuery,
    ) -> Tuple[StageResult, List[Employee]]:
        """Execute a single filter stage."""
        if not stage.is_active(query):
            return (
                StageResult(
                    stage_name=stage.name,
                    input_count=len(records),
                    output_count=len(records),
                    duration_seconds=0.0,
                    active=False,
                ),
                records,
            )

        stage_start = time.perf_counter()
        if self.audit_logger:
            self.audit_logger.log_stage_start(stage.name, len(records))

        filter_result = stage.apply(records, query)
        passed = keep_passed(records, filter_result)
        stage_duration = time.perf_counter() - stage_start

        if self.audit_logger:
            for record, kept in zip(records, filter_result.keep):
                if not kept:
                    reason = filter_result.rejection_reasons.get(record.id, "rejected")
                    self.audit_logger.log_record_filtered(record, stage.name, reason)
            self.audit_logger.log_stage_end(stage.name, len(passed), stage_duration)

        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "stage_duration_seconds", stage_duration, {"stage": stage.name}
            )
            self.metrics_collector.record_count(
                "records_filtered_total",
                filter_result.rejected_count,
                {"stage": stage.name},
            )

        stage_result = StageResult(
            stage_name=stage.name,
            input_count=len(records),
            output_count=len(passed),
            duration_seconds=stage_duration,
        )
        return stage_result, passed
