"""
Console Audit Logger.

An audit logger that writes pipeline events through the standard logging
module, prefixed with the current derivation's correlation id.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from roster_manager.domain.entities import Employee

logger = logging.getLogger("roster_manager.audit")


class ConsoleAuditLogger:
    """Logging-backed audit logger for filter stages."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every event. If False, only stage summaries.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    @property
    def correlation_id(self) -> Optional[str]:
        return self._correlation_id

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_stage_start(
        self,
        stage_name: str,
        input_count: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if self._verbose:
            self._log(logging.DEBUG, f"Starting {stage_name} with {input_count} records")

    def log_stage_end(
        self,
        stage_name: str,
        output_count: int,
        duration_seconds: float,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(
            logging.INFO,
            f"Completed {stage_name}: {output_count} records passed "
            f"({duration_seconds:.3f}s)",
        )

    def log_record_filtered(
        self,
        record: Employee,
        stage_name: str,
        reason: str,
    ) -> None:
        if self._verbose:
            self._log(
                logging.DEBUG,
                f"{record.employee_id} filtered by {stage_name}: {reason}",
            )

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly such as a discarded stale derivation."""
        level = logging.getLevelName(severity.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        self._log(level, f"ANOMALY: {message}")

    def _log(self, level: int, message: str) -> None:
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        logger.log(level, f"[{corr_id}] {message}")
