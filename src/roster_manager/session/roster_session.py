"""
Roster Session - Query state and user actions.

The RosterSession holds the current query for one user session, turns user
actions into query changes or store mutations, and derives the view, the
statistics and the export from a single store snapshot each time.

Stale results:
    A derivation is requested with ``begin_derivation`` and published with
    ``complete_derivation``. Tickets are numbered in request order; a result
    whose ticket is older than the last published one is discarded, so a
    slow derivation never overwrites a newer query's view.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol

from roster_manager.config.models import RosterConfig
from roster_manager.domain.entities import Employee
from roster_manager.domain.value_objects import (
    QueryResult,
    RosterQuery,
    RosterStats,
    Snapshot,
)
from roster_manager.export.artifact import ArtifactSink, ExportArtifact, build_artifact
from roster_manager.export.csv_exporter import EmptyInputError, ExportFailureError
from roster_manager.pipeline.query_pipeline import (
    AuditLoggerProtocol,
    MetricsCollectorProtocol,
    QueryPipeline,
)
from roster_manager.session.view_cache import ViewCache
from roster_manager.stats.aggregate import compute_stats
from roster_manager.store.record_store import RecordStoreProtocol
from roster_manager.validation.query_validator import QueryValidator

logger = logging.getLogger(__name__)


class QueryGenerator(Protocol):
    """Turns a natural-language intent into a search string."""

    def generate(self, intent: str) -> str:
        ...


@dataclass(frozen=True)
class DerivationTicket:
    """One requested derivation: the inputs it must be computed from."""

    number: int
    store_version: int
    records: Snapshot
    query: RosterQuery


class RosterSession:
    """User-facing roster state over a record store."""

    def __init__(
        self,
        store: RecordStoreProtocol,
        config: Optional[RosterConfig] = None,
        pipeline: Optional[QueryPipeline] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize session.

        Args:
            store: Authoritative record store
            config: Roster configuration (defaults used if omitted)
            pipeline: Query pipeline (standard stages if omitted)
            audit_logger: Passed to the default pipeline
            metrics_collector: Passed to the default pipeline
        """
        self.store = store
        self.config = config or RosterConfig()
        self.pipeline = pipeline or QueryPipeline.default(
            audit_logger, metrics_collector
        )
        self.audit_logger = audit_logger
        self.validator = QueryValidator(self.config)
        self.cache: Optional[ViewCache] = (
            ViewCache(self.config.cache.max_entries) if self.config.cache.enabled else None
        )

        self._query = self.validator.default_query()
        self._issued = 0
        self._published = 0
        self._current: Optional[QueryResult] = None

    # ------------------------------------------------------------------
    # Query state
    # ------------------------------------------------------------------

    @property
    def query(self) -> RosterQuery:
        return self._query

    def set_query(self, **params: Any) -> RosterQuery:
        """Replace any query parameters, validating raw values."""
        merged = self._query.model_dump()
        merged.update(params)
        self._query = self.validator.build(merged)
        return self._query

    def set_search_term(self, term: str) -> RosterQuery:
        return self.set_query(search_term=term)

    def set_department_filter(self, department: str) -> RosterQuery:
        return self.set_query(department_filter=department)

    def set_position_filter(self, position: str) -> RosterQuery:
        return self.set_query(position_filter=position)

    def set_sort_key(self, key: Any) -> RosterQuery:
        return self.set_query(sort_key=self.validator.parse_sort_key(key))

    def set_sort_order(self, order: Any) -> RosterQuery:
        return self.set_query(sort_order=self.validator.parse_sort_order(order))

    def toggle_sort_order(self) -> RosterQuery:
        return self.set_query(sort_order=self._query.sort_order.toggled())

    def reset_query(self) -> RosterQuery:
        self._query = self.validator.default_query()
        return self._query

    def apply_generated_query(self, generator: QueryGenerator, intent: str) -> RosterQuery:
        """Use the generator's output verbatim as the search term."""
        term = generator.generate(intent)
        logger.debug(f"Generated search term {term!r} for intent {intent!r}")
        return self.set_search_term(term)

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------

    def begin_derivation(self) -> DerivationTicket:
        """Capture one snapshot and the current query for a derivation."""
        self._issued += 1
        version, records = self.store.snapshot()
        return DerivationTicket(self._issued, version, records, self._query)

    def derive(self, ticket: DerivationTicket) -> QueryResult:
        """Compute the view for ``ticket``. Pure apart from the cache."""
        if self.cache is not None:
            cached = self.cache.get(ticket.store_version, ticket.query)
            if cached is not None:
                return cached
        result = self.pipeline.run(ticket.records, ticket.query, ticket.store_version)
        if self.cache is not None:
            self.cache.put(result)
        return result

    def complete_derivation(self, ticket: DerivationTicket, result: QueryResult) -> bool:
        """
        Publish ``result`` unless a newer request has already been published.

        Returns:
            True if the result became the current view
        """
        if ticket.number < self._published:
            message = (
                f"Discarded stale view from request #{ticket.number} "
                f"(current is #{self._published})"
            )
            logger.warning(message)
            if self.audit_logger is not None:
                self.audit_logger.log_anomaly(message, severity="WARNING")
            return False
        self._published = ticket.number
        self._current = result
        return True

    def view(self) -> QueryResult:
        """Derive and publish the view for the current query and store."""
        ticket = self.begin_derivation()
        self.complete_derivation(ticket, self.derive(ticket))
        return self._current

    @property
    def current_view(self) -> Optional[QueryResult]:
        """Last published view, without recomputing."""
        return self._current

    def stats(self) -> RosterStats:
        """Statistics over the full roster, never the filtered view."""
        return compute_stats(self.store.list())

    def department_options(self) -> List[str]:
        labels = sorted({e.department for e in self.store.list()})
        return [self.config.query.all_departments_label] + labels

    def position_options(self) -> List[str]:
        labels = sorted({e.position for e in self.store.list()})
        return [self.config.query.all_positions_label] + labels

    # ------------------------------------------------------------------
    # Store actions
    # ------------------------------------------------------------------

    def add_employee(self, employee: Employee) -> Employee:
        self.store.add(employee)
        return employee

    def update_employee(self, employee: Employee) -> Employee:
        """
        Replace the stored record with the same id.

        Raises:
            NotFoundError: If the record was deleted meanwhile
        """
        self.store.update(employee)
        return employee

    def delete_employee(self, record_id: str) -> None:
        """
        Raises:
            NotFoundError: If no record has this id
        """
        self.store.remove(record_id)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self, sink: Optional[ArtifactSink] = None) -> ExportArtifact:
        """
        Export the current view as ``employees.csv``.

        Args:
            sink: Optional delivery target for the artifact

        Raises:
            EmptyInputError: If the view holds no records
            ExportFailureError: If the document could not be built
        """
        result = self.view()
        try:
            artifact = build_artifact(result.records, self.config.export)
        except EmptyInputError:
            logger.info("Export skipped: no employee data to export")
            raise
        except ExportFailureError as exc:
            logger.debug(f"Export aborted: {exc.cause!r}")
            raise

        if sink is not None:
            sink.deliver(artifact)
        logger.info(f"Exported {len(result)} employees to {artifact.filename}")
        return artifact

