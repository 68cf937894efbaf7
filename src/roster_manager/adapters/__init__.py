"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols the core depends on.

Providers:
    - MockRosterProvider: Deterministic sample roster
    - load_employees: Roster from a YAML/JSON file

Loggers and metrics:
    - ConsoleAuditLogger: Stage events through the logging module
    - InMemoryMetricsCollector: Simple in-memory collection

Delivery:
    - FileArtifactSink: Writes export artifacts to a directory
"""

from roster_manager.adapters.console_logger import ConsoleAuditLogger
from roster_manager.adapters.file_sink import FileArtifactSink
from roster_manager.adapters.metrics_collector import InMemoryMetricsCollector
from roster_manager.adapters.mock_roster import MockRosterProvider, load_employees

__all__ = [
    "ConsoleAuditLogger",
    "FileArtifactSink",
    "InMemoryMetricsCollector",
    "MockRosterProvider",
    "load_employees",
]
