"""
Export Package - Tabular export of the derived view.

Components:
    - export_csv / escape_field: CSV serialization
    - ExportArtifact / build_artifact: Packaging as employees.csv
    - ArtifactSink: Delivery protocol (see adapters.FileArtifactSink)

Errors:
    - EmptyInputError: Nothing to export
    - ExportFailureError: Unexpected failure, cause preserved
"""

from roster_manager.export.artifact import (
    ArtifactSink,
    ExportArtifact,
    build_artifact,
)
from roster_manager.export.csv_exporter import (
    COLUMNS,
    HEADERS,
    EmptyInputError,
    ExportError,
    ExportFailureError,
    escape_field,
    export_csv,
    format_row,
    to_text,
)

__all__ = [
    "ArtifactSink",
    "ExportArtifact",
    "build_artifact",
    "COLUMNS",
    "HEADERS",
    "EmptyInputError",
    "ExportError",
    "ExportFailureError",
    "escape_field",
    "export_csv",
    "format_row",
    "to_text",
]
