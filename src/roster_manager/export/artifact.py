"""
Export Artifact Packaging.

Wraps the CSV document as a downloadable artifact (UTF-8 bytes, file name,
MIME type). Delivering the artifact is left to an ArtifactSink.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from pydantic import BaseModel

from roster_manager.config.models import ExportConfig
from roster_manager.domain.entities import Employee
from roster_manager.export.csv_exporter import export_csv

ENCODING = "utf-8"


class ExportArtifact(BaseModel):
    """A finished export ready for delivery."""

    content: bytes
    filename: str
    mime_type: str

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        return self.content.decode(ENCODING)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


class ArtifactSink(Protocol):
    """Delivers an artifact somewhere outside the core."""

    def deliver(self, artifact: ExportArtifact) -> None:
        ...


def build_artifact(
    records: Sequence[Employee],
    config: Optional[ExportConfig] = None,
) -> ExportArtifact:
    """
    Export ``records`` and package the result.

    Raises:
        EmptyInputError: If ``records`` is empty
        ExportFailureError: If serialization fails
    """
    config = config or ExportConfig()
    document = export_csv(records)
    return ExportArtifact(
        content=document.encode(ENCODING),
        filename=config.filename,
        mime_type=config.mime_type,
    )
