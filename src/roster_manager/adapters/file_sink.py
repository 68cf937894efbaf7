"""
File Artifact Sink.

Delivers export artifacts by writing them into a directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from roster_manager.config.models import ExportConfig
from roster_manager.export.artifact import ExportArtifact

logger = logging.getLogger(__name__)


class FileArtifactSink:
    """Writes each delivered artifact to ``output_dir / artifact.filename``."""

    def __init__(self, output_dir: Union[str, Path] = ".") -> None:
        self.output_dir = Path(output_dir)
        self.delivered: List[Path] = []

    @classmethod
    def from_config(cls, config: ExportConfig) -> "FileArtifactSink":
        """Sink writing into ``config.output_dir``."""
        return cls(config.output_dir)

    def deliver(self, artifact: ExportArtifact) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / artifact.filename
        path.write_bytes(artifact.content)
        self.delivered.append(path)
        logger.info(f"Wrote {artifact.size_bytes} bytes to {path}")

    @property
    def last_path(self) -> Optional[Path]:
        return self.delivered[-1] if self.delivered else None
