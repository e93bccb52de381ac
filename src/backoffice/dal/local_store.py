"""
Manual store backed by a local directory, the layout shipped with the
deployment package (``training/modules``).
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Union

from backoffice.dal import BaseManualStore, ManualStoreError
from backoffice.handlers.utils.observability import logger, tracer


class LocalManualStore(BaseManualStore):
    """Reads training documents from a directory on disk."""

    source = 'local'

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    @tracer.capture_method
    def list_files(self) -> List[str]:
        try:
            return sorted(entry.name for entry in self.directory.iterdir() if entry.is_file())
        except OSError as e:
            logger.error("Failed to list training documents", extra={
                "directory": str(self.directory),
                "error": str(e),
            })
            raise ManualStoreError(
                message=f"Modules directory not readable: {self.directory}",
                source=self.source,
            ) from e

    @tracer.capture_method
    def read_file(self, filename: str) -> str:
        try:
            return (self.directory / filename).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read training document", extra={
                "document": filename,
                "error": str(e),
            })
            raise ManualStoreError(message=f"Training document not readable: {filename}", source=self.source) from e

    def health_check(self) -> dict:
        healthy = self.directory.is_dir()
        return {
            "status": "healthy" if healthy else "unhealthy",
            "source": self.source,
            "directory": str(self.directory),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
