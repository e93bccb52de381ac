"""
Data Access Layer (DAL) for training manual documents.

Module markdown files are named ``MODULE_<n>_<NAME>.md``. The workbook of a
module carries ``REFLECTION`` or ``WORKBOOK`` in its name; the main module
file carries neither.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from backoffice.handlers.models.env_vars import TrainingHandlerEnvVars
from backoffice.handlers.utils.errors import ErrorContext, ExternalServiceError
from backoffice.handlers.utils.observability import logger
from backoffice.models.unit import ModuleDocument

WORKBOOK_MARKERS = ('REFLECTION', 'WORKBOOK')


class ManualStoreError(ExternalServiceError):
    """Raised when training documents cannot be listed or read."""

    def __init__(self, message: str, source: str, context: Optional[ErrorContext] = None):
        super().__init__(message=message, service_name=source, context=context)
        self.source = source


def module_prefix(module_number: int) -> str:
    return f'MODULE_{module_number}_'


def is_workbook_file(filename: str) -> bool:
    return any(marker in filename for marker in WORKBOOK_MARKERS)


@runtime_checkable
class ManualStore(Protocol):
    """Protocol defining the manual store interface."""

    def list_files(self) -> List[str]:
        """List document file names."""
        ...

    def get_module(self, module_number: int) -> Optional[ModuleDocument]:
        """Load the main document of a module."""
        ...

    def get_workbook(self, module_number: int) -> Optional[ModuleDocument]:
        """Load the reflection workbook of a module."""
        ...

    def health_check(self) -> dict:
        """Check that the store can be read."""
        ...


class BaseManualStore(ABC):
    """Shared file selection logic for manual stores."""

    source: str = 'manual-store'

    @abstractmethod
    def list_files(self) -> List[str]:
        """List document file names, sorted."""
        pass

    @abstractmethod
    def read_file(self, filename: str) -> str:
        """Read one document as UTF-8 text."""
        pass

    @abstractmethod
    def health_check(self) -> dict:
        """Perform a health check on the store."""
        pass

    def find_module_file(self, module_number: int) -> Optional[str]:
        prefix = module_prefix(module_number)
        return next(
            (name for name in self.list_files() if name.startswith(prefix) and not is_workbook_file(name)),
            None,
        )

    def find_workbook_file(self, module_number: int) -> Optional[str]:
        prefix = module_prefix(module_number)
        return next(
            (name for name in self.list_files() if name.startswith(prefix) and is_workbook_file(name)),
            None,
        )

    def _load(self, module_number: int, filename: Optional[str]) -> Optional[ModuleDocument]:
        if filename is None:
            return None

        content = self.read_file(filename)
        logger.debug("Loaded training document", extra={
            "source": self.source,
            "document": filename,
            "length": len(content),
        })
        return ModuleDocument(number=module_number, filename=filename, content=content)

    def get_module(self, module_number: int) -> Optional[ModuleDocument]:
        return self._load(module_number, self.find_module_file(module_number))

    def get_workbook(self, module_number: int) -> Optional[ModuleDocument]:
        return self._load(module_number, self.find_workbook_file(module_number))


def get_manual_store(env_vars: TrainingHandlerEnvVars) -> ManualStore:
    """
    Factory function to get the manual store configured by the environment.

    Args:
        env_vars: Validated handler environment variables

    Returns:
        S3 store when a bucket is configured, local directory store otherwise
    """
    # Import here to avoid circular imports
    from backoffice.dal.local_store import LocalManualStore
    from backoffice.dal.s3_store import S3ManualStore

    if env_vars.uses_s3:
        return S3ManualStore(bucket_name=env_vars.TRAINING_BUCKET_NAME, key_prefix=env_vars.TRAINING_KEY_PREFIX)
    return LocalManualStore(directory=env_vars.TRAINING_MODULES_DIR)


__all__ = [
    'BaseManualStore',
    'ManualStore',
    'ManualStoreError',
    'get_manual_store',
    'is_workbook_file',
    'module_prefix',
]
