"""Autosave store: a single snapshot in the application-private data dir.

The snapshot lives at ``<user_data_dir>/autosave.manjaword.json`` (resolved
with ``platformdirs``, local rather than roaming). Every autosave replaces
the previous snapshot; there is no history.
"""

from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

from manjaword.domain.errors import StoragePathUnavailableError
from manjaword.domain.models.document import EditorDocument
from manjaword.domain.ports.autosave_store import AutosaveStorePort
from manjaword.domain.ports.document_repository import DocumentRepositoryPort
from manjaword.domain.rules.constants import APP_NAME, AUTOSAVE_FILENAME
from manjaword.infrastructure.persistence.json_repository import JsonDocumentRepository

logger = logging.getLogger(__name__)


class AutosaveStore(AutosaveStorePort):
    """Read and write the autosave snapshot.

    Parameters
    ----------
    data_dir : Path | None
        Override the platform data directory (useful for testing).
    repository : DocumentRepositoryPort | None
        Serializer used for the snapshot file.
    """

    def __init__(
        self,
        data_dir: Path | None = None,
        repository: DocumentRepositoryPort | None = None,
    ) -> None:
        self._data_dir = data_dir
        self._repository = repository or JsonDocumentRepository()

    # -- Public API ----------------------------------------------------------

    @property
    def autosave_path(self) -> Path:
        """Absolute path to the snapshot file, creating its directory."""
        return self._resolve_dir() / AUTOSAVE_FILENAME

    def save(self, document: EditorDocument) -> Path:
        """Overwrite the snapshot with *document*."""
        path = self.autosave_path
        self._repository.write(path, document)
        logger.debug("Autosaved document to %s", path)
        return path

    def load(self) -> EditorDocument | None:
        """Return the stored snapshot, or ``None`` if nothing was autosaved yet.

        Raises:
            DocumentDeserializationError: The snapshot exists but is corrupt.
        """
        path = self.autosave_path
        if not path.exists():
            return None
        return self._repository.read(path)

    def discard(self) -> None:
        """Delete the snapshot if there is one."""
        self.autosave_path.unlink(missing_ok=True)

    # -- Internals -----------------------------------------------------------

    def _resolve_dir(self) -> Path:
        try:
            base = self._data_dir or Path(platformdirs.user_data_dir(APP_NAME, roaming=False))
            base.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoragePathUnavailableError(
                f"Application data path unavailable: {exc}"
            ) from exc
        return base
