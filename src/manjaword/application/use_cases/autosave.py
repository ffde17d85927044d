"""Use Cases: Autosave and Recover.

Both work on the single snapshot kept by the autosave store. A recovered
snapshot has the same envelope shape as a manually saved document.
"""

from __future__ import annotations

import logging
from typing import Any

from manjaword.domain.models.document import EditorDocument, wrap
from manjaword.domain.ports.autosave_store import AutosaveStorePort

logger = logging.getLogger(__name__)


class AutosaveUseCase:
    """Overwrite the autosave snapshot with the current editor payload."""

    def __init__(self, store: AutosaveStorePort) -> None:
        self._store = store

    def execute(self, content: Any) -> None:
        """Wrap *content* and replace the previous snapshot.

        Raises:
            StoragePathUnavailableError: The data directory is unusable.
            DocumentSerializationError: The payload is not JSON-serializable.
            OSError: The snapshot could not be written.
        """
        path = self._store.save(wrap(content))
        logger.debug("Autosave written to %s", path)


class RecoverUseCase:
    """Return the last autosave snapshot, if any."""

    def __init__(self, store: AutosaveStorePort) -> None:
        self._store = store

    def execute(self) -> EditorDocument | None:
        """Load the snapshot.

        Returns:
            The stored envelope, or ``None`` on a fresh install.

        Raises:
            StoragePathUnavailableError: The data directory is unusable.
            OSError: The snapshot could not be read.
            DocumentDeserializationError: The snapshot is corrupt.
        """
        document = self._store.load()
        if document is None:
            logger.debug("No autosave snapshot to recover")
        else:
            logger.info("Recovered autosave from %s", document.updated_at)
        return document


class DiscardAutosaveUseCase:
    """Drop the autosave snapshot once the document is safely saved."""

    def __init__(self, store: AutosaveStorePort) -> None:
        self._store = store

    def execute(self) -> None:
        """Remove the snapshot; a missing snapshot is not an error.

        Raises:
            StoragePathUnavailableError: The data directory is unusable.
            OSError: The snapshot could not be removed.
        """
        self._store.discard()
        logger.debug("Autosave snapshot discarded")
