"""Use Case: Open Document.

Asks the file dialog for a document, validates the path and loads the
envelope. Either the whole document loads or an exception is raised.
"""

from __future__ import annotations

import logging

from manjaword.domain.errors import NoFileSelectedError
from manjaword.domain.models.document import OpenedDocument, unwrap
from manjaword.domain.ports.document_repository import DocumentRepositoryPort
from manjaword.domain.ports.file_dialog import FileDialogPort, FileFilter
from manjaword.domain.rules.constants import DOCUMENT_FILTER_LABEL, DOCUMENT_SUFFIX
from manjaword.validators.path_validator import validate_document_path

logger = logging.getLogger(__name__)

DOCUMENT_FILTERS = [FileFilter(DOCUMENT_FILTER_LABEL, (DOCUMENT_SUFFIX.lstrip("."),))]


class OpenDocumentUseCase:
    """Load a document chosen through the file dialog."""

    def __init__(self, dialog: FileDialogPort, repository: DocumentRepositoryPort) -> None:
        self._dialog = dialog
        self._repository = repository

    def execute(self) -> OpenedDocument:
        """Open the selected document.

        Returns:
            The path string and the unwrapped editor payload.

        Raises:
            NoFileSelectedError: The dialog was dismissed.
            InvalidPathError, InvalidExtensionError: The path was rejected.
            OSError: The file could not be read.
            DocumentDeserializationError: The file is not a valid envelope.
        """
        selected = self._dialog.pick_open_path(DOCUMENT_FILTERS)
        if selected is None:
            logger.debug("Open cancelled: no file selected")
            raise NoFileSelectedError("No file selected")

        path = validate_document_path(selected)
        document = self._repository.read(path)
        logger.info("Opened document %s (schema %s)", path, document.schema_version)
        return OpenedDocument(path=str(path), content=unwrap(document))
