"""Use Case: Save Document."""

from __future__ import annotations

import logging
from typing import Any

from manjaword.application.use_cases.open_document import DOCUMENT_FILTERS
from manjaword.domain.errors import NoFileSelectedError
from manjaword.domain.models.document import wrap
from manjaword.domain.ports.document_repository import DocumentRepositoryPort
from manjaword.domain.ports.file_dialog import FileDialogPort
from manjaword.domain.rules.constants import DEFAULT_DOCUMENT_NAME
from manjaword.validators.path_validator import ensure_document_suffix, validate_document_path

logger = logging.getLogger(__name__)


class SaveDocumentUseCase:
    """Write the editor payload to a destination chosen through the dialog."""

    def __init__(self, dialog: FileDialogPort, repository: DocumentRepositoryPort) -> None:
        self._dialog = dialog
        self._repository = repository

    def execute(self, content: Any) -> str:
        """Save *content* and return the final path.

        The compound ``.manjaword.json`` suffix is appended when the chosen
        name lacks it, then the path is validated. Any existing file at the
        destination is overwritten.

        Raises:
            NoFileSelectedError: The dialog was dismissed.
            InvalidPathError: The path was rejected.
            DocumentSerializationError: The payload is not JSON-serializable.
            OSError: The file could not be written.
        """
        selected = self._dialog.pick_save_path(DOCUMENT_FILTERS, DEFAULT_DOCUMENT_NAME)
        if selected is None:
            logger.debug("Save cancelled: no file selected")
            raise NoFileSelectedError("No file selected")

        path = validate_document_path(ensure_document_suffix(selected))
        self._repository.write(path, wrap(content))
        logger.info("Saved document to %s", path)
        return str(path)
