"""JSON repository: implements DocumentRepositoryPort with whole-file I/O.

Writes overwrite the target in place. A crash mid-write can leave a
truncated file; callers see that as a deserialization error on next open.
"""

from __future__ import annotations

import logging
from pathlib import Path

from manjaword.domain.models.document import EditorDocument, dump_document, parse_document
from manjaword.domain.ports.document_repository import DocumentRepositoryPort

logger = logging.getLogger(__name__)


class JsonDocumentRepository(DocumentRepositoryPort):
    """Persist document envelopes as pretty-printed UTF-8 JSON."""

    def write(self, path: Path, document: EditorDocument) -> None:
        """Serialize *document* and overwrite *path*."""
        payload = dump_document(document)
        path.write_text(payload, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", len(payload), path)

    def read(self, path: Path) -> EditorDocument:
        """Read and parse the envelope stored at *path*.

        Raises:
            OSError: The file cannot be read.
            DocumentDeserializationError: The file is not a valid envelope.
        """
        raw = path.read_bytes()
        return parse_document(raw)
