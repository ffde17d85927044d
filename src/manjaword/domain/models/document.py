"""Document envelope: the unit persisted by save and autosave.

The envelope carries a schema version and a timestamp around an opaque
rich-text payload (a Quill delta). The payload belongs to the editor UI and
is never inspected here; it is stored and returned exactly as received.

On disk the envelope is a JSON object::

    {"version": "1.0.0", "updated_at": "2026-...", "content": {...}}
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from manjaword.domain.errors import DocumentDeserializationError, DocumentSerializationError
from manjaword.domain.rules.constants import SCHEMA_VERSION


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class EditorDocument(BaseModel):
    """Versioned envelope around an opaque editor payload.

    Attributes:
        schema_version: Format identifier, stored under the ``version`` key.
        updated_at: ISO-8601 UTC timestamp taken when the envelope was built.
        content: The editor payload, any JSON value.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    schema_version: str = Field(default=SCHEMA_VERSION, alias="version")
    updated_at: str = Field(default_factory=_utc_now)
    content: Any


class OpenedDocument(BaseModel):
    """Result of opening a document: where it came from and its payload."""

    path: str
    content: Any


# -- Envelope operations -----------------------------------------------------


def wrap(content: Any) -> EditorDocument:
    """Stamp *content* with the current schema version and time."""
    return EditorDocument(version=SCHEMA_VERSION, updated_at=_utc_now(), content=content)


def unwrap(document: EditorDocument) -> Any:
    """Return the payload carried by *document*."""
    return document.content


def dump_document(document: EditorDocument) -> str:
    """Serialize *document* as pretty-printed JSON.

    Raises:
        DocumentSerializationError: If the payload is not JSON-serializable.
    """
    data = {
        "version": document.schema_version,
        "updated_at": document.updated_at,
        "content": document.content,
    }
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise DocumentSerializationError(f"Document content is not valid JSON: {exc}") from exc


def parse_document(raw: str | bytes) -> EditorDocument:
    """Rebuild an envelope from stored JSON text or bytes.

    Raises:
        DocumentDeserializationError: Corrupt encoding, invalid JSON, missing
            fields or fields of the wrong type.
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        return EditorDocument.model_validate_json(text)
    except (UnicodeDecodeError, ValidationError) as exc:
        raise DocumentDeserializationError(f"Not a valid ManjaWord document: {exc}") from exc
