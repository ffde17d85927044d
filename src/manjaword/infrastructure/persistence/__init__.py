"""Document persistence: explicit saves and the autosave snapshot."""

from manjaword.infrastructure.persistence.autosave_store import AutosaveStore
from manjaword.infrastructure.persistence.json_repository import JsonDocumentRepository

__all__ = ["AutosaveStore", "JsonDocumentRepository"]
