"""Domain models for ManjaWord."""

from manjaword.domain.models.document import (
    EditorDocument,
    OpenedDocument,
    dump_document,
    parse_document,
    unwrap,
    wrap,
)
from manjaword.domain.models.enums import ExportFormat
from manjaword.domain.models.grammar import GrammarMatch, GrammarResponse
from manjaword.domain.models.settings import (
    AppSettings,
    AutosaveSettings,
    ExportSettings,
    GrammarSettings,
)

__all__ = [
    "AppSettings",
    "AutosaveSettings",
    "EditorDocument",
    "ExportFormat",
    "ExportSettings",
    "GrammarMatch",
    "GrammarResponse",
    "GrammarSettings",
    "OpenedDocument",
    "dump_document",
    "parse_document",
    "unwrap",
    "wrap",
]
