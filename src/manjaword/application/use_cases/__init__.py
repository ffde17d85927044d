"""Use cases orchestrating domain ports."""

from manjaword.application.use_cases.autosave import (
    AutosaveUseCase,
    DiscardAutosaveUseCase,
    RecoverUseCase,
)
from manjaword.application.use_cases.check_grammar import CheckGrammarUseCase
from manjaword.application.use_cases.export_document import ExportDocumentUseCase
from manjaword.application.use_cases.open_document import OpenDocumentUseCase
from manjaword.application.use_cases.save_document import SaveDocumentUseCase

__all__ = [
    "AutosaveUseCase",
    "CheckGrammarUseCase",
    "DiscardAutosaveUseCase",
    "ExportDocumentUseCase",
    "OpenDocumentUseCase",
    "RecoverUseCase",
    "SaveDocumentUseCase",
]
