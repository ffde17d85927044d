"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from manjaword.application.use_cases.autosave import (
    AutosaveUseCase,
    DiscardAutosaveUseCase,
    RecoverUseCase,
)
from manjaword.application.use_cases.check_grammar import CheckGrammarUseCase
from manjaword.application.use_cases.export_document import ExportDocumentUseCase
from manjaword.application.use_cases.open_document import OpenDocumentUseCase
from manjaword.application.use_cases.save_document import SaveDocumentUseCase
from manjaword.domain.models.enums import ExportFormat
from manjaword.domain.models.settings import AppSettings
from manjaword.domain.ports.document_renderer import DocumentRendererPort
from manjaword.domain.ports.document_repository import DocumentRepositoryPort
from manjaword.domain.ports.file_dialog import FileDialogPort
from manjaword.domain.ports.grammar_checker import GrammarCheckerPort
from manjaword.infrastructure.config.settings_manager import SettingsManager
from manjaword.infrastructure.grammar.languagetool_client import LanguageToolClient
from manjaword.infrastructure.persistence.autosave_store import AutosaveStore
from manjaword.infrastructure.persistence.json_repository import JsonDocumentRepository
from manjaword.infrastructure.renderers.docx_renderer import DocxRenderer
from manjaword.infrastructure.renderers.pdf_renderer import PdfRenderer


class Container:
    """Simple dependency injection container.

    Wires infrastructure implementations to domain ports and provides
    pre-configured use cases. The file dialog is supplied per call because
    it belongs to whichever front end is driving the backend.

    Usage::

        container = Container()
        path = container.save_document(dialog).execute(delta)
    """

    def __init__(
        self,
        config_dir: Path | None = None,
        data_dir: Path | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._settings_manager = SettingsManager(config_dir=config_dir)
        self._settings = settings or self._settings_manager.load()

        self._repository = JsonDocumentRepository()
        self._autosave_store = AutosaveStore(data_dir=data_dir, repository=self._repository)

        self._docx_renderer = DocxRenderer()
        self._pdf_renderer = PdfRenderer(paginate=self._settings.export.paginate_pdf)

        grammar = self._settings.grammar
        self._grammar_checker = LanguageToolClient(
            base_url=grammar.base_url,
            language=grammar.language,
            timeout=grammar.timeout_seconds,
        )

    # -- Port accessors ------------------------------------------------------

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def settings_manager(self) -> SettingsManager:
        return self._settings_manager

    @property
    def repository(self) -> DocumentRepositoryPort:
        return self._repository

    @property
    def autosave_store(self) -> AutosaveStore:
        return self._autosave_store

    @property
    def grammar_checker(self) -> GrammarCheckerPort:
        return self._grammar_checker

    def get_renderer(self, fmt: ExportFormat) -> DocumentRendererPort:
        """Return the renderer for the given export format."""
        if fmt == ExportFormat.PDF:
            return self._pdf_renderer
        return self._docx_renderer

    # -- Use Case factories --------------------------------------------------

    def open_document(self, dialog: FileDialogPort) -> OpenDocumentUseCase:
        """Create a use case for opening a document."""
        return OpenDocumentUseCase(dialog=dialog, repository=self._repository)

    def save_document(self, dialog: FileDialogPort) -> SaveDocumentUseCase:
        """Create a use case for saving a document."""
        return SaveDocumentUseCase(dialog=dialog, repository=self._repository)

    def export_document(self, fmt: ExportFormat, dialog: FileDialogPort) -> ExportDocumentUseCase:
        """Create a use case for exporting to DOCX or PDF."""
        return ExportDocumentUseCase(renderer=self.get_renderer(fmt), dialog=dialog)

    def autosave(self) -> AutosaveUseCase:
        """Create a use case for writing the autosave snapshot."""
        return AutosaveUseCase(store=self._autosave_store)

    def recover(self) -> RecoverUseCase:
        """Create a use case for recovering the autosave snapshot."""
        return RecoverUseCase(store=self._autosave_store)

    def discard_autosave(self) -> DiscardAutosaveUseCase:
        """Create a use case for removing the autosave snapshot."""
        return DiscardAutosaveUseCase(store=self._autosave_store)

    def check_grammar(self) -> CheckGrammarUseCase:
        """Create a use case for grammar checking."""
        return CheckGrammarUseCase(checker=self._grammar_checker)
