"""Editor command surface.

``EditorCommands`` exposes the operations the editor front end
invokes. It is the error boundary of the backend: every domain or
filesystem failure is turned into a ``CommandError`` holding only a
human-readable message.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from manjaword.application.error_messages import friendly_error
from manjaword.bootstrap import Container
from manjaword.domain.errors import ManjaWordError, NoFileSelectedError
from manjaword.domain.models.document import EditorDocument, OpenedDocument
from manjaword.domain.models.enums import ExportFormat
from manjaword.domain.models.grammar import GrammarResponse
from manjaword.domain.ports.file_dialog import FileDialogPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CommandError(Exception):
    """A failed command. ``str(exc)`` is the message shown to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EditorCommands:
    """Front-end facing operations, each returning a value or raising ``CommandError``.

    Parameters
    ----------
    container:
        Composition root providing the use cases.
    dialog:
        File selection collaborator of the current front end.
    lang:
        Language of error messages (``en`` or ``es``).
    """

    def __init__(self, container: Container, dialog: FileDialogPort, lang: str = "en") -> None:
        self._container = container
        self._dialog = dialog
        self._lang = lang

    def open_file(self) -> OpenedDocument:
        return self._run("open_file", self._container.open_document(self._dialog).execute)

    def save_file(self, content: Any) -> str:
        return self._run("save_file", self._container.save_document(self._dialog).execute, content)

    def export_docx(self, content: Any) -> str:
        uc = self._container.export_document(ExportFormat.DOCX, self._dialog)
        return self._run("export_docx", uc.execute, content)

    def export_pdf(self, content: Any) -> str:
        uc = self._container.export_document(ExportFormat.PDF, self._dialog)
        return self._run("export_pdf", uc.execute, content)

    def grammar_check(self, text: str) -> GrammarResponse:
        return self._run("grammar_check", self._container.check_grammar().execute, text)

    def autosave_document(self, content: Any) -> None:
        return self._run("autosave_document", self._container.autosave().execute, content)

    def recover_unsaved_document(self) -> EditorDocument | None:
        return self._run("recover_unsaved_document", self._container.recover().execute)

    def discard_autosave(self) -> None:
        return self._run("discard_autosave", self._container.discard_autosave().execute)

    # -- Internals -----------------------------------------------------------

    def _run(self, name: str, fn: Callable[..., T], *args: Any) -> T:
        try:
            return fn(*args)
        except NoFileSelectedError as exc:
            logger.debug("%s: no file selected", name)
            raise CommandError(friendly_error(exc, self._lang)) from exc
        except (ManjaWordError, OSError) as exc:
            logger.warning("%s failed: %s", name, exc)
            raise CommandError(friendly_error(exc, self._lang)) from exc
