"""Use Case: Export Document.

Flattens the editor payload into lines and hands them to a renderer. The
destination comes from the file dialog; the renderer's extension is
appended when the chosen name does not already end with it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from manjaword.domain.errors import ExportFormatError, NoFileSelectedError
from manjaword.domain.ports.document_renderer import DocumentRendererPort
from manjaword.domain.ports.file_dialog import FileDialogPort, FileFilter
from manjaword.domain.rules.constants import DEFAULT_EXPORT_STEM
from manjaword.converters.delta import flatten_delta

logger = logging.getLogger(__name__)


def ensure_extension(path: Path, extension: str) -> Path:
    """Append ``.<extension>`` to *path* unless its suffix already matches."""
    if path.suffix.lower() == f".{extension.lower()}":
        return path
    return Path(f"{path}.{extension}")


class ExportDocumentUseCase:
    """Export the editor payload through an injected renderer."""

    def __init__(self, renderer: DocumentRendererPort, dialog: FileDialogPort) -> None:
        self._renderer = renderer
        self._dialog = dialog

    def execute(self, content: Any) -> str:
        """Render *content* to the chosen destination and return its path.

        Raises:
            NoFileSelectedError: The dialog was dismissed.
            OSError: The output file could not be written.
            ExportFormatError: The format writer failed.
        """
        ext = self._renderer.extension
        filters = [FileFilter(self._renderer.label, (ext,))]
        selected = self._dialog.pick_save_path(filters, f"{DEFAULT_EXPORT_STEM}.{ext}")
        if selected is None:
            logger.debug("Export cancelled: no file selected")
            raise NoFileSelectedError("No file selected")

        path = ensure_extension(selected, ext)
        lines = flatten_delta(content)

        try:
            written = self._renderer.render(lines, path)
        except OSError:
            raise
        except Exception as exc:
            label = self._renderer.label
            raise ExportFormatError(f"Failed to write {label} file: {exc}") from exc

        logger.info("Exported %d lines to %s", len(lines), written)
        return str(written)
