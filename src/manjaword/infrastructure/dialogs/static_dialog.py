"""Static dialog: answers every file request with a preset path.

Used by the CLI, where the path comes from the command line, and by
scripts that drive the backend without a UI.
"""

from __future__ import annotations

from pathlib import Path

from manjaword.domain.ports.file_dialog import FileDialogPort, FileFilter


class StaticFileDialog(FileDialogPort):
    """Return the same path (or ``None``) for open and save requests."""

    def __init__(self, path: str | Path | None) -> None:
        self._path = Path(path) if path is not None else None

    def pick_open_path(self, filters: list[FileFilter]) -> Path | None:
        return self._path

    def pick_save_path(self, filters: list[FileFilter], default_name: str) -> Path | None:
        return self._path
