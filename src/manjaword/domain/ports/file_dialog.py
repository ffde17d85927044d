"""Port: file dialog. Asks the user where to read or write a file.

The UI toolkit owns the actual dialog. The backend only needs a chosen path,
or ``None`` when the user dismissed the dialog.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileFilter:
    """A named group of file extensions, e.g. ``FileFilter("PDF", ("pdf",))``."""

    label: str
    extensions: tuple[str, ...] = field(default_factory=tuple)


class FileDialogPort(ABC):
    """Contract for file selection collaborators."""

    @abstractmethod
    def pick_open_path(self, filters: list[FileFilter]) -> Path | None:
        """Return the file chosen for opening, or ``None`` if cancelled."""
        ...

    @abstractmethod
    def pick_save_path(self, filters: list[FileFilter], default_name: str) -> Path | None:
        """Return the chosen save destination, or ``None`` if cancelled."""
        ...
