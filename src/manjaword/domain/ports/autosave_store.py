"""Port: autosave store. Keeps one recovery snapshot of the open document."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from manjaword.domain.models.document import EditorDocument


class AutosaveStorePort(ABC):
    """Contract for the single autosave snapshot."""

    @abstractmethod
    def save(self, document: EditorDocument) -> Path:
        """Replace the snapshot with *document* and return where it was written."""
        ...

    @abstractmethod
    def load(self) -> EditorDocument | None:
        """Return the snapshot, or ``None`` when nothing has been autosaved."""
        ...

    @abstractmethod
    def discard(self) -> None:
        """Remove the snapshot if present."""
        ...
