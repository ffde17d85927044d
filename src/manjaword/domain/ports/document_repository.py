"""Port: document repository. Reads and writes document envelopes."""

from abc import ABC, abstractmethod
from pathlib import Path

from manjaword.domain.models.document import EditorDocument


class DocumentRepositoryPort(ABC):
    """Contract for persisting and retrieving document envelopes."""

    @abstractmethod
    def write(self, path: Path, document: EditorDocument) -> None:
        """Overwrite *path* with the serialized *document*."""
        ...

    @abstractmethod
    def read(self, path: Path) -> EditorDocument:
        """Load the envelope stored at *path*."""
        ...
