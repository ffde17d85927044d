"""Port: document renderer. Writes flattened text lines to an output format.

Infrastructure adapters (docx, pdf) implement this interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class DocumentRendererPort(ABC):
    """Contract for rendering plain text lines to a file."""

    #: File extension (without the dot) the renderer produces.
    extension: str
    #: Label shown in the save dialog filter.
    label: str

    @abstractmethod
    def render(self, lines: list[str], output_path: Path) -> Path:
        """Write *lines* to *output_path* and return the path written."""
        ...
