"""Domain errors: custom exceptions for ManjaWord.

These exceptions are raised by domain services and infrastructure adapters
and caught by the presentation layer, which turns them into plain messages.
Filesystem failures are not wrapped: they surface as ``OSError``.
"""


class ManjaWordError(Exception):
    """Base exception for all ManjaWord errors."""


class NoFileSelectedError(ManjaWordError):
    """Raised when the user closes a file dialog without choosing a file."""


class InvalidPathError(ManjaWordError):
    """Raised when a path contains control characters."""


class InvalidExtensionError(ManjaWordError):
    """Raised when a document path lacks the ``.manjaword.json`` suffix."""


class StoragePathUnavailableError(ManjaWordError):
    """Raised when the application data directory cannot be resolved or created."""


class DocumentSerializationError(ManjaWordError):
    """Raised when a document payload cannot be encoded as JSON."""


class DocumentDeserializationError(ManjaWordError):
    """Raised when stored bytes are not a valid document envelope."""


class ExportFormatError(ManjaWordError):
    """Raised when a DOCX or PDF writer fails for reasons other than I/O."""


class GrammarServiceUnavailableError(ManjaWordError):
    """Raised for any grammar service failure (transport, status or payload)."""
