"""User-friendly error messages for backend failures.

Belongs to the Application layer: translates exceptions raised by the
domain and infrastructure into localised text for the editor UI. No error
codes leave this module, only strings.
"""

from __future__ import annotations

from manjaword.domain.errors import (
    DocumentDeserializationError,
    DocumentSerializationError,
    ExportFormatError,
    GrammarServiceUnavailableError,
    InvalidExtensionError,
    InvalidPathError,
    NoFileSelectedError,
    StoragePathUnavailableError,
)

# Maps exception type -> message per language
_ERROR_MAP: dict[type[Exception], dict[str, str]] = {
    NoFileSelectedError: {
        "en": "No file selected.",
        "es": "No se seleccionó ningún archivo.",
    },
    InvalidPathError: {
        "en": "Path validation failed.",
        "es": "La validación de la ruta falló.",
    },
    InvalidExtensionError: {
        "en": "Invalid file extension: expected .manjaword.json",
        "es": "Extensión de archivo inválida: se esperaba .manjaword.json",
    },
    StoragePathUnavailableError: {
        "en": "Application data path unavailable.",
        "es": "La ruta de datos de la aplicación no está disponible.",
    },
    GrammarServiceUnavailableError: {
        "en": "Grammar service unavailable.",
        "es": "El servicio de gramática no está disponible.",
    },
}

# Exceptions whose own text is appended to the base message
_DETAILED: dict[type[Exception], dict[str, str]] = {
    DocumentSerializationError: {
        "en": "Could not encode document",
        "es": "No se pudo codificar el documento",
    },
    DocumentDeserializationError: {
        "en": "Could not read document",
        "es": "No se pudo leer el documento",
    },
    ExportFormatError: {
        "en": "Export failed",
        "es": "La exportación falló",
    },
    OSError: {
        "en": "I/O error",
        "es": "Error de E/S",
    },
}


def friendly_error(exc: BaseException, lang: str = "en") -> str:
    """Return a user-friendly message for *exc*.

    Args:
        exc: The exception raised by a backend operation.
        lang: Language code (``en`` or ``es``).

    Returns:
        A localised, human-readable error string.
    """
    for exc_type, messages in _ERROR_MAP.items():
        if isinstance(exc, exc_type):
            return messages.get(lang, messages["en"])

    for exc_type, messages in _DETAILED.items():
        if isinstance(exc, exc_type):
            return f"{messages.get(lang, messages['en'])}: {exc}"

    return str(exc) or exc.__class__.__name__
