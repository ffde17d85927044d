"""Validation of document paths coming from file dialogs.

Paths handed back by an OS dialog are treated as untrusted text. Both checks
here are pure string checks and never touch the filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path

from manjaword.domain.errors import InvalidExtensionError, InvalidPathError
from manjaword.domain.rules.constants import DOCUMENT_SUFFIX

_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")


def validate_document_path(path: str | Path) -> Path:
    """Return *path* as a ``Path`` if it may be used for a document.

    Control characters are checked first, so a path that fails both checks
    reports ``InvalidPathError``.

    Raises:
        InvalidPathError: The path contains a character below U+0020.
        InvalidExtensionError: The path does not end with ``.manjaword.json``.
    """
    text = str(path)
    if _CONTROL_CHARS.search(text):
        raise InvalidPathError(f"Path contains control characters: {text!r}")
    if not text.endswith(DOCUMENT_SUFFIX):
        raise InvalidExtensionError(f"Invalid file extension: expected {DOCUMENT_SUFFIX}")
    return Path(text)


def ensure_document_suffix(path: str | Path) -> Path:
    """Append ``.manjaword.json`` to *path* unless it already ends with it."""
    text = str(path)
    if text.endswith(DOCUMENT_SUFFIX):
        return Path(text)
    return Path(text + DOCUMENT_SUFFIX)
