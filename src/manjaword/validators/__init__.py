"""Input validators that run before any filesystem access."""

from manjaword.validators.path_validator import ensure_document_suffix, validate_document_path

__all__ = ["ensure_document_suffix", "validate_document_path"]
