"""Enumerations for ManjaWord domain models."""

from enum import Enum


class ExportFormat(str, Enum):
    """Target formats for document export."""

    DOCX = "docx"
    PDF = "pdf"
