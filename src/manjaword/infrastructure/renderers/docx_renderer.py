"""DOCX renderer: implements DocumentRendererPort using python-docx."""

from __future__ import annotations

from pathlib import Path

from docx import Document

from manjaword.domain.ports.document_renderer import DocumentRendererPort
from manjaword.domain.rules.constants import DOCX_EXTENSION


class DocxRenderer(DocumentRendererPort):
    """Write one Word paragraph per non-blank line."""

    extension = DOCX_EXTENSION
    label = "DOCX"

    def render(self, lines: list[str], output_path: Path) -> Path:
        """Build the document and save it to *output_path*.

        Blank lines are dropped rather than kept as empty paragraphs.
        """
        document = Document()
        for line in lines:
            if not line.strip():
                continue
            paragraph = document.add_paragraph()
            paragraph.add_run(line)

        document.save(str(output_path))
        return output_path
