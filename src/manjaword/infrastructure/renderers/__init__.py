"""Export renderers: turn flattened editor text into DOCX and PDF files."""

from manjaword.infrastructure.renderers.docx_renderer import DocxRenderer
from manjaword.infrastructure.renderers.pdf_renderer import PdfRenderer

__all__ = ["DocxRenderer", "PdfRenderer"]
