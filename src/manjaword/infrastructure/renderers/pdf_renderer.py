"""PDF renderer: implements DocumentRendererPort using fpdf2.

Lines are placed top to bottom on an A4 page in the built-in Helvetica
font, one fixed advance per non-blank line. Without pagination, lines that
would fall below the bottom limit are dropped.
"""

from __future__ import annotations

from pathlib import Path

from fpdf import FPDF

from manjaword.domain.ports.document_renderer import DocumentRendererPort
from manjaword.domain.rules.constants import (
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
    PDF_BOTTOM_LIMIT_MM,
    PDF_EXTENSION,
    PDF_FIRST_BASELINE_MM,
    PDF_FONT,
    PDF_FONT_SIZE_PT,
    PDF_LEFT_MARGIN_MM,
    PDF_LINE_ADVANCE_MM,
    PDF_TITLE,
)

# Characters the built-in (Latin-1) fonts cannot show
_REPLACEMENTS = {
    "\u2013": "-",
    "\u2014": "--",
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2026": "...",
}


def sanitize(text: str) -> str:
    """Replace characters not supported by standard PDF fonts (Latin-1)."""
    if not text:
        return ""
    for char, repl in _REPLACEMENTS.items():
        text = text.replace(char, repl)
    return text.encode("latin-1", "replace").decode("latin-1")


def layout_lines(lines: list[str], paginate: bool = False) -> list[list[tuple[float, str]]]:
    """Assign a baseline to every non-blank line.

    Returns one list of ``(baseline_mm, text)`` per page, baselines measured
    from the top edge. There is always at least one (possibly empty) page.
    """
    pages: list[list[tuple[float, str]]] = [[]]
    y = PDF_FIRST_BASELINE_MM
    for line in lines:
        if not line.strip():
            continue
        if y > PDF_BOTTOM_LIMIT_MM:
            if not paginate:
                break
            pages.append([])
            y = PDF_FIRST_BASELINE_MM
        pages[-1].append((y, line))
        y += PDF_LINE_ADVANCE_MM
    return pages


class PdfRenderer(DocumentRendererPort):
    """Write flattened lines to a fixed-layout PDF."""

    extension = PDF_EXTENSION
    label = "PDF"

    def __init__(self, paginate: bool = False) -> None:
        self._paginate = paginate

    def render(self, lines: list[str], output_path: Path) -> Path:
        """Lay out *lines* and save the PDF to *output_path*."""
        pdf = FPDF(orientation="P", unit="mm", format=(PAGE_WIDTH_MM, PAGE_HEIGHT_MM))
        pdf.set_auto_page_break(auto=False)
        pdf.set_title(PDF_TITLE)

        for page in layout_lines(lines, paginate=self._paginate):
            pdf.add_page()
            pdf.set_font(PDF_FONT, "", PDF_FONT_SIZE_PT)
            for baseline, text in page:
                pdf.text(PDF_LEFT_MARGIN_MM, baseline, sanitize(text))

        pdf.output(str(output_path))
        return output_path
