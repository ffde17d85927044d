"""Tests for delta flattening and DOCX/PDF export."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from docx import Document

from manjaword.application.use_cases.export_document import (
    ExportDocumentUseCase,
    ensure_extension,
)
from manjaword.converters.delta import flatten_delta
from manjaword.domain.errors import ExportFormatError, NoFileSelectedError
from manjaword.domain.rules.constants import (
    PDF_BOTTOM_LIMIT_MM,
    PDF_FIRST_BASELINE_MM,
    PDF_LINE_ADVANCE_MM,
)
from manjaword.infrastructure.dialogs.static_dialog import StaticFileDialog
from manjaword.infrastructure.renderers.docx_renderer import DocxRenderer
from manjaword.infrastructure.renderers.pdf_renderer import PdfRenderer, layout_lines, sanitize


def _delta(*inserts) -> dict:
    return {"ops": [{"insert": text} for text in inserts]}


def _paragraphs(path: Path) -> list[str]:
    return [p.text for p in Document(str(path)).paragraphs]


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------


class TestFlattenDelta:
    def test_each_insert_split_on_newlines(self):
        assert flatten_delta(_delta("a\nb", "c")) == ["a", "b", "c"]

    def test_empty_lines_preserved(self):
        assert flatten_delta(_delta("\nHello\n\nWorld")) == ["", "Hello", "", "World"]

    def test_quill_header_line(self):
        content = {
            "ops": [
                {"insert": "Heading"},
                {"insert": "\n", "attributes": {"header": 1}},
                {"insert": "Body\n"},
            ]
        }
        assert flatten_delta(content) == ["Heading", "", "", "Body", ""]

    def test_embeds_and_attribute_only_ops_skipped(self):
        content = {
            "ops": [
                {"insert": {"image": "x.png"}},
                {"retain": 5, "attributes": {"bold": True}},
                {"delete": 2},
                {"insert": "text"},
            ]
        }
        assert flatten_delta(content) == ["text"]

    @pytest.mark.parametrize(
        "content",
        [None, "plain text", 42, [], {}, {"ops": None}, {"ops": "abc"}, {"ops": {"insert": "x"}}],
    )
    def test_non_delta_payloads_yield_nothing(self, content):
        assert flatten_delta(content) == []

    def test_non_mapping_ops_skipped(self):
        assert flatten_delta({"ops": ["x", 3, None, {"insert": "ok"}]}) == ["ok"]


# ---------------------------------------------------------------------------
# DOCX
# ---------------------------------------------------------------------------


class TestDocxRenderer:
    def test_blank_lines_dropped(self, tmp_path: Path):
        out = DocxRenderer().render(["", "Hello", "", "World"], tmp_path / "out.docx")
        assert _paragraphs(out) == ["Hello", "World"]

    def test_whitespace_only_lines_dropped(self, tmp_path: Path):
        out = DocxRenderer().render(["   ", "\t", "Text"], tmp_path / "out.docx")
        assert _paragraphs(out) == ["Text"]

    def test_line_text_kept_verbatim(self, tmp_path: Path):
        out = DocxRenderer().render(["  indented", "ünïcödé ✓"], tmp_path / "out.docx")
        assert _paragraphs(out) == ["  indented", "ünïcödé ✓"]

    def test_empty_document(self, tmp_path: Path):
        out = DocxRenderer().render([], tmp_path / "out.docx")
        assert out.exists()
        assert _paragraphs(out) == []


# ---------------------------------------------------------------------------
# PDF
# ---------------------------------------------------------------------------


class TestPdfLayout:
    def test_first_baseline_and_advance(self):
        pages = layout_lines(["one", "", "two"])
        assert pages == [
            [(PDF_FIRST_BASELINE_MM, "one"), (PDF_FIRST_BASELINE_MM + PDF_LINE_ADVANCE_MM, "two")]
        ]

    def test_blank_lines_do_not_advance(self):
        pages = layout_lines(["", "  ", "x"])
        assert pages == [[(PDF_FIRST_BASELINE_MM, "x")]]

    def test_single_page_truncates(self):
        lines = [f"line {i}" for i in range(100)]
        pages = layout_lines(lines)
        assert len(pages) == 1
        assert len(pages[0]) == 34
        assert pages[0][-1][1] == "line 33"
        assert all(y <= PDF_BOTTOM_LIMIT_MM for y, _ in pages[0])

    def test_pagination_keeps_everything(self):
        lines = [f"line {i}" for i in range(40)]
        pages = layout_lines(lines, paginate=True)
        assert [len(p) for p in pages] == [34, 6]
        assert pages[1][0] == (PDF_FIRST_BASELINE_MM, "line 34")

    def test_trailing_blank_lines_add_no_page(self):
        lines = [f"line {i}" for i in range(34)] + ["", ""]
        assert len(layout_lines(lines, paginate=True)) == 1

    def test_empty_input_has_one_page(self):
        assert layout_lines([]) == [[]]


class TestPdfRenderer:
    def test_writes_pdf(self, tmp_path: Path):
        out = PdfRenderer().render(["Hello", "", "World"], tmp_path / "out.pdf")
        assert out.read_bytes().startswith(b"%PDF")

    def test_non_latin1_text_does_not_fail(self, tmp_path: Path):
        out = PdfRenderer().render(["\u201cquoted\u201d \u2014 日本語"], tmp_path / "out.pdf")
        assert out.exists()

    @pytest.mark.parametrize(("paginate", "pages", "texts"), [(False, 1, 34), (True, 3, 80)])
    def test_page_and_text_calls(self, tmp_path: Path, paginate, pages, texts):
        with patch("manjaword.infrastructure.renderers.pdf_renderer.FPDF") as mock_pdf:
            PdfRenderer(paginate=paginate).render([str(i) for i in range(80)], tmp_path / "o.pdf")
        pdf = mock_pdf.return_value
        assert pdf.add_page.call_count == pages
        assert pdf.text.call_count == texts
        pdf.set_auto_page_break.assert_called_once_with(auto=False)
        pdf.output.assert_called_once_with(str(tmp_path / "o.pdf"))

    def test_sanitize(self):
        assert sanitize("‘a’ …") == "'a' ..."
        assert sanitize("日") == "?"
        assert sanitize("") == ""


# ---------------------------------------------------------------------------
# Export use case
# ---------------------------------------------------------------------------


class TestEnsureExtension:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("doc", "doc.docx"),
            ("doc.docx", "doc.docx"),
            ("doc.DOCX", "doc.DOCX"),
            ("doc.txt", "doc.txt.docx"),
        ],
    )
    def test_docx(self, tmp_path: Path, name, expected):
        assert ensure_extension(tmp_path / name, "docx") == tmp_path / expected


class TestExportDocumentUseCase:
    def test_paragraph_export(self, tmp_path: Path):
        uc = ExportDocumentUseCase(DocxRenderer(), StaticFileDialog(tmp_path / "report"))
        result = uc.execute(_delta("\nHello\n", "\nWorld"))
        assert result == str(tmp_path / "report.docx")
        assert _paragraphs(Path(result)) == ["Hello", "World"]

    def test_page_export(self, tmp_path: Path):
        uc = ExportDocumentUseCase(PdfRenderer(), StaticFileDialog(tmp_path / "report.pdf"))
        result = uc.execute(_delta("Hello\nWorld"))
        assert result == str(tmp_path / "report.pdf")
        assert Path(result).read_bytes().startswith(b"%PDF")

    def test_non_delta_payload_exports_empty_document(self, tmp_path: Path):
        uc = ExportDocumentUseCase(DocxRenderer(), StaticFileDialog(tmp_path / "empty.docx"))
        result = uc.execute("not a delta")
        assert _paragraphs(Path(result)) == []

    def test_dialog_receives_format_hints(self, tmp_path: Path):
        dialog = MagicMock()
        dialog.pick_save_path.return_value = tmp_path / "x.pdf"
        ExportDocumentUseCase(PdfRenderer(), dialog).execute(_delta("x"))
        filters, default_name = dialog.pick_save_path.call_args.args
        assert default_name == "document.pdf"
        assert filters[0].label == "PDF"
        assert filters[0].extensions == ("pdf",)

    def test_cancelled_dialog(self):
        uc = ExportDocumentUseCase(DocxRenderer(), StaticFileDialog(None))
        with pytest.raises(NoFileSelectedError):
            uc.execute(_delta("x"))

    def test_io_error_propagates(self, tmp_path: Path):
        uc = ExportDocumentUseCase(DocxRenderer(), StaticFileDialog(tmp_path / "no" / "x.docx"))
        with pytest.raises(OSError):
            uc.execute(_delta("x"))

    def test_writer_failure_becomes_format_error(self, tmp_path: Path):
        renderer = MagicMock()
        renderer.extension = "docx"
        renderer.label = "DOCX"
        renderer.render.side_effect = ValueError("bad xml char")
        uc = ExportDocumentUseCase(renderer, StaticFileDialog(tmp_path / "x.docx"))
        with pytest.raises(ExportFormatError, match="bad xml char"):
            uc.execute(_delta("x"))
