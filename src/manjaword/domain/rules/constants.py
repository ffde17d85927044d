"""Fixed values shared by the persistence, export and grammar layers."""

APP_NAME = "manjaword"

# Document envelope
SCHEMA_VERSION = "1.0.0"
DOCUMENT_SUFFIX = ".manjaword.json"
DOCUMENT_FILTER_LABEL = "ManjaWord"
DEFAULT_DOCUMENT_NAME = "untitled.manjaword.json"
AUTOSAVE_FILENAME = "autosave.manjaword.json"

# Export
DOCX_EXTENSION = "docx"
PDF_EXTENSION = "pdf"
DEFAULT_EXPORT_STEM = "document"
PDF_TITLE = "ManjaWord Export"

# Page layout, all in millimetres measured from the top edge
PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0
PDF_LEFT_MARGIN_MM = 15.0
PDF_FIRST_BASELINE_MM = 17.0  # 280 mm above the bottom edge
PDF_BOTTOM_LIMIT_MM = 282.0  # 15 mm above the bottom edge
PDF_LINE_ADVANCE_MM = 8.0
PDF_FONT = "Helvetica"
PDF_FONT_SIZE_PT = 12

# Grammar service
GRAMMAR_BASE_URL = "http://localhost:8081"
GRAMMAR_CHECK_PATH = "/v2/check"
GRAMMAR_LANGUAGE = "en-US"
GRAMMAR_TIMEOUT_S = 10.0

# Autosave cadence used by the editor UI
AUTOSAVE_INTERVAL_S = 5
