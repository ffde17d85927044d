"""User preferences model for ManjaWord.

``AppSettings`` groups the few knobs the backend exposes: where the grammar
service lives, how page export handles overflow, and how often the editor
should trigger autosave.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from manjaword.domain.rules.constants import (
    AUTOSAVE_INTERVAL_S,
    GRAMMAR_BASE_URL,
    GRAMMAR_LANGUAGE,
    GRAMMAR_TIMEOUT_S,
)


# ---------------------------------------------------------------------------
# Sub-models by concern
# ---------------------------------------------------------------------------


class GrammarSettings(BaseModel):
    """Location and language of the grammar-checking service."""

    base_url: str = Field(
        default=GRAMMAR_BASE_URL,
        description="Base URL of the LanguageTool-compatible server.",
    )
    language: str = Field(
        default=GRAMMAR_LANGUAGE,
        description="Language tag sent with every check.",
    )
    timeout_seconds: float = Field(
        default=GRAMMAR_TIMEOUT_S,
        gt=0,
        le=120,
        description="Transport timeout for a single check.",
    )


class ExportSettings(BaseModel):
    """Preferences for DOCX/PDF export."""

    paginate_pdf: bool = Field(
        default=False,
        description="Continue on new pages instead of truncating after page one.",
    )


class AutosaveSettings(BaseModel):
    """Autosave cadence for the editor timer."""

    interval_seconds: int = Field(
        default=AUTOSAVE_INTERVAL_S,
        ge=1,
        le=3600,
        description="Seconds between autosave snapshots.",
    )


# ---------------------------------------------------------------------------
# Root settings model
# ---------------------------------------------------------------------------


class AppSettings(BaseModel):
    """Root preferences, persisted to ``settings.json``."""

    grammar: GrammarSettings = Field(default_factory=GrammarSettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    autosave: AutosaveSettings = Field(default_factory=AutosaveSettings)
