"""Grammar check results returned to the editor."""

from __future__ import annotations

from pydantic import BaseModel, Field


class GrammarMatch(BaseModel):
    """One issue found in the submitted text.

    ``offset`` and ``length`` are a zero-based character span in the text
    that was checked. ``replacements`` keeps the service's ranking.
    """

    message: str
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    replacements: list[str] = Field(default_factory=list)


class GrammarResponse(BaseModel):
    """All matches for a single grammar check, in service order."""

    matches: list[GrammarMatch] = Field(default_factory=list)
