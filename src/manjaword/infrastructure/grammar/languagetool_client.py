"""LanguageTool client: implements GrammarCheckerPort over HTTP.

Posts the text as form data to ``{base_url}/v2/check`` and keeps only the
message, span and replacement values of each match. Every failure mode is
reported as ``GrammarServiceUnavailableError``; callers cannot tell a down
server from a malformed reply.
"""

from __future__ import annotations

import logging

import requests
from pydantic import BaseModel, ValidationError

from manjaword.domain.errors import GrammarServiceUnavailableError
from manjaword.domain.models.grammar import GrammarMatch, GrammarResponse
from manjaword.domain.ports.grammar_checker import GrammarCheckerPort
from manjaword.domain.rules.constants import (
    GRAMMAR_BASE_URL,
    GRAMMAR_CHECK_PATH,
    GRAMMAR_LANGUAGE,
    GRAMMAR_TIMEOUT_S,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Upstream payload (extra fields are ignored)
# ---------------------------------------------------------------------------


class _Replacement(BaseModel):
    value: str


class _Match(BaseModel):
    message: str
    offset: int
    length: int
    replacements: list[_Replacement]


class _CheckResponse(BaseModel):
    matches: list[_Match]


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class LanguageToolClient(GrammarCheckerPort):
    """Check text against a local LanguageTool server.

    Parameters
    ----------
    base_url:
        Server root, without the ``/v2/check`` path.
    language:
        Language tag sent with each request.
    timeout:
        Transport timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = GRAMMAR_BASE_URL,
        language: str = GRAMMAR_LANGUAGE,
        timeout: float = GRAMMAR_TIMEOUT_S,
    ) -> None:
        self._url = base_url.rstrip("/") + GRAMMAR_CHECK_PATH
        self._language = language
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def check(self, text: str) -> GrammarResponse:
        """Submit *text* and map the matches found.

        Raises:
            GrammarServiceUnavailableError: Transport error, error status,
                unparseable body or unexpected response shape.
        """
        try:
            resp = requests.post(
                self._url,
                data={"text": text, "language": self._language},
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            resp.raise_for_status()
            payload = _CheckResponse.model_validate(resp.json())
        except (requests.RequestException, ValueError, ValidationError) as exc:
            logger.warning("Grammar service request to %s failed: %s", self._url, exc)
            raise GrammarServiceUnavailableError("Grammar service unavailable") from exc

        # Offsets count UTF-16 code units, as in the editor.
        units = len(text.encode("utf-16-le", "surrogatepass")) // 2
        matches: list[GrammarMatch] = []
        for m in payload.matches:
            if m.offset < 0 or m.length < 0 or m.offset + m.length > units:
                logger.warning(
                    "Grammar service returned span %d+%d outside %d code units",
                    m.offset,
                    m.length,
                    units,
                )
                raise GrammarServiceUnavailableError("Grammar service unavailable")
            matches.append(
                GrammarMatch(
                    message=m.message,
                    offset=m.offset,
                    length=m.length,
                    replacements=[r.value for r in m.replacements],
                )
            )

        logger.debug("Grammar check returned %d matches", len(matches))
        return GrammarResponse(matches=matches)
