"""Tests for the grammar proxy (LanguageTool client, mocked HTTP)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests
from pydantic import ValidationError

from manjaword.application.use_cases.check_grammar import CheckGrammarUseCase
from manjaword.domain.errors import GrammarServiceUnavailableError
from manjaword.domain.models.grammar import GrammarMatch, GrammarResponse
from manjaword.infrastructure.grammar.languagetool_client import LanguageToolClient

_POST = "manjaword.infrastructure.grammar.languagetool_client.requests.post"
_TEXT = "This are a test sentence."


def _response(payload=None, json_error: Exception | None = None, status_error=None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = 200
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    resp.raise_for_status = MagicMock(side_effect=status_error)
    return resp


def _lt_match(**overrides) -> dict:
    match = {
        "message": "Possible agreement error",
        "shortMessage": "Grammar",
        "offset": 5,
        "length": 3,
        "replacements": [{"value": "foo"}, {"value": "bar"}],
        "context": {"text": _TEXT, "offset": 5, "length": 3},
        "rule": {"id": "AGREEMENT", "category": {"id": "GRAMMAR"}},
    }
    match.update(overrides)
    return match


# ===========================================================================
# Model
# ===========================================================================


class TestGrammarMatchModel:
    def test_negative_span_rejected(self):
        with pytest.raises(ValidationError):
            GrammarMatch(message="x", offset=-1, length=0)

    def test_replacements_default_empty(self):
        assert GrammarMatch(message="x", offset=0, length=0).replacements == []


# ===========================================================================
# Successful checks
# ===========================================================================


class TestSuccessfulCheck:
    @patch(_POST)
    def test_maps_match(self, mock_post):
        mock_post.return_value = _response({"matches": [_lt_match()]})

        result = LanguageToolClient().check(_TEXT)

        assert result == GrammarResponse(
            matches=[
                GrammarMatch(
                    message="Possible agreement error",
                    offset=5,
                    length=3,
                    replacements=["foo", "bar"],
                )
            ]
        )

    @patch(_POST)
    def test_request_shape(self, mock_post):
        mock_post.return_value = _response({"matches": []})

        LanguageToolClient().check(_TEXT)

        args, kwargs = mock_post.call_args
        assert args[0] == "http://localhost:8081/v2/check"
        assert kwargs["data"] == {"text": _TEXT, "language": "en-US"}
        assert kwargs["timeout"] == 10.0

    @patch(_POST)
    def test_custom_endpoint_and_language(self, mock_post):
        mock_post.return_value = _response({"matches": []})

        LanguageToolClient(base_url="http://lt.local:9000/", language="de-DE").check("Hallo")

        args, kwargs = mock_post.call_args
        assert args[0] == "http://lt.local:9000/v2/check"
        assert kwargs["data"]["language"] == "de-DE"

    @patch(_POST)
    def test_order_preserved_and_empty_replacements(self, mock_post):
        mock_post.return_value = _response(
            {
                "matches": [
                    _lt_match(offset=10, length=4, message="second", replacements=[]),
                    _lt_match(offset=0, length=4, message="first"),
                ],
                "language": {"code": "en-US"},
                "software": {"name": "LanguageTool"},
            }
        )

        result = LanguageToolClient().check(_TEXT)

        assert [m.message for m in result.matches] == ["second", "first"]
        assert result.matches[0].replacements == []

    @patch(_POST)
    def test_span_after_astral_character(self, mock_post):
        # The emoji is two UTF-16 code units, so "teh" starts at 3.
        text = "\U0001F600 teh"
        mock_post.return_value = _response({"matches": [_lt_match(offset=3, length=3)]})

        result = LanguageToolClient().check(text)

        assert (result.matches[0].offset, result.matches[0].length) == (3, 3)

    @patch(_POST)
    def test_span_past_utf16_length_rejected(self, mock_post):
        mock_post.return_value = _response({"matches": [_lt_match(offset=4, length=3)]})
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check("\U0001F600 teh")

    @patch(_POST)
    def test_no_matches(self, mock_post):
        mock_post.return_value = _response({"matches": []})
        assert LanguageToolClient().check("Fine.").matches == []

    @patch(_POST)
    def test_use_case_delegates(self, mock_post):
        mock_post.return_value = _response({"matches": [_lt_match()]})
        result = CheckGrammarUseCase(LanguageToolClient()).execute(_TEXT)
        assert result.matches[0].offset == 5


# ===========================================================================
# Failures collapse to one error
# ===========================================================================


class TestUnavailable:
    @patch(_POST, side_effect=requests.ConnectionError("connection refused"))
    def test_service_down(self, mock_post):
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)

    @patch(_POST, side_effect=requests.Timeout("slow"))
    def test_timeout(self, mock_post):
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)

    @patch(_POST)
    def test_http_error_status(self, mock_post):
        mock_post.return_value = _response(status_error=requests.HTTPError("500 Server Error"))
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)

    @patch(_POST)
    def test_body_not_json(self, mock_post):
        mock_post.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            [],
            {"matches": None},
            {"matches": [{"message": "x"}]},
            {"matches": [_lt_match(offset="five")]},
            {"matches": [_lt_match(replacements=[{"text": "no value key"}])]},
        ],
    )
    @patch(_POST)
    def test_unexpected_shape(self, mock_post, payload):
        mock_post.return_value = _response(payload)
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)

    @pytest.mark.parametrize(
        ("offset", "length"), [(-1, 2), (0, -2), (len(_TEXT), 1), (20, 10)]
    )
    @patch(_POST)
    def test_span_outside_text(self, mock_post, offset, length):
        mock_post.return_value = _response({"matches": [_lt_match(offset=offset, length=length)]})
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)

    @patch(_POST, side_effect=requests.ConnectionError("down"))
    def test_no_retry(self, mock_post):
        with pytest.raises(GrammarServiceUnavailableError):
            LanguageToolClient().check(_TEXT)
        assert mock_post.call_count == 1
