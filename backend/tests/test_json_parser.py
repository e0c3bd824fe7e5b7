"""Tests for decoding provider payloads into CorrectionResult."""

import json

import pytest

from app.core.errors import ResponseFormatError
from app.models.correction import CorrectionRequest, CorrectionResult
from app.utils.json_parser import decode_correction_payload

VALID = {
    "hasErrors": True,
    "correctedText": "We went home.¶Then we ate dinner.",
    "errors": [
        {
            "original": "home.Then",
            "correction": "home.¶Then",
            "type": "Paragraph",
            "explanation": "A new time starts a new paragraph.",
        },
    ],
    "feedback": "Nice story!",
}


def test_decodes_json_string():
    result = decode_correction_payload(json.dumps(VALID), "test")
    assert isinstance(result, CorrectionResult)
    assert result.has_errors is True
    assert result.errors[0].error_type == "paragraph"
    assert result.errors[0].correction == "home.¶Then"


def test_decodes_dict():
    result = decode_correction_payload(VALID, "test")
    assert result.corrected_text == VALID["correctedText"]


def test_whitespace_in_original_preserved():
    payload = dict(VALID, errors=[dict(VALID["errors"][0], original="  teh  ")])
    result = decode_correction_payload(payload, "test")
    assert result.errors[0].original == "  teh  "


def test_dumps_camel_case_on_the_wire():
    result = decode_correction_payload(VALID, "test")
    dumped = result.model_dump(by_alias=True)
    assert set(dumped) == {"hasErrors", "correctedText", "errors", "feedback"}
    assert set(dumped["errors"][0]) == {"original", "correction", "type", "explanation"}


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not json",
        "```json\n{}\n```",
        "[1, 2, 3]",
        json.dumps({"correctedText": "missing hasErrors"}),
        json.dumps(dict(VALID, errors=[{"original": "a", "correction": "b"}])),
    ],
)
def test_rejects_bad_payloads(raw):
    with pytest.raises(ResponseFormatError) as exc_info:
        decode_correction_payload(raw, "test-provider")
    assert "test-provider" in str(exc_info.value)


class TestCorrectionRequest:

    def test_text_field(self):
        assert CorrectionRequest.model_validate({"text": "hello"}).text == "hello"

    def test_legacy_prompt_key(self):
        assert CorrectionRequest.model_validate({"prompt": "hello"}).text == "hello"

    def test_text_wins_over_prompt(self):
        req = CorrectionRequest.model_validate({"text": "a", "prompt": "b"})
        assert req.text == "a"

    def test_missing_or_null_text_is_empty(self):
        assert CorrectionRequest.model_validate({}).text == ""
        assert CorrectionRequest.model_validate({"text": None}).text == ""
