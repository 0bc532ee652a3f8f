"""Generate Schemas — field-level validation on the request model.

Tests cover:
    - content is stripped and must be non-empty
    - content must be a real string (no coercion from numbers)
    - type accepts exactly "summary" / "tasks"
"""

import pytest
from pydantic import ValidationError

from meeting_assistant.core.domain_types import GenerateType
from meeting_assistant.schemas.generate import (
    ErrorResponse, GenerateRequest, GenerateResponse,
)


def test_content_is_stripped():
    req = GenerateRequest(content="\t 会议 \n", type="tasks")
    assert req.content == "会议"


def test_whitespace_content_rejected():
    with pytest.raises(ValidationError) as exc_info:
        GenerateRequest(content="   ", type="summary")
    assert exc_info.value.errors()[0]["loc"] == ("content",)


def test_numeric_content_not_coerced():
    with pytest.raises(ValidationError):
        GenerateRequest.model_validate({"content": 3.14, "type": "summary"})


def test_type_maps_to_enum():
    req = GenerateRequest(content="会议", type="summary")
    assert req.generate_type is GenerateType.SUMMARY


@pytest.mark.parametrize("value", ["Summary", "task", "minutes"])
def test_type_must_match_exactly(value):
    with pytest.raises(ValidationError) as exc_info:
        GenerateRequest(content="会议", type=value)
    assert exc_info.value.errors()[0]["loc"] == ("type",)


def test_response_serializes_type_as_string():
    res = GenerateResponse(text="t", timestamp="2026-10-19T00:00:00.000Z", type=GenerateType.TASKS)
    assert res.model_dump(mode="json")["type"] == "tasks"


def test_error_response_optional_fields_default_none():
    err = ErrorResponse(error="Method not allowed", allowed="POST")
    assert err.message is None
    assert err.timestamp is None


def test_bom_and_ideographic_space_trimmed():
    req = GenerateRequest(content="\ufeff\u3000会议\u2028", type="tasks")
    assert req.content == "会议"


def test_bom_only_content_rejected():
    with pytest.raises(ValidationError):
        GenerateRequest(content="\ufeff", type="tasks")


def test_information_separator_is_content():
    req = GenerateRequest(content="\x1c", type="tasks")
    assert req.content == "\x1c"


def test_lone_surrogate_replaced():
    req = GenerateRequest.model_validate({"content": "\ud800 会议", "type": "summary"})
    assert req.content == "\ufffd 会议"
    req.content.encode("utf-8")
