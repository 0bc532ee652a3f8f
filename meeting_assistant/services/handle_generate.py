"""Generate Handler — method gate, payload validation, and result synthesis.

Invariants:
    - handle_generate never raises for bad input: it returns a GenerateResponse
      or an AssistantError value (first error wins)
    - Validation order: method → content → type
    - A body that is not a JSON object counts as missing content
    - OPTIONS is not handled here; the route answers preflights before calling in

Design Decisions:
    - Explicit schema step (Pydantic) before any field is read, so malformed
      payloads are rejected deterministically instead of read as absent
    - Pydantic errors collapsed to exactly two user-facing errors: callers only
      ever see the content message or the type message
"""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from meeting_assistant.core.enforce_method import check_method
from meeting_assistant.core.errors import (
    AssistantError, InvalidTypeError, MissingContentError,
)
from meeting_assistant.core.render_text import render_result
from meeting_assistant.core.timestamps import format_iso_timestamp
from meeting_assistant.schemas.generate import GenerateRequest, GenerateResponse

logger = logging.getLogger(__name__)

GenerateOutcome = GenerateResponse | AssistantError


def parse_generate_request(body: Any) -> GenerateRequest | AssistantError:
    """Validate a decoded JSON body into a GenerateRequest."""
    if not isinstance(body, dict):
        return MissingContentError()
    try:
        return GenerateRequest.model_validate(body)
    except ValidationError as e:
        return _collapse_validation_error(e)


def _collapse_validation_error(exc: ValidationError) -> AssistantError:
    """Map Pydantic's field errors onto the two public validation errors."""
    failed_fields = {e["loc"][0] for e in exc.errors() if e["loc"]}
    if "content" in failed_fields or not failed_fields:
        return MissingContentError()
    return InvalidTypeError()


def handle_generate(
    method: str, body: Any, now: datetime | None = None,
) -> GenerateOutcome:
    """Run one non-preflight request through the method gate and generator."""
    error = check_method(method)
    if error:
        return error

    request = parse_generate_request(body)
    if isinstance(request, AssistantError):
        return request

    text = render_result(request.generate_type, request.content)
    logger.debug(
        "Rendered generate result",
        extra={
            "request_type": request.type,
            "content_chars": len(request.content),
        },
    )
    return GenerateResponse(
        text=text,
        timestamp=format_iso_timestamp(now or datetime.now(timezone.utc)),
        type=request.generate_type,
    )
