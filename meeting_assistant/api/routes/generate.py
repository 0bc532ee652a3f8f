"""Generate Route — the single method-dispatched endpoint that produces meeting text.

Invariants:
    - Exactly one response per request: preflight, success, 4xx, or 500
    - OPTIONS short-circuits with an empty 200 before the body is touched
    - Every failure inside the handler, response rendering included, becomes an
      InternalError response, never a raised exception
    - HTTP status chosen in one place (_to_response) from the handler's result

Design Decisions:
    - api_route over @router.post: non-POST methods must reach the handler to get
      the documented 405 body instead of FastAPI's default
    - Raw body decoded here rather than via a typed parameter, so malformed JSON
      is reported as missing content instead of a framework 422
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from meeting_assistant.api.error_handlers import error_response
from meeting_assistant.core.enforce_method import is_preflight
from meeting_assistant.core.errors import AssistantError, InternalError
from meeting_assistant.schemas.generate import ErrorResponse, GenerateResponse
from meeting_assistant.services.handle_generate import GenerateOutcome, handle_generate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["generate"])

DISPATCHED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(
    "/generate",
    methods=DISPATCHED_METHODS,
    responses={
        200: {"model": GenerateResponse},
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate(request: Request) -> Response:
    """Generate a canned meeting summary or task checklist from a transcript."""
    if is_preflight(request.method):
        return Response(status_code=status.HTTP_200_OK)

    try:
        body = await _read_json_body(request)
        outcome = handle_generate(request.method, body)
        return _to_response(outcome, request.method)
    except Exception as e:
        logger.error(
            f"Generate handler failed: {e}",
            exc_info=True,
            extra={"request_method": request.method},
        )
        return error_response(InternalError.from_exception(e))


async def _read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when the body is empty or not valid JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


def _to_response(outcome: GenerateOutcome, method: str) -> Response:
    if isinstance(outcome, AssistantError):
        if outcome.http_status < 500:
            logger.warning(
                f"Generate rejected: {outcome.message}",
                extra={
                    "request_method": method,
                    "error_code": outcome.code,
                    "status_code": outcome.http_status,
                },
            )
        return error_response(outcome)

    logger.info(
        "Generate succeeded",
        extra={
            "request_method": method,
            "request_type": outcome.type.value,
            "status_code": status.HTTP_200_OK,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK, content=outcome.model_dump(mode="json"),
    )
