"""Error Handlers — global exception handlers for the meeting assistant API.

Invariants:
    - HTTPException from routing → {"error": ...}; a 405 (method the route does
      not dispatch, e.g. TRACE) gets the same body as MethodNotAllowedError
    - AssistantError → its own status code and JSON body
    - RequestValidationError → 400 with a top-level "error" key
    - Exception (catch-all) → 500 Internal Server Error envelope, CORS headers included

Design Decisions:
    - Four-layer handler: routing (HTTPException), domain (AssistantError),
      validation (Pydantic), catch-all (Exception)
    - The generate route returns its errors as values and contains its own
      failures, and no current route takes typed body parameters: the
      AssistantError and RequestValidationError handlers only guard routes
      that raise or validate through FastAPI
    - Catch-all stamps CORS headers itself because Starlette serves it from
      ServerErrorMiddleware, outside the CORS middleware
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from meeting_assistant.api.cors import apply_cors_headers
from meeting_assistant.core.errors import (
    AssistantError, InternalError, MethodNotAllowedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_assistant_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_response(error: AssistantError) -> JSONResponse:
    """Render an AssistantError value as an HTTP response."""
    return JSONResponse(
        status_code=error.http_status, content=error.to_response(),
    )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Routing errors (unknown path, undispatched method) in the API's shape."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return error_response(MethodNotAllowedError(request.method))
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )


def _register_assistant_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AssistantError)
    async def assistant_error_handler(request: Request, exc: AssistantError):
        """Handle all raised domain errors."""
        logger.error(
            f"AssistantError: {exc.message}",
            extra={"error_code": exc.code, "status_code": exc.http_status},
        )
        return error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors raised by typed routes."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request data"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — the client always gets a JSON body, never a dropped connection."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return apply_cors_headers(error_response(InternalError.from_exception(exc)))
