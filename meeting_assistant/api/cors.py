"""CORS Headers — stamps the permissive CORS policy on every response.

Invariants:
    - Every response leaving the app carries all three CORS_HEADERS,
      whatever its status code and whether or not the request sent an Origin
    - Headers already set by a route are overwritten, never duplicated

Design Decisions:
    - Own middleware over Starlette's CORSMiddleware: CORSMiddleware only
      annotates requests that carry an Origin header and only lists methods on
      preflights; clients of this API read the headers on every response
"""

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def apply_cors_headers(response: Response) -> Response:
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Annotate every response with CORS_HEADERS."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        return apply_cors_headers(response)


def register_cors_headers(app: FastAPI) -> None:
    app.add_middleware(CORSHeadersMiddleware)
