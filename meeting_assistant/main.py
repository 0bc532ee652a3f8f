"""Meeting Assistant API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every response carries the fixed CORS headers (api/cors.py)
    - Global error handlers map AssistantError → structured JSON responses
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - No database, no shared state: every request is handled independently

Run with: uvicorn meeting_assistant.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from meeting_assistant.api.cors import register_cors_headers
from meeting_assistant.api.error_handlers import register_error_handlers
from meeting_assistant.infrastructure.observability import setup_logging
from meeting_assistant.config import get_settings
from meeting_assistant.api.routes import health, generate

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} started")
    yield
    logger.info(f"{settings.service_name} shutting down")
    logging.root.removeHandler(handler)


settings = get_settings()
app = FastAPI(
    title="Meeting Assistant API",
    version=settings.service_version,
    lifespan=lifespan,
)

register_cors_headers(app)
register_error_handlers(app)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(generate.router)
