"""API test fixtures — FastAPI app behind an httpx async client.

Design Decisions:
    - ASGITransport over a live server: no sockets, lifespan not needed
    - raise_app_exceptions=False: Starlette re-raises after the catch-all
      handler responds, and tests want to inspect that response
"""

import pytest
from httpx import ASGITransport, AsyncClient

from meeting_assistant.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
