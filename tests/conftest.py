"""Shared test fixtures: HTTPX async client bound to the ASGI app."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from astext.core.config import get_settings
from astext.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client talking to the app in-process."""
    get_settings.cache_clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    get_settings.cache_clear()
