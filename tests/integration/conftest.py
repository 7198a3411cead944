"""Pytest configuration and fixtures for API integration tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from orderdesk.api.deps import get_session_factory
from orderdesk.api.main import app
from orderdesk.api.security import create_access_token


@pytest_asyncio.fixture
async def client(test_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with the test database injected."""
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build a bearer header for a seeded UserModel."""

    def _headers(user) -> dict:
        token = create_access_token(user.id, role=user.role, email=user.email)
        return {"Authorization": f"Bearer {token}"}

    return _headers
