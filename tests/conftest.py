"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import Request
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.client import ApiClient
from src.db import dispose_engine, drop_db, get_db_context, init_db
from src.main import app
from src.web.dependencies import get_api_client, session_cookies
from tests.fakes import RecordingTransport

API_BASE_URL = "http://api.test"


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest_asyncio.fixture
async def api(transport: RecordingTransport) -> AsyncGenerator[ApiClient, None]:
    """API client talking to the recording transport."""
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(transport.handler),
        base_url=API_BASE_URL,
    )
    async with ApiClient(http_client=http_client) as client:
        yield client
    await http_client.aclose()


@pytest.fixture
def client(transport: RecordingTransport) -> Generator[TestClient, None, None]:
    """Synchronous test client for the web app, wired to the recording transport."""

    async def override_get_api_client(request: Request) -> AsyncGenerator[ApiClient, None]:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(transport.handler),
            base_url=API_BASE_URL,
        )
        async with ApiClient(cookies=session_cookies(request), http_client=http_client) as api_client:
            yield api_client
        await http_client.aclose()

    app.dependency_overrides[get_api_client] = override_get_api_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Database fixtures for integration tests
@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session on a freshly created schema.

    Skips the test when PostgreSQL is not reachable.
    """
    try:
        await drop_db()
        await init_db()
    except (OSError, SQLAlchemyError) as e:
        await dispose_engine()
        pytest.skip(f"PostgreSQL not available: {e}")

    async with get_db_context() as session:
        yield session

    await drop_db()
    await dispose_engine()


@pytest.fixture
def session_user() -> dict[str, Any]:
    """Session payload for a logged-in user."""
    return {
        "user": {
            "id": "0190a6f2-7c3e-7b1a-9d2f-3b8e1c4a5d6f",
            "name": "Ana Translator",
            "email": "ana@example.com",
            "roles": [],
        }
    }
