"""Shared fixtures: an isolated application per test, backed by in-memory SQLite."""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from product_api.config import Settings
from product_api.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(
        _env_file=None,
        app_env="test",
        database_url="sqlite:///:memory:",
    )


@pytest_asyncio.fixture
async def app(test_settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """A fresh application with its own registry and product table.

    ASGITransport does not run the lifespan, so the schema is created here.
    """
    application = create_app(test_settings)
    await application.state.database.create_schema()
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def issue_identifier(client: AsyncClient) -> Callable[[str], Awaitable[str]]:
    """Returns a coroutine function that registers a username and yields its identifier."""

    async def _issue(username: str) -> str:
        response = await client.post("/identifiers", params={"username": username})
        assert response.status_code == 200
        return response.json()

    return _issue
