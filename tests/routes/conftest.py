# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from inkwell.clients.indexnow_client import IndexNowClient
from inkwell.configs import CacheConfig
from inkwell.db import get_session
from inkwell.dependencies import get_indexnow_client
from inkwell.main import app as inkwell_app
from inkwell.managers.content_cache import ContentCache


@pytest.fixture
def content_cache() -> ContentCache:
    return ContentCache(CacheConfig())


@pytest.fixture
def indexnow() -> MagicMock:
    client = MagicMock(spec=IndexNowClient)
    client.send_request = AsyncMock(return_value={})
    return client


@pytest.fixture
def app(
    session_maker: async_sessionmaker[AsyncSession],
    content_cache: ContentCache,
    indexnow: MagicMock,
) -> FastAPI:
    """The application wired to the test database, a fresh cache and a mocked IndexNow client."""

    async def override_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            yield session

    inkwell_app.dependency_overrides[get_session] = override_session
    inkwell_app.dependency_overrides[get_indexnow_client] = lambda: indexnow
    inkwell_app.state.content_cache = content_cache
    yield inkwell_app
    inkwell_app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac:
        yield ac
