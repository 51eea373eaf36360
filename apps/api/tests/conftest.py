"""Shared fixtures: in-memory database, fake model client, HTTP client."""
from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from haven_api.core.config import settings
from haven_api.db.session import get_session
from haven_api.main import app
from haven_api.models.base import Base
from haven_api.services.llm import get_completion_client


class FakeCompletionClient:
    """Records prompts and returns a canned response."""

    def __init__(self, response: str = "A lovely home.", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, prompt: str, *, temperature: float, json_output: bool = False) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature, "json_output": json_output})
        if self.error is not None:
            raise self.error
        return self.response


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    await engine.dispose()


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def api_key(monkeypatch) -> str:
    monkeypatch.setattr(settings, "gemini_api_key", "test-key", raising=False)
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch) -> None:
    monkeypatch.setattr(settings, "gemini_api_key", "", raising=False)


@pytest.fixture
def overrides(session_factory, completion_client):
    async def _session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(overrides) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=overrides)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http
