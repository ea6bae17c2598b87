"""
Noteboard: Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the API and canvas test suites.

Fixture Hierarchy (all function-scoped):
    ├── db_engine:       in-memory SQLite (aiosqlite) with tables + board 1
    ├── db_session:      AsyncSession bound to db_engine
    ├── app:             FastAPI app whose session dependency uses db_engine
    ├── test_client:     HTTPX AsyncClient talking to `app` over ASGI
    ├── board_api:       canvas NoteboardClient talking to `app` over ASGI
    ├── mock_db_session: AsyncMock session for failure paths
    └── fake_api:        canvas NoteboardClient over httpx.MockTransport
                         that records every request
"""

import json
import os
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time: override them before any noteboard import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from noteboard.canvas.api import NoteboardClient
from noteboard.database import Base, get_db_session
from noteboard.main import create_app
from noteboard.models import Board


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory database per test.

    StaticPool keeps the single SQLite connection alive so every session
    sees the same tables.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add(Board(id=1, name="Main board", view_x=0, view_y=0, zoom=1.0))
        await session.commit()

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """A MagicMock that simulates AsyncSession behavior."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Application Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(session_factory):
    application = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_cards(test_client):
            response = await test_client.get("/api/cards")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def board_api(app):
    """Canvas API client wired straight into the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test/api") as http:
        yield NoteboardClient(http=http)


# ══════════════════════════════════════════════════════════════════════════
# Recording Fake API (canvas unit tests)
# ══════════════════════════════════════════════════════════════════════════

class FakeBoardApi:
    """
    In-process stand-in for the HTTP API.

    Records every request as (method, path, payload) and answers with the
    success envelope. Set `fail = True` to answer everything with a 500.
    """

    def __init__(self):
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []
        self.board: Optional[Dict[str, Any]] = {
            "id": 1, "name": "Main board", "view_x": 0, "view_y": 0, "zoom": 1.0,
        }
        self.cards: List[Dict[str, Any]] = []
        self.next_id = 100
        self.fail = False
        self.client = NoteboardClient(
            http=httpx.AsyncClient(
                transport=httpx.MockTransport(self.handle),
                base_url="http://fake/api",
            )
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.content:
            payload = json.loads(request.content)
        else:
            payload = dict(request.url.params)
        path = request.url.path.removeprefix("/api")
        self.calls.append((request.method, path, payload))

        if self.fail:
            return httpx.Response(500, json={"success": False, "error": "Database error"})
        if request.method == "GET" and path == "/board":
            return httpx.Response(200, json={"success": True, "board": self.board})
        if request.method == "GET" and path == "/cards":
            return httpx.Response(200, json={"success": True, "cards": self.cards})
        if request.method == "POST" and path == "/cards":
            self.next_id += 1
            return httpx.Response(201, json={"success": True, "id": self.next_id})
        return httpx.Response(200, json={"success": True})

    def writes(self, method: str = "PUT", path: str = "/cards") -> List[Dict[str, Any]]:
        return [payload for m, p, payload in self.calls if m == method and p == path]


@pytest_asyncio.fixture
async def fake_api():
    api = FakeBoardApi()
    yield api
    await api.client._http.aclose()
