from contextlib import asynccontextmanager
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.auth.dependencies import get_current_session
from src.auth.dtos import SessionDTO
from src.config.database import engine
from src.main import app
from src.models.base import BaseModel

# register every table on the metadata
from src.models.user import User  # noqa: F401
from src.sites.repository.orm_models import RSVP, Event, WeddingSite  # noqa: F401


@pytest_asyncio.fixture(autouse=True)
async def database():
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)
        await conn.run_sync(BaseModel.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)


@pytest.fixture
def client_factory():
    """
    Build a test client with FastAPI dependency overrides.

    Usage:
        async with client_factory({get_site_write_model: lambda: write_model}) as client:
            response = await client.post(...)
    """

    @asynccontextmanager
    async def _client_factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return _client_factory


@pytest.fixture
async def client(client_factory):
    async with client_factory() as client:
        yield client


@pytest.fixture
def owner_session() -> SessionDTO:
    return SessionDTO(user_id=uuid4(), email="owner@example.com")


@pytest.fixture
def auth_override(owner_session):
    """Dependency override that logs every request in as ``owner_session``."""
    return {get_current_session: lambda: owner_session}
