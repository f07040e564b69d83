from collections.abc import Mapping
from typing import Any
from uuid import UUID

import pytest

from src.sites.dtos import SiteDTO, SiteValidationError, SlugConflictError
from src.sites.features.save_site.router import get_site_write_model
from src.sites.features.save_site.write_model import SiteWriteModel
from src.sites.tests.factories import make_event, make_site
from src.sites.urls import OWN_SITE_URL


class InMemorySiteWriteModel(SiteWriteModel):
    """In-memory write model for testing."""

    def __init__(self, memory: dict, error: Exception | None = None):
        self._memory = memory
        self._error = error

    async def save_site(self, owner_id: UUID, payload: Mapping[str, Any]) -> SiteDTO:
        if self._error:
            raise self._error
        self._memory[owner_id] = dict(payload)
        events = [
            make_event(order=index, title=event["title"])
            for index, event in enumerate(payload.get("events") or [])
        ]
        return make_site(
            user_id=owner_id,
            slug=payload.get("slug") or "jane-and-john",
            is_published=payload.get("is_published", False),
            has_password=bool(payload.get("password")),
            events=events,
        )


@pytest.mark.asyncio
async def test_save_site(client_factory, auth_override, owner_session):
    memory = {}
    overrides = {**auth_override, get_site_write_model: lambda: InMemorySiteWriteModel(memory)}
    site_data = {
        "slug": "jane-and-john",
        "is_published": True,
        "password": "secret",
        "events": [
            {
                "title": "Ceremony",
                "date": "2026-06-01",
                "time": "14:00",
                "location": "Chapel",
                "address": "1 Main St",
            }
        ],
    }

    async with client_factory(overrides) as client:
        response = await client.post(OWN_SITE_URL, json=site_data)

    assert response.status_code == 200
    data = response.json()["wedding_site"]
    assert data["slug"] == "jane-and-john"
    assert data["is_published"] is True
    assert data["has_password"] is True
    assert data["user_id"] == str(owner_session.user_id)
    assert data["events"][0]["title"] == "Ceremony"
    assert data["events"][0]["order"] == 0
    assert "password" not in data
    assert "password_hash" not in data


@pytest.mark.asyncio
async def test_save_site_passes_only_submitted_fields(client_factory, auth_override, owner_session):
    memory = {}
    overrides = {**auth_override, get_site_write_model: lambda: InMemorySiteWriteModel(memory)}

    async with client_factory(overrides) as client:
        response = await client.post(OWN_SITE_URL, json={"bride_name": "Jane"})

    assert response.status_code == 200
    assert memory[owner_session.user_id] == {"bride_name": "Jane"}


@pytest.mark.asyncio
async def test_save_site_requires_login(client_factory):
    memory = {}
    overrides = {get_site_write_model: lambda: InMemorySiteWriteModel(memory)}

    async with client_factory(overrides) as client:
        response = await client.post(OWN_SITE_URL, json={"slug": "jane-and-john"})

    assert response.status_code == 401
    assert memory == {}


@pytest.mark.asyncio
async def test_save_site_slug_conflict(client_factory, auth_override):
    write_model = InMemorySiteWriteModel({}, error=SlugConflictError("jane-and-john"))
    overrides = {**auth_override, get_site_write_model: lambda: write_model}

    async with client_factory(overrides) as client:
        response = await client.post(OWN_SITE_URL, json={"slug": "jane-and-john"})

    assert response.status_code == 409
    assert "jane-and-john" in response.json()["detail"]


@pytest.mark.asyncio
async def test_save_site_validation_error(client_factory, auth_override):
    write_model = InMemorySiteWriteModel(
        {}, error=SiteValidationError("wedding_date", "invalid date 'soon'")
    )
    overrides = {**auth_override, get_site_write_model: lambda: write_model}

    async with client_factory(overrides) as client:
        response = await client.post(OWN_SITE_URL, json={"wedding_date": "soon"})

    assert response.status_code == 422
    assert response.json()["detail"].startswith("wedding_date")


@pytest.mark.asyncio
async def test_save_site_rejects_incomplete_event(client_factory, auth_override):
    memory = {}
    overrides = {**auth_override, get_site_write_model: lambda: InMemorySiteWriteModel(memory)}

    async with client_factory(overrides) as client:
        response = await client.post(
            OWN_SITE_URL, json={"events": [{"title": "Ceremony", "date": "2026-06-01"}]}
        )

    assert response.status_code == 422
    assert memory == {}
