from datetime import UTC, datetime
from uuid import uuid4

import pytest

from src.sites.dtos import RSVPDTO, SiteNotFoundError
from src.sites.features.submit_rsvp.router import get_rsvp_write_model
from src.sites.features.submit_rsvp.write_model import RSVPWriteModel
from src.sites.urls import SUBMIT_RSVP_URL


class InMemoryRSVPWriteModel(RSVPWriteModel):
    """In-memory write model for testing."""

    def __init__(self, memory: dict, published_slugs: set[str]):
        self._memory = memory
        self._published_slugs = published_slugs

    async def submit_rsvp(
        self,
        slug: str,
        full_name: str,
        attending: bool,
        email: str | None = None,
        dietary_restrictions: str | None = None,
        message: str | None = None,
    ) -> RSVPDTO:
        if slug not in self._published_slugs:
            raise SiteNotFoundError(slug)
        rsvp = RSVPDTO(
            uuid=uuid4(),
            full_name=full_name.strip(),
            email=email,
            attending=attending,
            dietary_restrictions=dietary_restrictions,
            message=message,
            created_at=datetime.now(UTC),
        )
        self._memory.setdefault(slug, []).append(rsvp)
        return rsvp


@pytest.mark.asyncio
async def test_submit_rsvp_attending(client_factory):
    memory = {}
    write_model = InMemoryRSVPWriteModel(memory, {"jane-and-john"})
    rsvp_data = {
        "full_name": "Ann Guest",
        "attending": True,
        "email": "ann@example.com",
        "dietary_restrictions": "vegetarian",
    }

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(SUBMIT_RSVP_URL.format(slug="jane-and-john"), json=rsvp_data)

    assert response.status_code == 201
    data = response.json()["rsvp"]
    assert data["full_name"] == "Ann Guest"
    assert data["attending"] is True
    assert data["email"] == "ann@example.com"
    assert len(memory["jane-and-john"]) == 1


@pytest.mark.asyncio
async def test_submit_rsvp_blank_email_is_accepted(client_factory):
    memory = {}
    write_model = InMemoryRSVPWriteModel(memory, {"jane-and-john"})

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(
            SUBMIT_RSVP_URL.format(slug="jane-and-john"),
            json={"full_name": "Bob", "attending": False, "email": ""},
        )

    assert response.status_code == 201
    assert response.json()["rsvp"]["email"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "rsvp_data",
    [
        {"attending": True},
        {"full_name": "Ann"},
        {"full_name": "Ann", "attending": "yes"},
        {"full_name": "Ann", "attending": True, "email": "not-an-email"},
    ],
)
async def test_submit_rsvp_invalid_body(client_factory, rsvp_data):
    memory = {}
    write_model = InMemoryRSVPWriteModel(memory, {"jane-and-john"})

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(SUBMIT_RSVP_URL.format(slug="jane-and-john"), json=rsvp_data)

    assert response.status_code == 422
    assert memory == {}


@pytest.mark.asyncio
async def test_submit_rsvp_unknown_site(client_factory):
    write_model = InMemoryRSVPWriteModel({}, set())

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(
            SUBMIT_RSVP_URL.format(slug="nobody"),
            json={"full_name": "Ann", "attending": True},
        )

    assert response.status_code == 404
