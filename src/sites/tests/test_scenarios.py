"""End-to-end flows through the HTTP API against the test database."""

import pytest

from src.auth.urls import REGISTER_URL
from src.sites.urls import (
    EXPORT_RSVPS_URL,
    LIST_RSVPS_URL,
    OWN_SITE_URL,
    PUBLIC_SITE_ACCESS_URL,
    PUBLIC_SITE_URL,
    SUBMIT_RSVP_URL,
)

EVENTS = [
    {
        "title": "Ceremony",
        "date": "2026-06-01",
        "time": "14:00",
        "location": "Chapel",
        "address": "1 Main St",
    },
    {
        "title": "Reception",
        "date": "2026-06-01",
        "time": "18:00",
        "location": "Hall",
        "address": "2 Side St",
    },
]


async def register(client, email="owner@example.com"):
    response = await client.post(REGISTER_URL, json={"email": email, "password": "secret1"})
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.mark.asyncio
async def test_publish_and_view_site(client):
    headers = await register(client)

    response = await client.post(
        OWN_SITE_URL,
        headers=headers,
        json={
            "slug": "jane-and-john",
            "bride_name": "Jane",
            "groom_name": "John",
            "is_published": True,
            "events": EVENTS,
        },
    )
    assert response.status_code == 200

    public = await client.get(PUBLIC_SITE_URL.format(slug="jane-and-john"))

    assert public.status_code == 200
    site = public.json()["wedding_site"]
    assert site["bride_name"] == "Jane"
    assert [event["order"] for event in site["events"]] == [0, 1]
    assert "user_id" not in site


@pytest.mark.asyncio
async def test_password_protected_site(client):
    headers = await register(client)
    await client.post(
        OWN_SITE_URL,
        headers=headers,
        json={"slug": "jane-and-john", "is_published": True, "password": "secret"},
    )

    gated = await client.get(PUBLIC_SITE_URL.format(slug="jane-and-john"))
    wrong = await client.post(
        PUBLIC_SITE_ACCESS_URL.format(slug="jane-and-john"), json={"password": "nope"}
    )
    unlocked = await client.post(
        PUBLIC_SITE_ACCESS_URL.format(slug="jane-and-john"), json={"password": "secret"}
    )

    assert gated.json() == {"requires_password": True}
    assert wrong.status_code == 401
    assert unlocked.status_code == 200
    assert unlocked.json()["wedding_site"]["has_password"] is True
    assert "password" not in unlocked.json()["wedding_site"]


@pytest.mark.asyncio
async def test_unpublished_site_is_hidden(client):
    headers = await register(client)
    await client.post(OWN_SITE_URL, headers=headers, json={"slug": "jane-and-john"})

    response = await client.get(PUBLIC_SITE_URL.format(slug="jane-and-john"))
    rsvp = await client.post(
        SUBMIT_RSVP_URL.format(slug="jane-and-john"), json={"full_name": "Ann", "attending": True}
    )

    assert response.status_code == 403
    assert rsvp.status_code == 404


@pytest.mark.asyncio
async def test_slug_conflict_between_owners(client):
    jane = await register(client, "jane@example.com")
    mary = await register(client, "mary@example.com")

    first = await client.post(OWN_SITE_URL, headers=jane, json={"slug": "jane-and-john"})
    second = await client.post(OWN_SITE_URL, headers=mary, json={"slug": "jane-and-john"})

    assert first.status_code == 200
    assert second.status_code == 409


@pytest.mark.asyncio
async def test_events_replace_and_clear(client):
    headers = await register(client)
    await client.post(OWN_SITE_URL, headers=headers, json={"slug": "jane-and-john", "events": EVENTS})

    untouched = await client.post(OWN_SITE_URL, headers=headers, json={"bride_name": "Jane"})
    cleared = await client.post(OWN_SITE_URL, headers=headers, json={"events": []})
    own = await client.get(OWN_SITE_URL, headers=headers)

    assert len(untouched.json()["wedding_site"]["events"]) == 2
    assert cleared.json()["wedding_site"]["events"] == []
    assert own.json()["wedding_site"]["events"] == []
    assert own.json()["wedding_site"]["bride_name"] == "Jane"


@pytest.mark.asyncio
async def test_rsvp_list_and_export(client):
    headers = await register(client)
    await client.post(
        OWN_SITE_URL, headers=headers, json={"slug": "jane-and-john", "is_published": True}
    )

    for name, attending in [("Ann", True), ("Bob", False)]:
        response = await client.post(
            SUBMIT_RSVP_URL.format(slug="jane-and-john"),
            json={"full_name": name, "attending": attending, "dietary_restrictions": ""},
        )
        assert response.status_code == 201

    listing = await client.get(LIST_RSVPS_URL, headers=headers)
    export = await client.get(EXPORT_RSVPS_URL, headers=headers)

    assert listing.json()["analytics"] == {"total": 2, "total_attending": 1, "total_declined": 1}
    assert listing.json()["rsvps"][0]["dietary_restrictions"] is None
    lines = export.text.split("\n")
    assert len(lines) == 3
    assert export.headers["content-disposition"] == 'attachment; filename="rsvps-jane-and-john.csv"'
