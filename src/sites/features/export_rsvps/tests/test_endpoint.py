from uuid import UUID

import pytest

from src.sites.dtos import RSVPAnalyticsDTO, RSVPListDTO, SiteDTO
from src.sites.features.get_own_site.read_model import OwnSiteReadModel
from src.sites.features.get_own_site.router import get_own_site_read_model
from src.sites.features.list_rsvps.read_model import RSVPReadModel
from src.sites.features.list_rsvps.router import get_rsvp_read_model
from src.sites.tests.factories import make_rsvp, make_site
from src.sites.urls import EXPORT_RSVPS_URL


class InMemoryOwnSiteReadModel(OwnSiteReadModel):
    def __init__(self, sites: dict[UUID, SiteDTO]):
        self._sites = sites

    async def get_site(self, owner_id: UUID) -> SiteDTO | None:
        return self._sites.get(owner_id)


class InMemoryRSVPReadModel(RSVPReadModel):
    def __init__(self, lists: dict[UUID, RSVPListDTO]):
        self._lists = lists

    async def list_rsvps(self, owner_id: UUID) -> RSVPListDTO:
        return self._lists.get(owner_id, RSVPListDTO())


@pytest.mark.asyncio
async def test_export_rsvps(client_factory, auth_override, owner_session):
    rsvps = [make_rsvp("Ann Guest", True), make_rsvp("Bob Guest", False)]
    sites = {owner_session.user_id: make_site(user_id=owner_session.user_id)}
    lists = {
        owner_session.user_id: RSVPListDTO(
            slug="jane-and-john", rsvps=rsvps, analytics=RSVPAnalyticsDTO.from_rsvps(rsvps)
        )
    }
    overrides = {
        **auth_override,
        get_own_site_read_model: lambda: InMemoryOwnSiteReadModel(sites),
        get_rsvp_read_model: lambda: InMemoryRSVPReadModel(lists),
    }

    async with client_factory(overrides) as client:
        response = await client.get(EXPORT_RSVPS_URL)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert (
        response.headers["content-disposition"] == 'attachment; filename="rsvps-jane-and-john.csv"'
    )
    lines = response.text.split("\n")
    assert lines[0] == "Full Name,Email,Attending,Dietary Restrictions,Message,Submitted At"
    assert lines[1].startswith('"Ann Guest","","Yes"')
    assert lines[2].startswith('"Bob Guest","","No"')


@pytest.mark.asyncio
async def test_export_rsvps_without_site(client_factory, auth_override):
    overrides = {
        **auth_override,
        get_own_site_read_model: lambda: InMemoryOwnSiteReadModel({}),
        get_rsvp_read_model: lambda: InMemoryRSVPReadModel({}),
    }

    async with client_factory(overrides) as client:
        response = await client.get(EXPORT_RSVPS_URL)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_export_rsvps_requires_login(client_factory):
    async with client_factory() as client:
        response = await client.get(EXPORT_RSVPS_URL)

    assert response.status_code == 401
