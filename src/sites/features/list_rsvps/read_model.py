from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.sites.dtos import RSVPAnalyticsDTO, RSVPDTO, RSVPListDTO
from src.sites.repository.rsvp_repository import RSVPRepository
from src.sites.repository.site_repository import SiteRepository


class RSVPReadModel(ABC):
    @abstractmethod
    async def list_rsvps(self, owner_id: UUID) -> RSVPListDTO:
        """
        All RSVPs of the owner's site, newest first, with attendance analytics.
        An owner without a site gets an empty list and zeroed analytics.
        """
        raise NotImplementedError


class SqlRSVPReadModel(RSVPReadModel):
    """SQL implementation of RSVP read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_rsvps(self, owner_id: UUID) -> RSVPListDTO:
        async with self.async_session_manager(
            auto_commit=False, session_overwrite=self.session_overwrite
        ) as session:
            site = await SiteRepository(session).get_by_owner(owner_id, with_events=False)
            if site is None:
                return RSVPListDTO()

            rows = await RSVPRepository(session).list_by_site(site.uuid)
            rsvps = [RSVPDTO.from_rsvp(row) for row in rows]
            return RSVPListDTO(
                slug=site.slug,
                rsvps=rsvps,
                analytics=RSVPAnalyticsDTO.from_rsvps(rsvps),
            )
