from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.sites.dtos import SiteDTO
from src.sites.repository.site_repository import SiteRepository


class OwnSiteReadModel(ABC):
    @abstractmethod
    async def get_site(self, owner_id: UUID) -> SiteDTO | None:
        """Get the owner's site with its ordered events, or None before the first save."""
        raise NotImplementedError


class SqlOwnSiteReadModel(OwnSiteReadModel):
    """SQL implementation of own site read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_site(self, owner_id: UUID) -> SiteDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            site = await SiteRepository(session).get_by_owner(owner_id)
            if site is None:
                return None
            return SiteDTO.from_site(site)
