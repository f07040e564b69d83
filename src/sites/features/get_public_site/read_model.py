"""Guest access gateway: decides what, if anything, a guest may see of a wedding site.

Read-only: nothing on the site is ever modified here.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.security import verify_password
from src.config.database import async_session_manager
from src.sites.dtos import (
    IncorrectSitePasswordError,
    PasswordRequiredDTO,
    PublicSiteDTO,
    SiteNotFoundError,
    SiteNotPublishedError,
)
from src.sites.repository.site_repository import SiteRepository

logger = logging.getLogger(__name__)


class GuestAccessGateway(ABC):
    @abstractmethod
    async def resolve_site(
        self, slug: str, password: str | None = None
    ) -> PublicSiteDTO | PasswordRequiredDTO:
        """Resolve a published site for a guest.

        Returns:
            PublicSiteDTO when the site may be shown, PasswordRequiredDTO when the site is
            protected and no password was given

        Raises:
            SiteNotFoundError: no site has this slug
            SiteNotPublishedError: the site exists but is not published
            IncorrectSitePasswordError: the given password does not match
        """
        raise NotImplementedError


class SqlGuestAccessGateway(GuestAccessGateway):
    """SQL implementation of the guest access gateway."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def resolve_site(
        self, slug: str, password: str | None = None
    ) -> PublicSiteDTO | PasswordRequiredDTO:
        async with self.async_session_manager(
            auto_commit=False, session_overwrite=self.session_overwrite
        ) as session:
            site = await SiteRepository(session).get_by_slug(slug)

            if site is None:
                raise SiteNotFoundError(slug)

            if not site.is_published:
                raise SiteNotPublishedError(slug)

            if site.password_hash is not None:
                if password is None:
                    return PasswordRequiredDTO()
                if not verify_password(password, site.password_hash):
                    logger.info("Wrong password for wedding site %s", slug)
                    raise IncorrectSitePasswordError(slug)

            return PublicSiteDTO.from_site(site)
