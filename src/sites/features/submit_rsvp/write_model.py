"""Write model for guest RSVP submissions.

Guests need no account. The target site must exist and be published; a missing site and an
unpublished one are reported the same way. The site password is not checked here.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.sites.dtos import RSVPDTO, SiteNotFoundError, SiteValidationError
from src.sites.repository.rsvp_repository import RSVPRepository
from src.sites.repository.site_repository import SiteRepository
from src.sites.validation import require_text

logger = logging.getLogger(__name__)


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(
        self,
        slug: str,
        full_name: str,
        attending: bool,
        email: str | None = None,
        dietary_restrictions: str | None = None,
        message: str | None = None,
    ) -> RSVPDTO:
        """
        Record a guest's RSVP for the site behind ``slug``.
        Raises SiteNotFoundError for unknown or unpublished sites.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """SQL implementation of RSVP write model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def submit_rsvp(
        self,
        slug: str,
        full_name: str,
        attending: bool,
        email: str | None = None,
        dietary_restrictions: str | None = None,
        message: str | None = None,
    ) -> RSVPDTO:
        full_name = require_text(full_name, "full_name")
        if not isinstance(attending, bool):
            raise SiteValidationError("attending", "must be true or false")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            site = await SiteRepository(session).get_by_slug(slug, with_events=False)
            if site is None or not site.is_published:
                raise SiteNotFoundError(slug)

            rsvp = await RSVPRepository(session).create(
                site_id=site.uuid,
                full_name=full_name,
                attending=attending,
                email=_blank_to_none(email),
                dietary_restrictions=_blank_to_none(dietary_restrictions),
                message=_blank_to_none(message),
            )
            logger.info("RSVP %s recorded for site %s (attending=%s)", rsvp.uuid, slug, attending)
            return RSVPDTO.from_rsvp(rsvp)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None
