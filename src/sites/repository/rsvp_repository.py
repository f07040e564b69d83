"""RSVP repository - append-only RSVP rows scoped to a wedding site."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.sites.repository.orm_models import RSVP


class RSVPRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(
        self,
        site_id: UUID,
        full_name: str,
        attending: bool,
        email: str | None = None,
        dietary_restrictions: str | None = None,
        message: str | None = None,
    ) -> RSVP:
        rsvp = RSVP(
            site_id=site_id,
            full_name=full_name,
            email=email,
            attending=attending,
            dietary_restrictions=dietary_restrictions,
            message=message,
        )
        self.session.add(rsvp)
        await self.session.flush()
        await self.session.refresh(rsvp)
        return rsvp

    async def list_by_site(self, site_id: UUID) -> Sequence[RSVP]:
        """All RSVPs of a site, newest first."""
        stmt = (
            select(RSVP)
            .where(RSVP.site_id == site_id)
            .order_by(RSVP.created_at.desc(), RSVP.uuid)
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()
