"""Site repository - owns WeddingSite rows and their ordered Event children.

Methods work on the session they are given so callers decide the transaction boundary.
"""

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.sites.dtos import SlugConflictError
from src.sites.repository.orm_models import Event, WeddingSite


class SiteRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_owner(self, owner_id: UUID, with_events: bool = True) -> WeddingSite | None:
        stmt = select(WeddingSite).where(WeddingSite.user_id == owner_id)
        if with_events:
            stmt = stmt.options(selectinload(WeddingSite.events))
        result = await self.session.execute(stmt.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str, with_events: bool = True) -> WeddingSite | None:
        stmt = select(WeddingSite).where(WeddingSite.slug == slug)
        if with_events:
            stmt = stmt.options(selectinload(WeddingSite.events))
        result = await self.session.execute(stmt.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def get_by_id(self, site_id: UUID) -> WeddingSite | None:
        stmt = (
            select(WeddingSite)
            .where(WeddingSite.uuid == site_id)
            .options(selectinload(WeddingSite.events))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_slug_taken(self, slug: str, exclude_site_id: UUID | None = None) -> bool:
        stmt = select(WeddingSite.uuid).where(WeddingSite.slug == slug)
        if exclude_site_id is not None:
            stmt = stmt.where(WeddingSite.uuid != exclude_site_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, owner_id: UUID, fields: dict[str, Any]) -> WeddingSite:
        site = WeddingSite(user_id=owner_id, **fields)
        self.session.add(site)
        await self._flush(site.slug)
        return site

    async def update(self, site: WeddingSite, fields: dict[str, Any]) -> WeddingSite:
        for name, value in fields.items():
            setattr(site, name, value)
        await self._flush(site.slug)
        return site

    async def replace_events(self, site_id: UUID, events: Sequence[dict[str, Any]]) -> None:
        """Drop every event of the site and insert ``events`` with order = list index."""
        await self.session.execute(delete(Event).where(Event.site_id == site_id))
        for index, event in enumerate(events):
            self.session.add(
                Event(
                    site_id=site_id,
                    title=event["title"],
                    date=event["date"],
                    time=event["time"],
                    location=event["location"],
                    address=event["address"],
                    order=index,
                )
            )
        await self.session.flush()

    async def _flush(self, slug: str | None) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e, ("slug", "user_id")):
                raise SlugConflictError(slug or "") from e
            raise


def _is_unique_violation(error: IntegrityError, columns: tuple[str, ...]) -> bool:
    """True for a unique clash on one of ``columns``; foreign key and NOT NULL failures are not.

    Postgres: duplicate key value violates unique constraint "ix_wedding_sites_slug"
    SQLite: UNIQUE constraint failed: wedding_sites.slug
    """
    reason = str(error.orig).lower()
    if "unique" not in reason or "foreign key" in reason:
        return False
    return any(column in reason for column in columns)

