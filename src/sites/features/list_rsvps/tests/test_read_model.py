"""Tests for SqlRSVPReadModel."""

from uuid import uuid4

from src.config.database import async_session_maker
from src.models.user import User
from src.sites.dtos import RSVPAnalyticsDTO
from src.sites.features.list_rsvps.read_model import SqlRSVPReadModel
from src.sites.features.save_site.write_model import SqlSiteWriteModel
from src.sites.features.submit_rsvp.write_model import SqlRSVPWriteModel


async def test_list_rsvps_without_site_is_empty():
    async with async_session_maker() as db_session:
        read_model = SqlRSVPReadModel(session_overwrite=db_session)

        result = await read_model.list_rsvps(uuid4())

        assert result.rsvps == []
        assert result.analytics == RSVPAnalyticsDTO(total=0, total_attending=0, total_declined=0)


async def test_list_rsvps_newest_first_with_analytics():
    async with async_session_maker() as db_session:
        user = User(email="owner@example.com", hashed_password="hashed_password")
        db_session.add(user)
        await db_session.flush()
        await SqlSiteWriteModel(session_overwrite=db_session).save_site(
            user.uuid, {"slug": "jane-and-john", "is_published": True}
        )

        write_model = SqlRSVPWriteModel(session_overwrite=db_session)
        for name, attending in [("Ann", True), ("Bob", False), ("Cat", True)]:
            await write_model.submit_rsvp(slug="jane-and-john", full_name=name, attending=attending)

        result = await SqlRSVPReadModel(session_overwrite=db_session).list_rsvps(user.uuid)

        assert result.slug == "jane-and-john"
        assert [rsvp.full_name for rsvp in result.rsvps] == ["Cat", "Bob", "Ann"]
        assert result.analytics.total == 3
        assert result.analytics.total_attending == 2
        assert result.analytics.total_declined == 1

        await db_session.rollback()


async def test_list_rsvps_only_sees_own_site():
    async with async_session_maker() as db_session:
        jane = User(email="jane@example.com", hashed_password="hashed_password")
        mary = User(email="mary@example.com", hashed_password="hashed_password")
        db_session.add_all([jane, mary])
        await db_session.flush()
        site_writer = SqlSiteWriteModel(session_overwrite=db_session)
        await site_writer.save_site(jane.uuid, {"slug": "jane-and-john", "is_published": True})
        await site_writer.save_site(mary.uuid, {"slug": "mary-and-mike", "is_published": True})

        await SqlRSVPWriteModel(session_overwrite=db_session).submit_rsvp(
            slug="mary-and-mike", full_name="Ann", attending=True
        )

        result = await SqlRSVPReadModel(session_overwrite=db_session).list_rsvps(jane.uuid)

        assert result.rsvps == []
        assert result.analytics.total == 0

        await db_session.rollback()
