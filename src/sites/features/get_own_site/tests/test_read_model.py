"""Tests for SqlOwnSiteReadModel."""

from uuid import uuid4

from src.config.database import async_session_maker
from src.models.user import User
from src.sites.features.get_own_site.read_model import SqlOwnSiteReadModel
from src.sites.features.save_site.write_model import SqlSiteWriteModel


async def test_get_site_returns_none_before_first_save():
    async with async_session_maker() as db_session:
        read_model = SqlOwnSiteReadModel(session_overwrite=db_session)

        assert await read_model.get_site(uuid4()) is None


async def test_get_site_returns_owner_view_with_ordered_events():
    async with async_session_maker() as db_session:
        user = User(email="owner@example.com", hashed_password="hashed_password")
        db_session.add(user)
        await db_session.flush()

        events = [
            {"title": title, "date": "2026-06-01", "time": "12:00", "location": "Here", "address": "There"}
            for title in ("Ceremony", "Dinner", "Party")
        ]
        await SqlSiteWriteModel(session_overwrite=db_session).save_site(
            user.uuid, {"slug": "jane-and-john", "password": "secret", "events": events}
        )

        site = await SqlOwnSiteReadModel(session_overwrite=db_session).get_site(user.uuid)

        assert site.user_id == user.uuid
        assert site.has_password is True
        assert [event.title for event in site.events] == ["Ceremony", "Dinner", "Party"]
        assert [event.order for event in site.events] == [0, 1, 2]

        await db_session.rollback()
