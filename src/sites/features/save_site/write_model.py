"""Write model for saving a wedding site from the admin form builder.

Creates the owner's site on first save and updates it afterwards. A submitted events list
replaces the stored one wholesale. The scalar update and the event replacement share one
transaction, so a failed save leaves nothing behind.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.security import hash_password
from src.config.database import async_session_manager
from src.sites.dtos import SiteDTO, SiteValidationError, SlugConflictError
from src.sites.repository.site_repository import SiteRepository
from src.sites.slugs import RESERVED_SLUGS, default_slug, generate_unique_slug, slugify
from src.sites.validation import (
    parse_date,
    require_date,
    require_text,
    validate_color,
    validate_gallery,
)

logger = logging.getLogger(__name__)

COLOR_FIELDS = ("primary_color", "secondary_color", "accent_color")

SITE_FIELDS = frozenset(
    {
        "slug",
        "password",
        "is_published",
        *COLOR_FIELDS,
        "heading_font",
        "body_font",
        "hero_enabled",
        "bride_name",
        "groom_name",
        "wedding_date",
        "hero_image_url",
        "story_enabled",
        "story_title",
        "story_text",
        "story_image1_url",
        "story_image2_url",
        "gallery_enabled",
        "gallery_title",
        "gallery_images",
        "registry_enabled",
        "registry_title",
        "registry_text",
        "music_enabled",
        "music_url",
        "music_title",
    }
)

EVENT_TEXT_FIELDS = ("title", "time", "location", "address")

# attempts at suffixing a generated slug before giving up with a conflict
MAX_SLUG_ATTEMPTS = 5


class SiteWriteModel(ABC):
    @abstractmethod
    async def save_site(self, owner_id: UUID, payload: Mapping[str, Any]) -> SiteDTO:
        """Create or update the owner's site from a form submission.

        Args:
            owner_id: The authenticated owner
            payload: Site fields to write. Only keys present are written. An ``events``
                key (even an empty list) replaces all stored events.

        Returns:
            SiteDTO of the reloaded site with its ordered events

        Raises:
            SiteValidationError: on malformed dates, colours or events
            SlugConflictError: when the slug belongs to another site
        """
        raise NotImplementedError


class SqlSiteWriteModel(SiteWriteModel):
    """SQL implementation of the site reconciliation."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def save_site(self, owner_id: UUID, payload: Mapping[str, Any]) -> SiteDTO:
        payload = dict(payload)
        events = payload.pop("events", None)

        # Validate everything before the first write
        fields = normalize_site_fields(payload)
        event_rows = normalize_events(events) if events is not None else None

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            repository = SiteRepository(session)
            site = await repository.get_by_owner(owner_id, with_events=False)

            if site is None:
                fields["slug"] = await self._slug_for_new_site(repository, fields)
                site = await repository.create(owner_id, fields)
                logger.info("Created wedding site %s (%s) for owner %s", site.uuid, site.slug, owner_id)
            else:
                if fields.get("slug") is None:
                    # blank slug keeps the stored one
                    fields.pop("slug", None)
                elif await repository.is_slug_taken(fields["slug"], exclude_site_id=site.uuid):
                    logger.info("Slug %s already taken, rejecting save by %s", fields["slug"], owner_id)
                    raise SlugConflictError(fields["slug"])
                site = await repository.update(site, fields)
                logger.info("Updated wedding site %s for owner %s", site.uuid, owner_id)

            if event_rows is not None:
                await repository.replace_events(site.uuid, event_rows)
                logger.debug("Replaced events of site %s with %d events", site.uuid, len(event_rows))

            site = await repository.get_by_id(site.uuid)
            return SiteDTO.from_site(site)

    async def _slug_for_new_site(self, repository: SiteRepository, fields: dict[str, Any]) -> str:
        slug = fields.get("slug")
        if slug is not None:
            if await repository.is_slug_taken(slug):
                raise SlugConflictError(slug)
            return slug

        base = default_slug(fields.get("bride_name"), fields.get("groom_name"))
        candidate = base
        for _ in range(MAX_SLUG_ATTEMPTS):
            if not await repository.is_slug_taken(candidate):
                return candidate
            candidate = generate_unique_slug(base)
        raise SlugConflictError(candidate)


def normalize_site_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate scalar site fields and map them onto column values."""
    unknown = set(payload) - SITE_FIELDS
    if unknown:
        raise SiteValidationError(sorted(unknown)[0], "unknown site field")

    fields: dict[str, Any] = {}
    for name, value in payload.items():
        if name == "password":
            # None keeps the stored password, "" removes it
            if value is None:
                continue
            fields["password_hash"] = hash_password(value) if value else None
        elif name == "slug":
            fields["slug"] = _normalize_slug(value)
        elif name == "wedding_date":
            fields["wedding_date"] = parse_date(value, "wedding_date")
        elif name in COLOR_FIELDS:
            fields[name] = validate_color(value, name)
        elif name == "gallery_images":
            fields[name] = validate_gallery(value or [])
        else:
            fields[name] = value
    return fields


def normalize_events(events: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    rows = []
    for index, event in enumerate(events):
        row = {
            name: require_text(event.get(name), f"events[{index}].{name}")
            for name in EVENT_TEXT_FIELDS
        }
        row["date"] = require_date(event.get("date"), f"events[{index}].date")
        rows.append(row)
    return rows


def _normalize_slug(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    slug = slugify(value)
    if not slug:
        raise SiteValidationError("slug", "must contain letters or digits")
    if slug in RESERVED_SLUGS:
        raise SiteValidationError("slug", f"'{slug}' is reserved")
    return slug
