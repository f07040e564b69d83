"""Response bodies shared by the wedding site and RSVP routes."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ThemeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    primary_color: str
    secondary_color: str
    accent_color: str
    heading_font: str
    body_font: str


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    title: str
    date: date
    time: str
    location: str
    address: str
    order: int


class PublicSiteResponse(BaseModel):
    """Guest-facing site. Deliberately has no password or user_id field."""

    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    slug: str | None
    is_published: bool
    has_password: bool
    theme: ThemeResponse
    hero_enabled: bool
    bride_name: str | None
    groom_name: str | None
    wedding_date: date | None
    hero_image_url: str | None
    story_enabled: bool
    story_title: str | None
    story_text: str | None
    story_image1_url: str | None
    story_image2_url: str | None
    gallery_enabled: bool
    gallery_title: str | None
    gallery_images: list[str]
    registry_enabled: bool
    registry_title: str | None
    registry_text: str | None
    music_enabled: bool
    music_url: str | None
    music_title: str | None
    created_at: datetime
    updated_at: datetime
    events: list[EventResponse]


class OwnerSiteResponse(PublicSiteResponse):
    user_id: UUID


class RSVPResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    full_name: str
    email: str | None
    attending: bool
    dietary_restrictions: str | None
    message: str | None
    created_at: datetime


class RSVPAnalyticsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    total_attending: int
    total_declined: int
