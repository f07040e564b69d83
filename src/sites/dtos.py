from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.sites.repository.orm_models import Event, RSVP, WeddingSite


class SiteValidationError(Exception):
    """Raised when a submission carries malformed or missing values."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        self.message = message
        super().__init__(f"{field_name}: {message}")


class SlugConflictError(Exception):
    """Raised when a slug is already taken by another wedding site."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Slug '{slug}' is already in use")


class SiteNotFoundError(Exception):
    """Raised when no wedding site matches the slug or owner."""

    def __init__(self, slug: str | None = None) -> None:
        self.slug = slug
        super().__init__(f"Wedding site '{slug}' not found" if slug else "Wedding site not found")


class SiteNotPublishedError(Exception):
    """Raised when a guest asks for a site that exists but is not published."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Wedding site '{slug}' is not published")


class IncorrectSitePasswordError(Exception):
    """Raised when a guest supplies the wrong site password."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Incorrect password for wedding site '{slug}'")


@dataclass(frozen=True)
class ThemeDTO:
    primary_color: str
    secondary_color: str
    accent_color: str
    heading_font: str
    body_font: str


@dataclass(frozen=True)
class EventDTO:
    uuid: UUID
    title: str
    date: date
    time: str
    location: str
    address: str
    order: int

    @classmethod
    def from_event(cls, event: "Event") -> "EventDTO":
        return cls(
            uuid=event.uuid,
            title=event.title,
            date=event.date,
            time=event.time,
            location=event.location,
            address=event.address,
            order=event.order,
        )


@dataclass(frozen=True)
class PublicSiteDTO:
    """Guest-facing view of a wedding site.

    Has no password and no owner attribute, so nothing built from it can leak them.
    """

    uuid: UUID
    slug: str | None
    is_published: bool
    has_password: bool
    theme: ThemeDTO
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
    events: list[EventDTO] = field(default_factory=list)

    @staticmethod
    def _site_fields(site: "WeddingSite") -> dict:
        return dict(
            uuid=site.uuid,
            slug=site.slug,
            is_published=site.is_published,
            has_password=site.password_hash is not None,
            theme=ThemeDTO(
                primary_color=site.primary_color,
                secondary_color=site.secondary_color,
                accent_color=site.accent_color,
                heading_font=site.heading_font,
                body_font=site.body_font,
            ),
            hero_enabled=site.hero_enabled,
            bride_name=site.bride_name,
            groom_name=site.groom_name,
            wedding_date=site.wedding_date,
            hero_image_url=site.hero_image_url,
            story_enabled=site.story_enabled,
            story_title=site.story_title,
            story_text=site.story_text,
            story_image1_url=site.story_image1_url,
            story_image2_url=site.story_image2_url,
            gallery_enabled=site.gallery_enabled,
            gallery_title=site.gallery_title,
            gallery_images=list(site.gallery_images or []),
            registry_enabled=site.registry_enabled,
            registry_title=site.registry_title,
            registry_text=site.registry_text,
            music_enabled=site.music_enabled,
            music_url=site.music_url,
            music_title=site.music_title,
            created_at=site.created_at,
            updated_at=site.updated_at,
            events=[EventDTO.from_event(event) for event in site.events],
        )

    @classmethod
    def from_site(cls, site: "WeddingSite") -> "PublicSiteDTO":
        return cls(**cls._site_fields(site))


@dataclass(frozen=True)
class SiteDTO(PublicSiteDTO):
    """Owner view of a wedding site."""

    user_id: UUID | None = None

    @classmethod
    def from_site(cls, site: "WeddingSite") -> "SiteDTO":
        return cls(user_id=site.user_id, **cls._site_fields(site))


@dataclass(frozen=True)
class PasswordRequiredDTO:
    """Returned by the gateway instead of a site when a password must be entered first."""

    requires_password: bool = True


@dataclass(frozen=True)
class RSVPDTO:
    uuid: UUID
    full_name: str
    email: str | None
    attending: bool
    dietary_restrictions: str | None
    message: str | None
    created_at: datetime

    @classmethod
    def from_rsvp(cls, rsvp: "RSVP") -> "RSVPDTO":
        return cls(
            uuid=rsvp.uuid,
            full_name=rsvp.full_name,
            email=rsvp.email,
            attending=rsvp.attending,
            dietary_restrictions=rsvp.dietary_restrictions,
            message=rsvp.message,
            created_at=rsvp.created_at,
        )


@dataclass(frozen=True)
class RSVPAnalyticsDTO:
    total: int = 0
    total_attending: int = 0
    total_declined: int = 0

    @classmethod
    def from_rsvps(cls, rsvps: list[RSVPDTO]) -> "RSVPAnalyticsDTO":
        total_attending = 0
        total_declined = 0
        for rsvp in rsvps:
            if rsvp.attending:
                total_attending += 1
            else:
                total_declined += 1
        return cls(
            total=total_attending + total_declined,
            total_attending=total_attending,
            total_declined=total_declined,
        )


@dataclass(frozen=True)
class RSVPListDTO:
    slug: str | None = None
    rsvps: list[RSVPDTO] = field(default_factory=list)
    analytics: RSVPAnalyticsDTO = field(default_factory=RSVPAnalyticsDTO)
