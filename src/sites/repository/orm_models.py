from datetime import date
from uuid import UUID

from sqlalchemy import JSON, Boolean, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy_utils import UUIDType

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp

DEFAULT_PRIMARY_COLOR = "#e4b6c6"
DEFAULT_SECONDARY_COLOR = "#d4a5a5"
DEFAULT_ACCENT_COLOR = "#9b7e7e"
DEFAULT_HEADING_FONT = "Playfair Display"
DEFAULT_BODY_FONT = "Lato"


class WeddingSite(Base, TimeStamp):
    __tablename__ = TableNames.WEDDING_SITES.value

    # One site per user
    user_id: Mapped[UUID] = mapped_column(
        UUIDType(binary=False),
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )

    # Publishing
    slug: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True, index=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Theme
    primary_color: Mapped[str] = mapped_column(
        String(7), default=DEFAULT_PRIMARY_COLOR, nullable=False
    )
    secondary_color: Mapped[str] = mapped_column(
        String(7), default=DEFAULT_SECONDARY_COLOR, nullable=False
    )
    accent_color: Mapped[str] = mapped_column(
        String(7), default=DEFAULT_ACCENT_COLOR, nullable=False
    )
    heading_font: Mapped[str] = mapped_column(
        String(100), default=DEFAULT_HEADING_FONT, nullable=False
    )
    body_font: Mapped[str] = mapped_column(
        String(100), default=DEFAULT_BODY_FONT, nullable=False
    )

    # Hero
    hero_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    bride_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    groom_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    wedding_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    hero_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # Story
    story_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    story_title: Mapped[str | None] = mapped_column(String(255), default="Our Story")
    story_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    story_image1_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    story_image2_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # Gallery
    gallery_enabled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    gallery_title: Mapped[str | None] = mapped_column(String(255), default="Our Gallery")
    gallery_images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    # Registry
    registry_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    registry_title: Mapped[str | None] = mapped_column(String(255), default="Gift Registry")
    registry_text: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Music
    music_enabled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    music_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    music_title: Mapped[str | None] = mapped_column(String(255), nullable=True)

    events: Mapped[list["Event"]] = relationship(
        "Event",
        back_populates="site",
        order_by="Event.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    rsvps: Mapped[list["RSVP"]] = relationship(
        "RSVP",
        back_populates="site",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<WeddingSite {self.slug or self.uuid}>"


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    site_id: Mapped[UUID] = mapped_column(
        UUIDType(binary=False),
        ForeignKey(f"{TableNames.WEDDING_SITES.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    # Free text, usually HH:MM
    time: Mapped[str] = mapped_column(String(50), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    # Map-embeddable URL or a plain address
    address: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    site: Mapped["WeddingSite"] = relationship("WeddingSite", back_populates="events")

    def __repr__(self) -> str:
        return f"<Event {self.order}: {self.title} on {self.date}>"


class RSVP(Base, TimeStamp):
    __tablename__ = TableNames.RSVPS.value

    site_id: Mapped[UUID] = mapped_column(
        UUIDType(binary=False),
        ForeignKey(f"{TableNames.WEDDING_SITES.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    attending: Mapped[bool] = mapped_column(Boolean, nullable=False)
    dietary_restrictions: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    site: Mapped["WeddingSite"] = relationship("WeddingSite", back_populates="rsvps")

    def __repr__(self) -> str:
        return f"<RSVP {self.full_name} attending={self.attending}>"
