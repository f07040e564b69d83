from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from src.auth.dependencies import get_current_session
from src.auth.dtos import SessionDTO
from src.sites.dtos import SiteValidationError, SlugConflictError
from src.sites.features.save_site.write_model import SiteWriteModel, SqlSiteWriteModel
from src.sites.schemas import OwnerSiteResponse
from src.sites.urls import OWN_SITE_URL

router = APIRouter()


class EventSubmit(BaseModel):
    """One event row. ``date`` is an ISO-8601 date or datetime string."""

    title: str = Field(min_length=1)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    location: str = Field(min_length=1)
    address: str = Field(min_length=1)


class SiteSubmit(BaseModel):
    """Admin form submission. Fields left out of the body are not touched."""

    # Publishing
    slug: str | None = None
    password: str | None = None
    is_published: bool = False

    # Theme
    primary_color: str = "#e4b6c6"
    secondary_color: str = "#d4a5a5"
    accent_color: str = "#9b7e7e"
    heading_font: str = Field(default="Playfair Display", min_length=1)
    body_font: str = Field(default="Lato", min_length=1)

    # Hero
    hero_enabled: bool = True
    bride_name: str | None = None
    groom_name: str | None = None
    wedding_date: str | None = None
    hero_image_url: str | None = None

    # Story
    story_enabled: bool = True
    story_title: str | None = None
    story_text: str | None = None
    story_image1_url: str | None = None
    story_image2_url: str | None = None

    # Gallery
    gallery_enabled: bool = False
    gallery_title: str | None = None
    gallery_images: list[str] = []

    # Registry
    registry_enabled: bool = True
    registry_title: str | None = None
    registry_text: str | None = None

    # Music
    music_enabled: bool = False
    music_url: str | None = None
    music_title: str | None = None

    events: list[EventSubmit] | None = None


class SiteSaveResponse(BaseModel):
    wedding_site: OwnerSiteResponse


def get_site_write_model() -> SiteWriteModel:
    """Dependency to get site write model instance."""
    return SqlSiteWriteModel()


@router.post(OWN_SITE_URL, response_model=SiteSaveResponse)
async def save_site(
    site_data: SiteSubmit,
    session: SessionDTO = Depends(get_current_session),
    write_model: SiteWriteModel = Depends(get_site_write_model),
) -> SiteSaveResponse:
    """
    Save the caller's wedding site.
    Creates the site on first save, updates it afterwards.
    A submitted ``events`` list replaces every stored event.
    """
    payload = site_data.model_dump(exclude_unset=True)

    try:
        site = await write_model.save_site(owner_id=session.user_id, payload=payload)
    except SiteValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SlugConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return SiteSaveResponse(wedding_site=OwnerSiteResponse.model_validate(site))
