from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict

from src.sites.dtos import (
    IncorrectSitePasswordError,
    PasswordRequiredDTO,
    SiteNotFoundError,
    SiteNotPublishedError,
)
from src.sites.features.get_public_site.read_model import (
    GuestAccessGateway,
    SqlGuestAccessGateway,
)
from src.sites.schemas import PublicSiteResponse
from src.sites.urls import PUBLIC_SITE_ACCESS_URL, PUBLIC_SITE_URL

router = APIRouter()

# same wording for "missing" and "unpublished" so guests cannot tell them apart
SITE_NOT_AVAILABLE = "Wedding site not available"


class SiteAccessRequest(BaseModel):
    password: str


class PublicSiteEnvelope(BaseModel):
    wedding_site: PublicSiteResponse


class PasswordRequiredResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    requires_password: Literal[True] = True


def get_guest_access_gateway() -> GuestAccessGateway:
    """Dependency to get guest access gateway instance."""
    return SqlGuestAccessGateway()


async def _resolve(
    gateway: GuestAccessGateway, slug: str, password: str | None
) -> PublicSiteEnvelope | PasswordRequiredResponse:
    try:
        result = await gateway.resolve_site(slug, password)
    except SiteNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SITE_NOT_AVAILABLE)
    except SiteNotPublishedError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=SITE_NOT_AVAILABLE)
    except IncorrectSitePasswordError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect password")

    if isinstance(result, PasswordRequiredDTO):
        return PasswordRequiredResponse()
    return PublicSiteEnvelope(wedding_site=PublicSiteResponse.model_validate(result))


@router.get(PUBLIC_SITE_URL, response_model=PublicSiteEnvelope | PasswordRequiredResponse)
async def get_public_site(
    slug: str,
    gateway: GuestAccessGateway = Depends(get_guest_access_gateway),
) -> PublicSiteEnvelope | PasswordRequiredResponse:
    """
    Get a published wedding site for guests.
    Password-protected sites answer ``{"requires_password": true}`` and nothing else.
    """
    return await _resolve(gateway, slug, None)


@router.post(PUBLIC_SITE_ACCESS_URL, response_model=PublicSiteEnvelope | PasswordRequiredResponse)
async def access_public_site(
    slug: str,
    access: SiteAccessRequest,
    gateway: GuestAccessGateway = Depends(get_guest_access_gateway),
) -> PublicSiteEnvelope | PasswordRequiredResponse:
    """
    Unlock a password-protected wedding site.
    """
    return await _resolve(gateway, slug, access.password)
