from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_current_session
from src.auth.dtos import SessionDTO
from src.sites.features.get_own_site.read_model import OwnSiteReadModel, SqlOwnSiteReadModel
from src.sites.schemas import OwnerSiteResponse
from src.sites.urls import OWN_SITE_URL

router = APIRouter()


class OwnSiteResponse(BaseModel):
    wedding_site: OwnerSiteResponse | None = None


def get_own_site_read_model() -> OwnSiteReadModel:
    """Dependency to get own site read model instance."""
    return SqlOwnSiteReadModel()


@router.get(OWN_SITE_URL, response_model=OwnSiteResponse)
async def get_own_site(
    session: SessionDTO = Depends(get_current_session),
    read_model: OwnSiteReadModel = Depends(get_own_site_read_model),
) -> OwnSiteResponse:
    """
    Get the caller's wedding site for the admin form.
    Returns ``null`` until the first save.
    """
    site = await read_model.get_site(session.user_id)
    if site is None:
        return OwnSiteResponse(wedding_site=None)
    return OwnSiteResponse(wedding_site=OwnerSiteResponse.model_validate(site))
