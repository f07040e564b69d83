from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.auth.dependencies import get_current_session
from src.auth.dtos import SessionDTO
from src.sites.features.list_rsvps.read_model import RSVPReadModel, SqlRSVPReadModel
from src.sites.schemas import RSVPAnalyticsResponse, RSVPResponse
from src.sites.urls import LIST_RSVPS_URL

router = APIRouter()


class RSVPListResponse(BaseModel):
    rsvps: list[RSVPResponse]
    analytics: RSVPAnalyticsResponse


def get_rsvp_read_model() -> RSVPReadModel:
    """Dependency to get RSVP read model instance."""
    return SqlRSVPReadModel()


@router.get(LIST_RSVPS_URL, response_model=RSVPListResponse)
async def list_rsvps(
    session: SessionDTO = Depends(get_current_session),
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> RSVPListResponse:
    """
    List the RSVPs collected by the caller's wedding site.
    """
    result = await read_model.list_rsvps(session.user_id)
    return RSVPListResponse(
        rsvps=[RSVPResponse.model_validate(rsvp) for rsvp in result.rsvps],
        analytics=RSVPAnalyticsResponse.model_validate(result.analytics),
    )
